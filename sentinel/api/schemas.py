"""
Pydantic Schemas — API Response Models
"""

from pydantic import BaseModel, Field

from sentinel.simulation.schemas import DashboardSnapshot


class DashboardResponse(DashboardSnapshot):
    """Snapshot plus SVG path data for the stroke and area fill."""
    stroke_path: str = Field(..., description="SVG path data for the smoothed line")
    area_path: str = Field(..., description="SVG path data closed to the baseline")


class EngineStateResponse(BaseModel):
    """Response for lifecycle control endpoints."""
    status: str
    running: bool
    message: str
