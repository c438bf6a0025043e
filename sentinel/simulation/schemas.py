"""
Dashboard Snapshot Schema — Pydantic Models

Immutable, render-ready view of the engine at one instant.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from sentinel.events.schemas import LogEntry
from sentinel.generator.schemas import ServiceNode


class DashboardSnapshot(BaseModel):
    """Everything a rendering surface needs for one frame."""
    model_config = ConfigDict(frozen=True)

    current_load: int = Field(..., ge=0, le=100, description="Rounded newest sample")
    points: List[float] = Field(..., description="Sample window, oldest first")
    services: List[ServiceNode]
    logs: List[LogEntry]
    status_label: str = Field(..., description="Cosmetic load label")
    running: bool
    taken_at: datetime
