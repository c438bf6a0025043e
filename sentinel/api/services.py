"""
API Services — Engine Access and Frame Assembly

Owns the process-wide MonitoringEngine and turns engine reads into
response payloads. Routes receive the engine through `get_engine`, so
tests can swap in a host-driven engine via dependency overrides.
"""

import logging
from typing import Optional

from sentinel.charts.smoothing import smooth, smooth_area
from sentinel.charts.svg import render_chart_svg
from sentinel.config import settings
from sentinel.simulation.engine import MonitoringEngine

from .schemas import DashboardResponse

logger = logging.getLogger(__name__)


_engine: Optional[MonitoringEngine] = None


def get_engine() -> MonitoringEngine:
    """Dependency that provides the shared engine (built on first use)."""
    global _engine
    if _engine is None:
        _engine = MonitoringEngine.from_settings(settings)
        logger.info("[API] MonitoringEngine created from settings")
    return _engine


def build_dashboard(engine: MonitoringEngine, width: float, height: float) -> DashboardResponse:
    """
    Take one snapshot and derive both paths from that same snapshot.

    Args:
        engine: Engine to read
        width, height: Drawing area for the path geometry

    Returns:
        DashboardResponse with stroke and area path data
    """
    frame = engine.snapshot()
    return DashboardResponse(
        **frame.model_dump(),
        stroke_path=smooth(frame.points, width, height).to_svg(),
        area_path=smooth_area(frame.points, width, height).to_svg(),
    )


def build_chart_svg(engine: MonitoringEngine, width: float, height: float) -> str:
    points = engine.points()
    return render_chart_svg(
        smooth(points, width, height),
        smooth_area(points, width, height),
        width,
        height,
    )
