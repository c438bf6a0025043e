"""
API Routes — Dashboard Endpoints

- GET  /dashboard             — Snapshot + SVG path data (JSON)
- GET  /dashboard/chart.svg   — Standalone SVG chart
- GET  /dashboard/report.pdf  — One-page PDF snapshot
- POST /dashboard/start       — Arm the simulation clock (idempotent)
- POST /dashboard/stop        — Disarm the simulation clock (idempotent)

All handlers are async. Every read copies engine state, so a response
never mixes two ticks.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from sentinel.config import settings
from sentinel.reports import generate_filename, generate_snapshot_pdf
from sentinel.simulation.engine import MonitoringEngine

from .schemas import DashboardResponse, EngineStateResponse
from .services import build_chart_svg, build_dashboard, get_engine

logger = logging.getLogger(__name__)


router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get(
    "",
    response_model=DashboardResponse,
    summary="Current dashboard frame",
    description="Load window, services, live stream and smoothed path data.",
)
async def get_dashboard(
    width: float = Query(default=100, gt=0, allow_inf_nan=False, description="Drawing width"),
    height: float = Query(default=100, gt=0, allow_inf_nan=False, description="Drawing height"),
    engine: MonitoringEngine = Depends(get_engine),
) -> DashboardResponse:
    return build_dashboard(engine, width, height)


@router.get(
    "/chart.svg",
    response_class=Response,
    responses={200: {"content": {"image/svg+xml": {}}}},
    summary="Smoothed load chart as SVG",
)
async def get_chart_svg(
    width: float = Query(default=100, gt=0, allow_inf_nan=False),
    height: float = Query(default=100, gt=0, allow_inf_nan=False),
    engine: MonitoringEngine = Depends(get_engine),
) -> Response:
    return Response(content=build_chart_svg(engine, width, height), media_type="image/svg+xml")


@router.get(
    "/report.pdf",
    response_class=Response,
    responses={
        200: {"content": {"application/pdf": {}}},
        500: {"description": "PDF rendering failed"},
    },
    summary="One-page PDF snapshot",
)
async def get_report_pdf(engine: MonitoringEngine = Depends(get_engine)) -> Response:
    frame = engine.snapshot()
    try:
        pdf_bytes = generate_snapshot_pdf(frame, title=settings.PROJECT_NAME)
    except Exception as e:
        logger.exception("[API] PDF snapshot failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"PDF generation failed: {e}",
        ) from e

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{generate_filename(frame.taken_at)}"'},
    )


@router.post("/start", response_model=EngineStateResponse)
async def start_engine(engine: MonitoringEngine = Depends(get_engine)) -> EngineStateResponse:
    """Arm the simulation; a running engine is left untouched."""
    if engine.running:
        return EngineStateResponse(status="unchanged", running=True, message="Engine already running.")
    engine.start()
    return EngineStateResponse(status="started", running=True, message="Engine started.")


@router.post("/stop", response_model=EngineStateResponse)
async def stop_engine(engine: MonitoringEngine = Depends(get_engine)) -> EngineStateResponse:
    """Disarm the simulation; the last frame stays readable."""
    if not engine.running:
        return EngineStateResponse(status="unchanged", running=False, message="Engine already stopped.")
    engine.stop()
    return EngineStateResponse(status="stopped", running=False, message="Engine stopped.")
