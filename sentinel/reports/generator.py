"""
Reporting Layer — One-Page PDF Dashboard Snapshot

Renders a DashboardSnapshot with ReportLab: header with current load
and status label, service latency cards, the smoothed load curve with
its area fill, and the live stream log table.

The "Snapshot Rule": the report draws exactly the frame it is given
and never reads the live engine.

Filename pattern: Sentinel_{YYYYMMDD_HHMMSS}.pdf
"""

import logging
from datetime import datetime
from io import BytesIO

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen.canvas import Canvas

from sentinel.charts.smoothing import smooth, smooth_area
from sentinel.simulation.schemas import DashboardSnapshot

from .components.charts import draw_load_chart, draw_service_cards
from .constants import (
    CARD_GAP,
    CHART_HEIGHT,
    FONT_BOLD,
    FONT_MONO,
    FONT_REGULAR,
    FONT_SIZE_BODY,
    FONT_SIZE_HEADING,
    FONT_SIZE_SMALL,
    FONT_SIZE_TITLE,
    GRAY_DARK,
    GRAY_LIGHT,
    GRAY_MEDIUM,
    LOG_ROW_HEIGHT,
    PAGE_MARGIN,
    PRIMARY,
    SEVERITY_COLORS,
)


logger = logging.getLogger(__name__)


def generate_filename(taken_at: datetime) -> str:
    """Smart filename: Sentinel_YYYYMMDD_HHMMSS.pdf"""
    return f"Sentinel_{taken_at.strftime('%Y%m%d_%H%M%S')}.pdf"


def generate_snapshot_pdf(snapshot: DashboardSnapshot, title: str = "Sentinel") -> bytes:
    """
    Render a dashboard snapshot as a one-page PDF.

    Args:
        snapshot: Frame to render
        title: Header title

    Returns:
        PDF file content
    """
    buffer = BytesIO()
    page_width, page_height = A4
    canvas = Canvas(buffer, pagesize=A4)
    canvas.setTitle(f"{title} Snapshot")

    content_width = page_width - 2 * PAGE_MARGIN
    cursor = page_height - PAGE_MARGIN

    # --- Header ---
    canvas.setFillColor(GRAY_DARK)
    canvas.setFont(FONT_BOLD, FONT_SIZE_TITLE)
    canvas.drawString(PAGE_MARGIN, cursor - FONT_SIZE_TITLE, title)
    canvas.setFont(FONT_REGULAR, FONT_SIZE_SMALL)
    canvas.setFillColor(GRAY_MEDIUM)
    canvas.drawString(
        PAGE_MARGIN,
        cursor - FONT_SIZE_TITLE - 14,
        f"Snapshot taken {snapshot.taken_at.strftime('%Y-%m-%d %H:%M:%S %Z').strip()}",
    )
    cursor -= FONT_SIZE_TITLE + 32

    # --- Service cards ---
    cursor -= draw_service_cards(canvas, snapshot.services, PAGE_MARGIN, cursor, content_width)
    cursor -= CARD_GAP * 2

    # --- Load chart ---
    canvas.setFillColor(GRAY_DARK)
    canvas.setFont(FONT_BOLD, FONT_SIZE_HEADING)
    canvas.drawString(PAGE_MARGIN, cursor - FONT_SIZE_HEADING, "Cluster Load")
    canvas.setFillColor(PRIMARY)
    canvas.drawRightString(
        PAGE_MARGIN + content_width,
        cursor - FONT_SIZE_HEADING,
        f"{snapshot.current_load}%  {snapshot.status_label.upper()}",
    )
    cursor -= FONT_SIZE_HEADING + 10

    chart_bottom = cursor - CHART_HEIGHT
    draw_load_chart(
        canvas,
        smooth(snapshot.points, content_width, CHART_HEIGHT),
        smooth_area(snapshot.points, content_width, CHART_HEIGHT),
        PAGE_MARGIN,
        chart_bottom,
        content_width,
        CHART_HEIGHT,
    )
    canvas.setFillColor(GRAY_LIGHT)
    canvas.setFont(FONT_REGULAR, FONT_SIZE_SMALL)
    canvas.drawString(PAGE_MARGIN, chart_bottom - 12, "OLDEST")
    canvas.drawRightString(PAGE_MARGIN + content_width, chart_bottom - 12, "NOW")
    cursor = chart_bottom - 36

    # --- Live stream ---
    canvas.setFillColor(GRAY_DARK)
    canvas.setFont(FONT_BOLD, FONT_SIZE_HEADING)
    canvas.drawString(PAGE_MARGIN, cursor - FONT_SIZE_HEADING, "Live Stream")
    cursor -= FONT_SIZE_HEADING + 10

    if not snapshot.logs:
        canvas.setFillColor(GRAY_MEDIUM)
        canvas.setFont(FONT_REGULAR, FONT_SIZE_BODY)
        canvas.drawString(PAGE_MARGIN, cursor - FONT_SIZE_BODY, "No events yet.")

    for entry in snapshot.logs:
        row_y = cursor - FONT_SIZE_BODY
        canvas.setFillColor(GRAY_MEDIUM)
        canvas.setFont(FONT_MONO, FONT_SIZE_SMALL)
        canvas.drawString(PAGE_MARGIN, row_y, entry.time)
        canvas.setFillColor(GRAY_DARK)
        canvas.setFont(FONT_REGULAR, FONT_SIZE_BODY)
        canvas.drawString(PAGE_MARGIN + 60, row_y, entry.message)
        canvas.setFillColor(SEVERITY_COLORS[entry.severity.value])
        canvas.setFont(FONT_BOLD, FONT_SIZE_SMALL)
        canvas.drawRightString(PAGE_MARGIN + content_width, row_y, entry.severity.value.upper())
        cursor -= LOG_ROW_HEIGHT

    canvas.showPage()
    canvas.save()

    pdf_bytes = buffer.getvalue()
    logger.info(
        f"[Reports] Snapshot PDF rendered: {len(pdf_bytes)} bytes, "
        f"{len(snapshot.points)} points, {len(snapshot.logs)} log entries"
    )
    return pdf_bytes
