"""
Chart Components — Smoothed Curve and Service Cards

Draws CurveGeometry onto a ReportLab canvas. Geometry is built in
screen space (y grows downward); ReportLab's origin is bottom-left, so
every point is flipped inside the target box.

ReportLab paths only support cubic Beziers, so each quadratic segment
is raised to the equivalent cubic.
"""

from typing import Optional, Sequence, Tuple

from reportlab.lib.colors import Color
from reportlab.pdfgen.canvas import Canvas

from sentinel.charts.smoothing import ClosePath, CurveGeometry, LineTo, MoveTo, QuadTo
from sentinel.generator.schemas import ServiceNode
from sentinel.reports.constants import (
    CARD_GAP,
    CARD_HEIGHT,
    FONT_BOLD,
    FONT_REGULAR,
    FONT_SIZE_HEADING,
    FONT_SIZE_SMALL,
    GRAY_BG,
    GRAY_BORDER,
    GRAY_DARK,
    GRAY_MEDIUM,
    PRIMARY,
    PRIMARY_FILL,
)


def quad_to_cubic(
    start: Tuple[float, float],
    control: Tuple[float, float],
    end: Tuple[float, float],
) -> Tuple[float, float, float, float, float, float]:
    """
    Degree-elevate a quadratic Bezier.

    Returns:
        (c1x, c1y, c2x, c2y, ex, ey) for a cubic curveTo
    """
    c1x = start[0] + 2.0 / 3.0 * (control[0] - start[0])
    c1y = start[1] + 2.0 / 3.0 * (control[1] - start[1])
    c2x = end[0] + 2.0 / 3.0 * (control[0] - end[0])
    c2y = end[1] + 2.0 / 3.0 * (control[1] - end[1])
    return (c1x, c1y, c2x, c2y, end[0], end[1])


def draw_curve(
    canvas: Canvas,
    geometry: CurveGeometry,
    x: float,
    y: float,
    height: float,
    stroke_color: Optional[Color] = None,
    fill_color: Optional[Color] = None,
    line_width: float = 1.5,
) -> None:
    """
    Draw a geometry inside the box whose bottom-left corner is (x, y).

    Args:
        canvas: ReportLab canvas
        geometry: Path built with the same height as the target box
        x, y: Bottom-left corner of the box
        height: Box height used when the geometry was built
        stroke_color: Stroke color (None = no stroke)
        fill_color: Fill color (None = no fill)
        line_width: Stroke width
    """
    if not geometry:
        return

    def to_page(px: float, py: float) -> Tuple[float, float]:
        return (x + px, y + height - py)

    canvas.saveState()
    path = canvas.beginPath()
    current = (0.0, 0.0)

    for command in geometry:
        if isinstance(command, MoveTo):
            current = (command.x, command.y)
            path.moveTo(*to_page(*current))
        elif isinstance(command, LineTo):
            current = (command.x, command.y)
            path.lineTo(*to_page(*current))
        elif isinstance(command, QuadTo):
            c1x, c1y, c2x, c2y, ex, ey = quad_to_cubic(
                current, (command.cx, command.cy), (command.x, command.y)
            )
            path.curveTo(*to_page(c1x, c1y), *to_page(c2x, c2y), *to_page(ex, ey))
            current = (command.x, command.y)
        elif isinstance(command, ClosePath):
            path.close()

    if stroke_color is not None:
        canvas.setStrokeColor(stroke_color)
        canvas.setLineWidth(line_width)
    if fill_color is not None:
        canvas.setFillColor(fill_color)

    canvas.drawPath(
        path,
        fill=1 if fill_color is not None else 0,
        stroke=1 if stroke_color is not None else 0,
    )
    canvas.restoreState()


def draw_load_chart(
    canvas: Canvas,
    stroke: CurveGeometry,
    area: CurveGeometry,
    x: float,
    y: float,
    width: float,
    height: float,
) -> None:
    """Area fill under the smoothed stroke, inside a bordered frame."""
    canvas.saveState()
    canvas.setStrokeColor(GRAY_BORDER)
    canvas.setLineWidth(0.5)
    canvas.rect(x, y, width, height, fill=0, stroke=1)
    canvas.restoreState()

    draw_curve(canvas, area, x, y, height, fill_color=PRIMARY_FILL)
    draw_curve(canvas, stroke, x, y, height, stroke_color=PRIMARY, line_width=2)


def draw_service_cards(
    canvas: Canvas,
    services: Sequence[ServiceNode],
    x: float,
    y: float,
    width: float,
) -> float:
    """
    Draw one card per service in a single row.

    Returns:
        Height consumed
    """
    if not services:
        return 0.0

    card_width = (width - CARD_GAP * (len(services) - 1)) / len(services)
    canvas.saveState()

    for i, service in enumerate(services):
        card_x = x + i * (card_width + CARD_GAP)
        card_y = y - CARD_HEIGHT

        canvas.setFillColor(GRAY_BG)
        canvas.setStrokeColor(GRAY_BORDER)
        canvas.setLineWidth(0.5)
        canvas.roundRect(card_x, card_y, card_width, CARD_HEIGHT, 6, fill=1, stroke=1)

        canvas.setFillColor(GRAY_MEDIUM)
        canvas.setFont(FONT_REGULAR, FONT_SIZE_SMALL)
        canvas.drawString(card_x + 10, card_y + CARD_HEIGHT - 16, service.name.upper())
        canvas.drawRightString(
            card_x + card_width - 10, card_y + CARD_HEIGHT - 16, service.status.value
        )

        canvas.setFillColor(GRAY_DARK)
        canvas.setFont(FONT_BOLD, FONT_SIZE_HEADING)
        canvas.drawString(card_x + 10, card_y + 12, f"{service.latency_ms} ms")

    canvas.restoreState()
    return float(CARD_HEIGHT)
