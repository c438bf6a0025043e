"""
SVG Rendering Surface — Chart Document Builder

Wraps stroke and area geometry in a standalone SVG document with a
0..width / 0..height viewBox, stretched to whatever box it is placed in.
"""

from typing import Sequence

import svgwrite

from .smoothing import CurveGeometry, format_number, smooth, smooth_area

STROKE_COLOR = "#4F46E5"
FILL_OPACITY = 0.2
STROKE_WIDTH = 2


def render_chart_svg(
    stroke: CurveGeometry,
    area: CurveGeometry,
    width: float = 100,
    height: float = 100,
) -> str:
    """
    Render the chart document.

    Empty geometry produces an SVG with no path elements.
    """
    w = format_number(width)
    h = format_number(height)

    # debug=False: vector-effect is outside the "full" profile validator
    dwg = svgwrite.Drawing(size=(w, h), debug=False)
    dwg["viewBox"] = f"0 0 {w} {h}"
    dwg.stretch()

    if area:
        dwg.add(dwg.path(
            d=area.to_svg(),
            fill=STROKE_COLOR,
            fill_opacity=FILL_OPACITY,
            stroke="none",
        ))
    if stroke:
        dwg.add(dwg.path(
            d=stroke.to_svg(),
            fill="none",
            stroke=STROKE_COLOR,
            stroke_width=STROKE_WIDTH,
            vector_effect="non-scaling-stroke",
        ))
    return dwg.tostring()


def render_series_svg(points: Sequence[float], width: float = 100, height: float = 100) -> str:
    """Convenience: smooth a raw sample window and render it."""
    return render_chart_svg(
        smooth(points, width, height),
        smooth_area(points, width, height),
        width,
        height,
    )
