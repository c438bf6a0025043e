"""
Charts Module — Curve smoothing and SVG rendering

Public API:
- smooth / smooth_area: Sample window -> CurveGeometry
- CurveGeometry and path commands (MoveTo, LineTo, QuadTo, ClosePath)
- render_chart_svg / render_series_svg: SVG document output
"""

from .smoothing import (
    ClosePath,
    CurveGeometry,
    EMPTY_GEOMETRY,
    LineTo,
    MoveTo,
    PathCommand,
    QuadTo,
    format_number,
    smooth,
    smooth_area,
    to_y,
)
from .svg import render_chart_svg, render_series_svg

__all__ = [
    "smooth",
    "smooth_area",
    "to_y",
    "format_number",
    "CurveGeometry",
    "EMPTY_GEOMETRY",
    "PathCommand",
    "MoveTo",
    "LineTo",
    "QuadTo",
    "ClosePath",
    "render_chart_svg",
    "render_series_svg",
]
