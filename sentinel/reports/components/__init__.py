"""
Report Components — Visual Building Blocks for PDF Generation

- charts: Smoothed load curve and service cards
"""

from sentinel.reports.components.charts import (
    draw_curve,
    draw_load_chart,
    draw_service_cards,
    quad_to_cubic,
)

__all__ = [
    "draw_curve",
    "draw_load_chart",
    "draw_service_cards",
    "quad_to_cubic",
]
