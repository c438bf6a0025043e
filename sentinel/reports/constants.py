"""
Snapshot Report Constants — Colors, Fonts, Layout

All magic numbers for the PDF snapshot live here.
"""

from reportlab.lib.colors import Color, HexColor

# =============================================================================
# COLOR PALETTE
# =============================================================================

PRIMARY: Color = HexColor("#4f46e5")       # Indigo - curve stroke, headers
PRIMARY_FILL: Color = Color(0.31, 0.27, 0.90, alpha=0.2)
SUCCESS: Color = HexColor("#10b981")       # Green - success log entries
WARNING: Color = HexColor("#f59e0b")       # Amber - warning log entries

GRAY_DARK: Color = HexColor("#374151")     # Primary text
GRAY_MEDIUM: Color = HexColor("#6b7280")   # Secondary text
GRAY_LIGHT: Color = HexColor("#9ca3af")    # Axis labels
GRAY_BG: Color = HexColor("#f9fafb")       # Card backgrounds
GRAY_BORDER: Color = HexColor("#e5e7eb")   # Borders

SEVERITY_COLORS: dict[str, Color] = {
    "success": SUCCESS,
    "warning": WARNING,
}


# =============================================================================
# TYPOGRAPHY
# =============================================================================

FONT_REGULAR = "Helvetica"
FONT_BOLD = "Helvetica-Bold"
FONT_MONO = "Courier"

FONT_SIZE_TITLE = 18
FONT_SIZE_HEADING = 12
FONT_SIZE_BODY = 10
FONT_SIZE_SMALL = 8


# =============================================================================
# LAYOUT (points)
# =============================================================================

PAGE_MARGIN = 48
CHART_HEIGHT = 200
CARD_HEIGHT = 56
CARD_GAP = 12
LOG_ROW_HEIGHT = 16
