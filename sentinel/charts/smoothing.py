"""
Path Smoother — Midpoint Quadratic Curve Through a Sample Window

Instead of joining raw samples with straight lines (which looks like a
mountain range at 10 updates/sec), the curve passes through the
*midpoints* between neighbours and uses each raw sample as the control
point of a quadratic segment:

    M first  ->  L mid(0,1)  ->  Q p1 mid(1,2)  ->  ...  ->  L last

The final straight segment lands exactly on the newest sample so the
leading edge never lags.

Geometry is abstract (MoveTo/LineTo/QuadTo/ClosePath). `to_svg()` gives
SVG path data; the PDF renderer walks the commands directly.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple, Union

from sentinel.generator.config import SCALE_MAX


def format_number(value: float) -> str:
    """Compact, deterministic number formatting for path data."""
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


# ============================================================================
# Path Commands
# ============================================================================

@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float

    def svg(self) -> str:
        return f"M {format_number(self.x)} {format_number(self.y)}"


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float

    def svg(self) -> str:
        return f"L {format_number(self.x)} {format_number(self.y)}"


@dataclass(frozen=True)
class QuadTo:
    cx: float
    cy: float
    x: float
    y: float

    def svg(self) -> str:
        return (
            f"Q {format_number(self.cx)} {format_number(self.cy)}, "
            f"{format_number(self.x)} {format_number(self.y)}"
        )


@dataclass(frozen=True)
class ClosePath:
    def svg(self) -> str:
        return "Z"


PathCommand = Union[MoveTo, LineTo, QuadTo, ClosePath]


@dataclass(frozen=True)
class CurveGeometry:
    """Immutable sequence of path commands. Empty geometry is falsy."""
    commands: Tuple[PathCommand, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands)

    @property
    def end_point(self) -> Optional[Tuple[float, float]]:
        """Last explicit coordinate in the path (None when empty)."""
        for command in reversed(self.commands):
            if not isinstance(command, ClosePath):
                return (command.x, command.y)
        return None

    def to_svg(self) -> str:
        return " ".join(command.svg() for command in self.commands)


EMPTY_GEOMETRY = CurveGeometry()


# ============================================================================
# Smoothing
# ============================================================================

def to_y(value: float, height: float, scale: float = SCALE_MAX) -> float:
    """Map a 0..scale value to screen space (higher value draws higher)."""
    return height - (value / scale) * height


def _stroke_commands(points: Sequence[float], width: float, height: float) -> Tuple[PathCommand, ...]:
    count = len(points)
    step_x = width / (count - 1)

    commands = [MoveTo(0.0, to_y(points[0], height))]

    for i in range(count - 1):
        x0 = i * step_x
        y0 = to_y(points[i], height)
        x1 = (i + 1) * step_x
        y1 = to_y(points[i + 1], height)

        mid_x = (x0 + x1) / 2
        mid_y = (y0 + y1) / 2

        if i == 0:
            # No previous control point yet
            commands.append(LineTo(mid_x, mid_y))
        else:
            commands.append(QuadTo(x0, y0, mid_x, mid_y))

    # Land exactly on the newest sample
    commands.append(LineTo(float(width), to_y(points[-1], height)))
    return tuple(commands)


def smooth(points: Sequence[float], width: float, height: float) -> CurveGeometry:
    """
    Build the smoothed stroke path for a window of samples.

    Args:
        points: Samples on the 0-100 scale, oldest first
        width, height: Target drawing area

    Returns:
        CurveGeometry; empty when fewer than 2 points are given
    """
    if len(points) < 2:
        return EMPTY_GEOMETRY
    return CurveGeometry(_stroke_commands(points, width, height))


def smooth_area(points: Sequence[float], width: float, height: float) -> CurveGeometry:
    """Stroke path closed down to the baseline, for area fills."""
    if len(points) < 2:
        return EMPTY_GEOMETRY
    return CurveGeometry(
        _stroke_commands(points, width, height)
        + (LineTo(float(width), float(height)), LineTo(0.0, float(height)), ClosePath())
    )
