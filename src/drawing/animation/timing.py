"""Timing curves mapping linear progress to eased progress.

Eased curves are CSS-style cubic Béziers through (0, 0) and (1, 1),
evaluated by bisecting on the curve's x coordinate.
"""

from enum import Enum
from typing import Callable


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> Callable[[float], float]:
    """Timing function for control points (x1, y1) and (x2, y2)."""

    def coordinate(s: float, p1: float, p2: float) -> float:
        return 3 * (1 - s) ** 2 * s * p1 + 3 * (1 - s) * s ** 2 * p2 + s ** 3

    def timing(t: float) -> float:
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0
        low, high = 0.0, 1.0
        for _ in range(40):
            mid = (low + high) / 2
            if coordinate(mid, x1, x2) < t:
                low = mid
            else:
                high = mid
        return coordinate((low + high) / 2, y1, y2)

    return timing


class TimingCurve(Enum):
    """Named timing curves."""
    LINEAR = "linear"
    EASE_IN = "ease_in"
    EASE_OUT = "ease_out"
    EASE_IN_OUT = "ease_in_out"

    def __call__(self, t: float) -> float:
        return _CURVES[self](t)


_CURVES = {
    TimingCurve.LINEAR: lambda t: min(1.0, max(0.0, t)),
    TimingCurve.EASE_IN: cubic_bezier(0.42, 0.0, 1.0, 1.0),
    TimingCurve.EASE_OUT: cubic_bezier(0.0, 0.0, 0.58, 1.0),
    TimingCurve.EASE_IN_OUT: cubic_bezier(0.42, 0.0, 0.58, 1.0),
}
