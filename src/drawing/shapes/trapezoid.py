"""Trapezoid with an inset top edge.

The outline runs bottom-left, top-left, top-right, bottom-right and back
to bottom-left, repeating the first vertex instead of emitting a close.
The left edge sits at x = 0 regardless of the bounds origin. Insets beyond
half the width cross the top edge over into a bowtie, which is drawn as is.
"""

from dataclasses import dataclass

from ..errors import require_finite
from ..geometry import Path, PathBuilder, Point2D, Rect
from .base import ShapeGenerator


@dataclass(frozen=True)
class TrapezoidGenerator(ShapeGenerator):
    inset_amount: float = 50.0

    def __post_init__(self):
        require_finite("inset_amount", self.inset_amount)

    def path(self, bounds: Rect) -> Path:
        builder = PathBuilder()
        builder.move_to(Point2D(0.0, bounds.max_y))
        builder.line_to(Point2D(self.inset_amount, bounds.min_y))
        builder.line_to(Point2D(bounds.max_x - self.inset_amount, bounds.min_y))
        builder.line_to(Point2D(bounds.max_x, bounds.max_y))
        builder.line_to(Point2D(0.0, bounds.max_y))

        return builder.build()
