"""Downward-pointing arrow.

Seven vertices, affine in the bounds and ``amount``: a shaft of width
``amount`` from the top edge to two thirds of the height, then a head
three times as wide whose tip sits ``amount * 3/2`` below the vertical
midpoint. The outline is left open; a renderer closes it when filling.
"""

from dataclasses import dataclass

from ..errors import require_finite
from ..geometry import Path, PathBuilder, Point2D, Rect
from .base import ShapeGenerator


@dataclass(frozen=True)
class ArrowGenerator(ShapeGenerator):
    """Arrow silhouette controlled by a single width ``amount``.

    Usable values are roughly 50-130 in a 300pt frame. Nothing is clamped;
    extreme values give a self-intersecting outline.
    """
    amount: float = 50.0

    def __post_init__(self):
        require_finite("amount", self.amount)

    def path(self, bounds: Rect) -> Path:
        half = self.amount / 2
        wide = self.amount * 3 / 2
        shoulder_y = bounds.max_y / 3 * 2

        builder = PathBuilder()
        builder.move_to(Point2D(bounds.mid_x + half, bounds.min_y))
        builder.line_to(Point2D(bounds.mid_x - half, bounds.min_y))
        builder.line_to(Point2D(bounds.mid_x - half, shoulder_y))
        builder.line_to(Point2D(bounds.mid_x - wide, shoulder_y))
        builder.line_to(Point2D(bounds.mid_x, bounds.mid_y + wide))
        builder.line_to(Point2D(bounds.mid_x + wide, shoulder_y))
        builder.line_to(Point2D(bounds.mid_x + half, shoulder_y))

        return builder.build()
