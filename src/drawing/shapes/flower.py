"""Flower of overlapping elliptical petals.

Sixteen petals, one every pi/8. Each petal is an ellipse of
``petal_width`` by half the bounds width, shifted ``petal_offset`` along x,
then rotated about the origin and moved to the center of the bounds.
Overlaps only read as petals under the even-odd fill rule.
"""

from dataclasses import dataclass
from typing import List
import logging
import math

from ..errors import require_finite
from ..geometry import AffineTransform, Path, PathBuilder, Rect
from .base import ShapeGenerator

logger = logging.getLogger(__name__)

PETAL_COUNT = 16
PETAL_STEP = 2 * math.pi / PETAL_COUNT


def petal_angles() -> List[float]:
    """Rotation of each petal, from 0 up to (but excluding) a full turn."""
    return [i * PETAL_STEP for i in range(PETAL_COUNT)]


@dataclass(frozen=True)
class FlowerGenerator(ShapeGenerator):
    """Union of rotated ellipses."""
    petal_offset: float = -20.0
    petal_width: float = 100.0

    fill_rule = "evenodd"

    def __post_init__(self):
        require_finite("petal_offset", self.petal_offset)
        require_finite("petal_width", self.petal_width)

    def petal(self, bounds: Rect) -> Path:
        """The unrotated petal ellipse.

        A negative width is standardized the way a graphics rect would be.
        """
        return Path.ellipse_in(Rect(
            min(self.petal_offset, self.petal_offset + self.petal_width),
            0.0,
            abs(self.petal_width),
            bounds.width / 2,
        ))

    def path(self, bounds: Rect) -> Path:
        original_petal = self.petal(bounds)
        to_center = AffineTransform.translation(bounds.width / 2, bounds.height / 2)

        builder = PathBuilder()
        for angle in petal_angles():
            position = AffineTransform.rotation(angle).concatenating(to_center)
            builder.add_path(original_petal.applying(position))

        path = builder.build()
        logger.debug("Flower: %d petals, %d segments", PETAL_COUNT, len(path))
        return path
