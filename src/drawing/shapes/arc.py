"""Insettable circular arc.

Angles follow the "zero points up" convention: both angles are turned a
quarter turn back before drawing. The ``clockwise`` flag handed to the
path is the complement of the caller's flag, because the underlying arc
primitive reads it in a y-up coordinate system while bounds are y-down.
Callers pass the complement of the direction they want to see.
"""

from dataclasses import dataclass, replace
import logging
import math

from ..errors import require_finite
from ..geometry import Path, PathBuilder, Rect, radians_from_degrees
from .base import ShapeGenerator

logger = logging.getLogger(__name__)

ROTATION_ADJUSTMENT = math.pi / 2


@dataclass(frozen=True)
class ArcGenerator(ShapeGenerator):
    """Arc centered in its bounds with radius ``width/2 - inset_amount``."""
    start_angle: float
    end_angle: float
    clockwise: bool
    inset_amount: float = 0.0

    def __post_init__(self):
        require_finite("start_angle", self.start_angle)
        require_finite("end_angle", self.end_angle)
        require_finite("inset_amount", self.inset_amount)

    @classmethod
    def from_degrees(
        cls,
        start_degrees: float,
        end_degrees: float,
        clockwise: bool,
        inset_amount: float = 0.0,
    ) -> "ArcGenerator":
        """Build from angles given in degrees."""
        return cls(
            radians_from_degrees(start_degrees),
            radians_from_degrees(end_degrees),
            clockwise,
            inset_amount,
        )

    def inset(self, by: float) -> "ArcGenerator":
        """Copy with the inset grown by ``by``; the original is unchanged."""
        return replace(self, inset_amount=self.inset_amount + by)

    def radius(self, bounds: Rect) -> float:
        """Drawing radius in ``bounds``, clamped at zero."""
        radius = bounds.width / 2 - self.inset_amount
        if radius <= 0:
            if radius < 0:
                logger.warning(
                    "Arc inset %.2f exceeds half width %.2f; drawing a zero-radius point",
                    self.inset_amount, bounds.width / 2,
                )
            return 0.0
        return radius

    def path(self, bounds: Rect) -> Path:
        builder = PathBuilder()
        builder.add_arc(
            center=bounds.center,
            radius=self.radius(bounds),
            start_angle=self.start_angle - ROTATION_ADJUSTMENT,
            end_angle=self.end_angle - ROTATION_ADJUSTMENT,
            clockwise=not self.clockwise,
        )
        return builder.build()
