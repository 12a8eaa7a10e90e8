"""Spirograph curve.

Traces the point ``distance`` away from the center of a circle of radius
``outer_radius`` rolling inside a circle of radius ``inner_radius``:

    x = (R_i - R_o) cos(t) + d cos((R_i - R_o) / R_o * t)
    y = (R_i - R_o) sin(t) - d sin((R_i - R_o) / R_o * t)

The curve repeats once t reaches 2*pi*R_o / gcd(R_i, R_o); ``amount``
selects the fraction of that cycle to draw. The curve is sampled every
0.01 radians into one open polyline centered in the bounds.
"""

from dataclasses import dataclass
import logging
import math
import numpy as np

from ..errors import (
    DegenerateGeometryError,
    DivisionByZeroError,
    require_finite,
    require_integer,
)
from ..geometry import Path, PathBuilder, Point2D, Rect
from .base import ShapeGenerator

logger = logging.getLogger(__name__)

STEP = 0.01


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm.

    Signs are dropped first, so the result is never negative.
    gcd(a, 0) == |a| and gcd(0, 0) == 0.
    """
    a = abs(a)
    b = abs(b)
    while b != 0:
        a, b = b, a % b
    return a


@dataclass(frozen=True)
class SpirographGenerator(ShapeGenerator):
    """Dense polyline approximating a rolling-circle curve."""
    inner_radius: int = 125
    outer_radius: int = 75
    distance: int = 25
    amount: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "inner_radius", require_integer("inner_radius", self.inner_radius))
        object.__setattr__(self, "outer_radius", require_integer("outer_radius", self.outer_radius))
        object.__setattr__(self, "distance", require_integer("distance", self.distance))
        amount = require_finite("amount", self.amount)
        if amount < 0:
            raise DegenerateGeometryError(f"amount must be non-negative, got {amount}")

        if self.inner_radius == 0 and self.outer_radius == 0:
            raise DivisionByZeroError("gcd(0, 0) is undefined: both radii are zero")
        if self.outer_radius == 0:
            raise DivisionByZeroError("outer_radius must be non-zero")

    @property
    def divisor(self) -> int:
        return gcd(self.inner_radius, self.outer_radius)

    @property
    def end_theta(self) -> float:
        """Last parameter value drawn."""
        cycle = math.ceil(2 * math.pi * self.outer_radius / self.divisor)
        return cycle * self.amount

    @property
    def point_count(self) -> int:
        """Number of samples from t = 0 through ``end_theta``."""
        if self.end_theta < 0:
            return 0
        return int(math.floor(self.end_theta / STEP + 1e-9)) + 1

    def sample(self, bounds: Rect) -> np.ndarray:
        """(N, 2) array of curve points inside ``bounds``."""
        theta = np.arange(self.point_count) * STEP
        difference = float(self.inner_radius - self.outer_radius)
        ratio = difference / self.outer_radius

        x = difference * np.cos(theta) + self.distance * np.cos(ratio * theta)
        y = difference * np.sin(theta) - self.distance * np.sin(ratio * theta)

        x += bounds.width / 2
        y += bounds.height / 2
        return np.column_stack([x, y])

    def path(self, bounds: Rect) -> Path:
        points = self.sample(bounds)

        builder = PathBuilder()
        for i, (x, y) in enumerate(points):
            if i == 0:
                builder.move_to(Point2D(float(x), float(y)))
            else:
                builder.line_to(Point2D(float(x), float(y)))

        logger.debug(
            "Spirograph %d/%d/%d: end_theta=%.2f, %d points",
            self.inner_radius, self.outer_radius, self.distance,
            self.end_theta, len(points),
        )
        return builder.build()
