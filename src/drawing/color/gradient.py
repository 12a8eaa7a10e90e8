"""Color-cycling two-stop linear gradient.

Each stop takes its hue from a cycle position, wrapped back under 1 by a
single subtraction. The hue formula divides a literal zero index by
``steps`` before adding the cycle position, so ``steps`` never changes the
result; it is still validated because it is a divisor.

Stops are produced in drawing order: the first cycle position's color at
location 1, the second's at location 0.
"""

from dataclasses import dataclass, field
from typing import Tuple
import colorsys
import numpy as np

from ..errors import (
    DegenerateGeometryError,
    DivisionByZeroError,
    require_finite,
    require_integer,
)

# Index sampled from the discretized hue space
SAMPLED_INDEX = 0


def wrap01(hue: float) -> float:
    """Wrap a hue in [0, 2) back toward [0, 1] with one subtraction.

    Only values strictly above 1 are wrapped, so wrap01(1.0) == 1.0, which
    names the same hue as 0.0.
    """
    if hue > 1:
        hue -= 1
    return hue


@dataclass(frozen=True)
class GradientStop:
    """One gradient color stop in hue/saturation/brightness form."""
    hue_fraction: float
    location: float
    saturation: float = 1.0
    brightness: float = 1.0

    def to_rgb(self) -> Tuple[float, float, float]:
        """RGB components in [0, 1]."""
        return colorsys.hsv_to_rgb(self.hue_fraction % 1.0, self.saturation, self.brightness)

    def to_hex(self) -> str:
        r, g, b = self.to_rgb()
        return "#{:02x}{:02x}{:02x}".format(
            int(round(r * 255)), int(round(g * 255)), int(round(b * 255))
        )


@dataclass(frozen=True)
class LinearGradient:
    """Gradient along the line from ``start_point`` to ``end_point``.

    Points are unit coordinates of the filled rectangle: (0, 0) is its
    top-left corner and (1, 1) its bottom-right.
    """
    start_point: Tuple[float, float]
    end_point: Tuple[float, float]
    stops: Tuple[GradientStop, ...]

    def sorted_stops(self) -> Tuple[GradientStop, ...]:
        """Stops ordered by location, as most renderers expect."""
        return tuple(sorted(self.stops, key=lambda s: s.location))

    def sample(self, width: int, height: int) -> np.ndarray:
        """Rasterize into a (height, width, 3) RGB array.

        Each pixel center is projected onto the gradient line and colored by
        interpolating between stops. When start and end coincide there is no
        line to project onto and the last stop fills everything.
        """
        stops = self.sorted_stops()
        locations = np.array([s.location for s in stops])
        colors = np.array([s.to_rgb() for s in stops])

        sx, sy = self.start_point
        ex, ey = self.end_point
        dx = ex - sx
        dy = ey - sy
        length_sq = dx * dx + dy * dy

        u = (np.arange(width) + 0.5) / max(width, 1)
        v = (np.arange(height) + 0.5) / max(height, 1)
        uu, vv = np.meshgrid(u, v)
        if length_sq == 0:
            t = np.ones_like(uu)
        else:
            t = np.clip(((uu - sx) * dx + (vv - sy) * dy) / length_sq, 0.0, 1.0)

        image = np.zeros((height, width, 3))
        for channel in range(3):
            image[..., channel] = np.interp(t, locations, colors[:, channel])
        return image


@dataclass(frozen=True)
class ColorCycleGradient:
    """Two hues picked from cycle positions.

    ``start_point`` is (top, left) and ``end_point`` is (bottom, right) in
    unit coordinates; both default to 0.2 on each axis.
    """
    cycle_position_1: float = 0.0
    cycle_position_2: float = 0.0
    steps: int = 100
    start_point: Tuple[float, float] = field(default=(0.2, 0.2))
    end_point: Tuple[float, float] = field(default=(0.2, 0.2))

    def __post_init__(self):
        steps = require_integer("steps", self.steps)
        if steps <= 0:
            raise DivisionByZeroError(f"steps must be positive, got {steps}")
        object.__setattr__(self, "steps", steps)
        for name in ("cycle_position_1", "cycle_position_2"):
            value = require_finite(name, getattr(self, name))
            if not 0 <= value < 2:
                raise DegenerateGeometryError(
                    f"{name} must be in [0, 2) to wrap to a hue, got {value}"
                )

    def hue(self, cycle_position: float) -> float:
        return wrap01(SAMPLED_INDEX / self.steps + cycle_position)

    @property
    def hues(self) -> Tuple[float, float]:
        return (self.hue(self.cycle_position_1), self.hue(self.cycle_position_2))

    def stops(self, brightness: float = 1.0) -> Tuple[GradientStop, GradientStop]:
        """Exactly two stops at full saturation."""
        brightness = require_finite("brightness", brightness)
        first, second = self.hues
        return (
            GradientStop(hue_fraction=first, location=1.0, brightness=brightness),
            GradientStop(hue_fraction=second, location=0.0, brightness=brightness),
        )

    def linear_gradient(self, brightness: float = 1.0) -> LinearGradient:
        return LinearGradient(
            start_point=self.start_point,
            end_point=self.end_point,
            stops=self.stops(brightness),
        )
