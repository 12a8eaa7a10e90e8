"""Animatable data for shape generators.

The generators know nothing about animation. This module maps each
animatable generator type to the value a transition interpolates and back:

- ArrowGenerator: ``amount``
- TrapezoidGenerator: ``inset_amount``
- CheckerboardGenerator: ``AnimatablePair(rows, columns)``, truncated toward
  zero when written back so every frame is a whole grid

Interpolating rows and columns as one pair keeps both counts moving in
step instead of jittering independently.
"""

from dataclasses import dataclass, replace
from typing import Callable, Dict, Union

from ..shapes import (
    ArrowGenerator,
    CheckerboardGenerator,
    ShapeGenerator,
    TrapezoidGenerator,
)


@dataclass(frozen=True)
class AnimatablePair:
    """Two values interpolated together."""
    first: float
    second: float

    def __add__(self, other: "AnimatablePair") -> "AnimatablePair":
        return AnimatablePair(self.first + other.first, self.second + other.second)

    def __sub__(self, other: "AnimatablePair") -> "AnimatablePair":
        return AnimatablePair(self.first - other.first, self.second - other.second)

    def __mul__(self, scalar: float) -> "AnimatablePair":
        return AnimatablePair(self.first * scalar, self.second * scalar)

    __rmul__ = __mul__


AnimatableValue = Union[float, AnimatablePair]


def interpolate(start: AnimatableValue, end: AnimatableValue, fraction: float) -> AnimatableValue:
    """Linear interpolation; fraction 0 gives ``start``, 1 gives ``end``."""
    return start + (end - start) * fraction


@dataclass(frozen=True)
class AnimatableProperty:
    """Getter/setter pair over a generator's interpolable value."""
    getter: Callable[[ShapeGenerator], AnimatableValue]
    setter: Callable[[ShapeGenerator, AnimatableValue], ShapeGenerator]


ANIMATABLE_PROPERTIES: Dict[type, AnimatableProperty] = {
    ArrowGenerator: AnimatableProperty(
        getter=lambda shape: float(shape.amount),
        setter=lambda shape, value: replace(shape, amount=float(value)),
    ),
    TrapezoidGenerator: AnimatableProperty(
        getter=lambda shape: float(shape.inset_amount),
        setter=lambda shape, value: replace(shape, inset_amount=float(value)),
    ),
    CheckerboardGenerator: AnimatableProperty(
        getter=lambda shape: AnimatablePair(float(shape.rows), float(shape.columns)),
        setter=lambda shape, value: replace(
            shape, rows=int(value.first), columns=int(value.second)
        ),
    ),
}


def is_animatable(shape: ShapeGenerator) -> bool:
    return type(shape) in ANIMATABLE_PROPERTIES


def _property_for(shape: ShapeGenerator) -> AnimatableProperty:
    try:
        return ANIMATABLE_PROPERTIES[type(shape)]
    except KeyError:
        raise TypeError(f"{type(shape).__name__} has no animatable data") from None


def animatable_data(shape: ShapeGenerator) -> AnimatableValue:
    """Current interpolable value of ``shape``."""
    return _property_for(shape).getter(shape)


def with_animatable_data(shape: ShapeGenerator, value: AnimatableValue) -> ShapeGenerator:
    """Copy of ``shape`` with its interpolable value replaced."""
    return _property_for(shape).setter(shape, value)
