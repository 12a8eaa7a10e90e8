"""Interpolation layer for animating shapes.

Transitions compute intermediate parameter sets and leave drawing to the
pure generators, so a frame is just another ``path(bounds)`` call.
"""

from .animatable import (
    AnimatablePair,
    AnimatableProperty,
    ANIMATABLE_PROPERTIES,
    animatable_data,
    interpolate,
    is_animatable,
    with_animatable_data,
)
from .timing import TimingCurve, cubic_bezier
from .transition import Frame, Transition, DEFAULT_DURATION

__all__ = [
    "AnimatablePair",
    "AnimatableProperty",
    "ANIMATABLE_PROPERTIES",
    "animatable_data",
    "interpolate",
    "is_animatable",
    "with_animatable_data",
    "TimingCurve",
    "cubic_bezier",
    "Frame",
    "Transition",
    "DEFAULT_DURATION",
]
