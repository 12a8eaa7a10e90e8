"""Color cycling gradients."""

from .gradient import (
    ColorCycleGradient,
    GradientStop,
    LinearGradient,
    wrap01,
)

__all__ = [
    "ColorCycleGradient",
    "GradientStop",
    "LinearGradient",
    "wrap01",
]
