"""Shape generators.

Each generator is a frozen set of numeric parameters with a pure
``path(bounds)`` method:

- ArrowGenerator: seven-point arrow controlled by one width amount
- ArcGenerator: insettable arc with "zero points up" angles
- FlowerGenerator: sixteen rotated ellipse petals (even-odd fill)
- CheckerboardGenerator: alternating grid of rectangles
- SpirographGenerator: sampled rolling-circle curve
- TrapezoidGenerator: closed trapezoid with an inset top edge
"""

from .base import ShapeGenerator
from .arrow import ArrowGenerator
from .arc import ArcGenerator
from .flower import FlowerGenerator, PETAL_COUNT, petal_angles
from .checkerboard import CheckerboardGenerator
from .spirograph import SpirographGenerator, gcd
from .trapezoid import TrapezoidGenerator

__all__ = [
    "ShapeGenerator",
    "ArrowGenerator",
    "ArcGenerator",
    "FlowerGenerator",
    "PETAL_COUNT",
    "petal_angles",
    "CheckerboardGenerator",
    "SpirographGenerator",
    "gcd",
    "TrapezoidGenerator",
]
