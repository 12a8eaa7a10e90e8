"""Drawing - animatable vector shape geometry.

Pure generators turn a handful of numeric parameters and a bounding
rectangle into a Path: an arrow, an insettable arc, a flower of elliptical
petals, a checkerboard, a spirograph curve and a trapezoid. A color-cycle
gradient picks two hues from cycle positions.

Key concepts:
- Path: ordered move/line/curve/arc/close segments, possibly many subpaths
- ShapeGenerator: frozen parameters + ``path(bounds)``
- Transition: interpolates animatable parameters and re-runs the generator
- SvgCanvas / FigureRenderer: turn paths into SVG documents or figures
"""

from .errors import DrawingError, DivisionByZeroError, DegenerateGeometryError
from .config import DrawingConfig
from .geometry import (
    Point2D,
    Rect,
    AffineTransform,
    radians_from_degrees,
    Path,
    PathBuilder,
    MoveTo,
    LineTo,
    CurveTo,
    ArcTo,
    ClosePath,
)
from .shapes import (
    ShapeGenerator,
    ArrowGenerator,
    ArcGenerator,
    FlowerGenerator,
    CheckerboardGenerator,
    SpirographGenerator,
    TrapezoidGenerator,
    gcd,
)
from .color import ColorCycleGradient, GradientStop, LinearGradient, wrap01
from .animation import AnimatablePair, TimingCurve, Transition

__version__ = "0.1.0"

__all__ = [
    # Errors
    "DrawingError",
    "DivisionByZeroError",
    "DegenerateGeometryError",
    # Config
    "DrawingConfig",
    # Geometry
    "Point2D",
    "Rect",
    "AffineTransform",
    "radians_from_degrees",
    "Path",
    "PathBuilder",
    "MoveTo",
    "LineTo",
    "CurveTo",
    "ArcTo",
    "ClosePath",
    # Shapes
    "ShapeGenerator",
    "ArrowGenerator",
    "ArcGenerator",
    "FlowerGenerator",
    "CheckerboardGenerator",
    "SpirographGenerator",
    "TrapezoidGenerator",
    "gcd",
    # Color
    "ColorCycleGradient",
    "GradientStop",
    "LinearGradient",
    "wrap01",
    # Animation
    "AnimatablePair",
    "TimingCurve",
    "Transition",
]
