"""Points, rectangles and affine transforms.

Coordinates follow the screen convention: x grows to the right, y grows
downward, and a bounding rectangle's origin is its top-left corner.
All values are immutable; transforming a point returns a new point.
"""

from dataclasses import dataclass
from typing import Tuple
import math
import numpy as np

from ..errors import DegenerateGeometryError, require_finite


def radians_from_degrees(value: float) -> float:
    """Convert an angle in degrees to radians."""
    return math.radians(value)


@dataclass(frozen=True)
class Point2D:
    """A 2D point."""
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def transformed(self, transform: "AffineTransform") -> "Point2D":
        return transform.apply(self)

    def distance_to(self, other: "Point2D") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_close(self, other: "Point2D", tol: float = 1e-9) -> bool:
        return abs(self.x - other.x) <= tol and abs(self.y - other.y) <= tol


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle used as the bounds a shape is drawn into."""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def __post_init__(self):
        for name in ("x", "y", "width", "height"):
            require_finite(name, getattr(self, name))
        if self.width < 0 or self.height < 0:
            raise DegenerateGeometryError(
                f"Rect size must be non-negative, got {self.width}x{self.height}"
            )

    @classmethod
    def of_size(cls, width: float, height: float) -> "Rect":
        """Rect with its origin at (0, 0)."""
        return cls(0.0, 0.0, width, height)

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point2D:
        return Point2D(self.mid_x, self.mid_y)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0


@dataclass(frozen=True)
class AffineTransform:
    """2D affine transform in row-vector form.

    Maps (x, y) to (a*x + c*y + tx, b*x + d*y + ty), so ``concatenating``
    applies ``self`` first and ``other`` second.
    """
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    @classmethod
    def identity(cls) -> "AffineTransform":
        return cls()

    @classmethod
    def rotation(cls, angle: float) -> "AffineTransform":
        """Rotation by ``angle`` radians about the origin."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return cls(a=cos_a, b=sin_a, c=-sin_a, d=cos_a)

    @classmethod
    def translation(cls, tx: float, ty: float) -> "AffineTransform":
        return cls(tx=tx, ty=ty)

    @classmethod
    def scale(cls, sx: float, sy: float) -> "AffineTransform":
        return cls(a=sx, d=sy)

    @property
    def matrix(self) -> np.ndarray:
        """3x3 matrix acting on row vectors [x, y, 1]."""
        return np.array([
            [self.a, self.b, 0.0],
            [self.c, self.d, 0.0],
            [self.tx, self.ty, 1.0],
        ])

    @classmethod
    def from_matrix(cls, matrix: np.ndarray) -> "AffineTransform":
        return cls(
            a=float(matrix[0, 0]),
            b=float(matrix[0, 1]),
            c=float(matrix[1, 0]),
            d=float(matrix[1, 1]),
            tx=float(matrix[2, 0]),
            ty=float(matrix[2, 1]),
        )

    def concatenating(self, other: "AffineTransform") -> "AffineTransform":
        """Transform that applies ``self`` and then ``other``."""
        return AffineTransform.from_matrix(self.matrix @ other.matrix)

    def apply(self, point: Point2D) -> Point2D:
        return Point2D(
            self.a * point.x + self.c * point.y + self.tx,
            self.b * point.x + self.d * point.y + self.ty,
        )

    def apply_array(self, points: np.ndarray) -> np.ndarray:
        """Apply to an (N, 2) array of points."""
        points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        homogeneous = np.hstack([points, np.ones((len(points), 1))])
        return (homogeneous @ self.matrix)[:, :2]

    @property
    def is_identity(self) -> bool:
        return self == AffineTransform()
