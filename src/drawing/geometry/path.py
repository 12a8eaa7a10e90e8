"""Path segments and paths.

A Path is an ordered sequence of drawing instructions. Insertion order is
rendering order, and a single path may hold several disjoint subpaths
(every MoveTo starts a new one). Paths are immutable: generators assemble
them with a PathBuilder and hand out the finished value.

Segment kinds:
- MoveTo: start a new subpath at a point
- LineTo: straight line from the current point
- CurveTo: cubic Bézier from the current point (ellipse outlines)
- ArcTo: circular arc around a center; starts a subpath if none is open
- ClosePath: straight line back to the subpath's first point
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union
import math
import numpy as np

from .primitives import AffineTransform, Point2D, Rect

TWO_PI = 2 * math.pi

# Control point distance for a quarter-circle cubic Bézier
ELLIPSE_KAPPA = 4 * (math.sqrt(2) - 1) / 3


@dataclass(frozen=True)
class MoveTo:
    point: Point2D


@dataclass(frozen=True)
class LineTo:
    point: Point2D


@dataclass(frozen=True)
class CurveTo:
    control1: Point2D
    control2: Point2D
    point: Point2D


@dataclass(frozen=True)
class ClosePath:
    pass


@dataclass(frozen=True)
class ArcTo:
    """Circular arc.

    Angles are radians measured in screen space, where increasing angles
    turn visually clockwise because y points down. ``clockwise=True``
    sweeps toward decreasing angles, the way a y-up graphics context
    interprets the flag when drawn into a flipped view.
    """
    center: Point2D
    radius: float
    start_angle: float
    end_angle: float
    clockwise: bool

    def point_at(self, angle: float) -> Point2D:
        return Point2D(
            self.center.x + self.radius * math.cos(angle),
            self.center.y + self.radius * math.sin(angle),
        )

    @property
    def start_point(self) -> Point2D:
        return self.point_at(self.start_angle)

    @property
    def end_point(self) -> Point2D:
        return self.point_at(self.start_angle + self.sweep)

    @property
    def sweep(self) -> float:
        """Signed angle travelled from start to end.

        A difference of a full turn or more draws a full circle; anything
        less wraps into [0, 2*pi) in the direction of travel.
        """
        delta = self.start_angle - self.end_angle if self.clockwise else self.end_angle - self.start_angle
        if delta >= TWO_PI:
            magnitude = TWO_PI
        else:
            magnitude = delta % TWO_PI
        return -magnitude if self.clockwise else magnitude

    def to_points(self, segments_per_turn: int = 64) -> List[Point2D]:
        """Polyline approximation from start to end, both included."""
        n = max(1, int(math.ceil(abs(self.sweep) / TWO_PI * segments_per_turn)))
        angles = self.start_angle + self.sweep * np.linspace(0.0, 1.0, n + 1)
        xs = self.center.x + self.radius * np.cos(angles)
        ys = self.center.y + self.radius * np.sin(angles)
        return [Point2D(float(x), float(y)) for x, y in zip(xs, ys)]

    def to_polyline(self, segments_per_turn: int = 64) -> "Path":
        """The arc as a MoveTo followed by LineTo segments."""
        points = self.to_points(segments_per_turn)
        return Path((MoveTo(points[0]),) + tuple(LineTo(p) for p in points[1:]))


PathSegment = Union[MoveTo, LineTo, CurveTo, ArcTo, ClosePath]


def _bezier_points(p0: Point2D, seg: CurveTo, steps: int) -> List[Point2D]:
    """Sample a cubic Bézier, excluding its start point."""
    t = np.linspace(0.0, 1.0, steps + 1)[1:, None]
    ctrl = np.array([
        p0.as_tuple(),
        seg.control1.as_tuple(),
        seg.control2.as_tuple(),
        seg.point.as_tuple(),
    ])
    pts = (
        (1 - t) ** 3 * ctrl[0]
        + 3 * (1 - t) ** 2 * t * ctrl[1]
        + 3 * (1 - t) * t ** 2 * ctrl[2]
        + t ** 3 * ctrl[3]
    )
    return [Point2D(float(x), float(y)) for x, y in pts]


@dataclass(frozen=True)
class Path:
    """Immutable ordered sequence of path segments."""
    segments: Tuple[PathSegment, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "segments", tuple(self.segments))

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[PathSegment]:
        return iter(self.segments)

    def __add__(self, other: "Path") -> "Path":
        return Path(self.segments + other.segments)

    @property
    def is_empty(self) -> bool:
        return not self.segments

    @classmethod
    def rect(cls, rect: Rect) -> "Path":
        """Closed rectangle subpath."""
        return PathBuilder().add_rect(rect).build()

    @classmethod
    def ellipse_in(cls, rect: Rect) -> "Path":
        """Closed ellipse subpath inscribed in ``rect``."""
        return PathBuilder().add_ellipse(rect).build()

    def add_path(self, other: "Path") -> "Path":
        return self + other

    def count(self, kind: type) -> int:
        """Number of segments of the given segment class."""
        return sum(1 for seg in self.segments if isinstance(seg, kind))

    def subpaths(self) -> List["Path"]:
        """Split at every MoveTo."""
        groups: List[List[PathSegment]] = []
        for seg in self.segments:
            if isinstance(seg, MoveTo) or not groups:
                groups.append([])
            groups[-1].append(seg)
        return [Path(tuple(g)) for g in groups]

    def points(self) -> List[Point2D]:
        """Vertices in drawing order.

        Move, line and curve segments contribute their end point; arcs
        contribute their start and end points.
        """
        result = []
        for seg in self.segments:
            if isinstance(seg, ArcTo):
                result.append(seg.start_point)
                result.append(seg.end_point)
            elif not isinstance(seg, ClosePath):
                result.append(seg.point)
        return result

    def applying(self, transform: AffineTransform) -> "Path":
        """Transformed copy.

        Arcs only survive an affine transform as arcs for rigid motions, so
        they are flattened to polylines first.
        """
        out: List[PathSegment] = []
        has_current = False
        for seg in self.segments:
            if isinstance(seg, MoveTo):
                out.append(MoveTo(transform.apply(seg.point)))
            elif isinstance(seg, LineTo):
                out.append(LineTo(transform.apply(seg.point)))
            elif isinstance(seg, CurveTo):
                out.append(CurveTo(
                    transform.apply(seg.control1),
                    transform.apply(seg.control2),
                    transform.apply(seg.point),
                ))
            elif isinstance(seg, ArcTo):
                poly = seg.to_polyline().applying(transform).segments
                first = poly[0] if not has_current else LineTo(poly[0].point)
                out.append(first)
                out.extend(poly[1:])
            else:
                out.append(seg)
            has_current = True
        return Path(tuple(out))

    def flattened(self, segments_per_turn: int = 64, curve_steps: int = 16) -> "Path":
        """Copy with every arc and curve replaced by line segments."""
        out: List[PathSegment] = []
        current: Optional[Point2D] = None
        start: Optional[Point2D] = None
        for seg in self.segments:
            if isinstance(seg, MoveTo):
                out.append(seg)
                current = start = seg.point
            elif isinstance(seg, LineTo):
                out.append(seg)
                current = seg.point
            elif isinstance(seg, CurveTo):
                p0 = current if current is not None else seg.point
                out.extend(LineTo(p) for p in _bezier_points(p0, seg, curve_steps))
                current = seg.point
            elif isinstance(seg, ArcTo):
                points = seg.to_points(segments_per_turn)
                if current is None:
                    out.append(MoveTo(points[0]))
                    start = points[0]
                else:
                    out.append(LineTo(points[0]))
                out.extend(LineTo(p) for p in points[1:])
                current = points[-1]
            else:
                out.append(seg)
                current = start
        return Path(tuple(out))

    def as_array(self, segments_per_turn: int = 64, curve_steps: int = 16) -> np.ndarray:
        """(N, 2) array of the flattened vertices."""
        points = self.flattened(segments_per_turn, curve_steps).points()
        if not points:
            return np.zeros((0, 2))
        return np.array([p.as_tuple() for p in points], dtype=np.float64)

    def bounding_box(self) -> Rect:
        """Bounds of the flattened path; an empty Rect for an empty path."""
        pts = self.as_array()
        if len(pts) == 0:
            return Rect()
        lo = pts.min(axis=0)
        hi = pts.max(axis=0)
        return Rect(float(lo[0]), float(lo[1]), float(hi[0] - lo[0]), float(hi[1] - lo[1]))


class PathBuilder:
    """Mutable accumulator for assembling a Path.

    Usage:
        builder = PathBuilder()
        builder.move_to(Point2D(0, 0))
        builder.line_to(Point2D(10, 0))
        path = builder.build()
    """

    def __init__(self):
        self._segments: List[PathSegment] = []

    def move_to(self, point: Point2D) -> "PathBuilder":
        self._segments.append(MoveTo(point))
        return self

    def line_to(self, point: Point2D) -> "PathBuilder":
        self._segments.append(LineTo(point))
        return self

    def curve_to(self, control1: Point2D, control2: Point2D, point: Point2D) -> "PathBuilder":
        self._segments.append(CurveTo(control1, control2, point))
        return self

    def add_arc(
        self,
        center: Point2D,
        radius: float,
        start_angle: float,
        end_angle: float,
        clockwise: bool,
    ) -> "PathBuilder":
        self._segments.append(ArcTo(center, radius, start_angle, end_angle, clockwise))
        return self

    def close(self) -> "PathBuilder":
        self._segments.append(ClosePath())
        return self

    def add_rect(self, rect: Rect) -> "PathBuilder":
        self.move_to(Point2D(rect.min_x, rect.min_y))
        self.line_to(Point2D(rect.max_x, rect.min_y))
        self.line_to(Point2D(rect.max_x, rect.max_y))
        self.line_to(Point2D(rect.min_x, rect.max_y))
        return self.close()

    def add_ellipse(self, rect: Rect) -> "PathBuilder":
        """Four quarter arcs, starting at the rightmost point."""
        rx = rect.width / 2
        ry = rect.height / 2
        cx = rect.mid_x
        cy = rect.mid_y
        kx = rx * ELLIPSE_KAPPA
        ky = ry * ELLIPSE_KAPPA

        self.move_to(Point2D(cx + rx, cy))
        self.curve_to(Point2D(cx + rx, cy + ky), Point2D(cx + kx, cy + ry), Point2D(cx, cy + ry))
        self.curve_to(Point2D(cx - kx, cy + ry), Point2D(cx - rx, cy + ky), Point2D(cx - rx, cy))
        self.curve_to(Point2D(cx - rx, cy - ky), Point2D(cx - kx, cy - ry), Point2D(cx, cy - ry))
        self.curve_to(Point2D(cx + kx, cy - ry), Point2D(cx + rx, cy - ky), Point2D(cx + rx, cy))
        return self.close()

    def add_path(self, path: Path) -> "PathBuilder":
        self._segments.extend(path.segments)
        return self

    def build(self) -> Path:
        return Path(tuple(self._segments))
