"""Geometry primitives shared by every shape generator.

Key concepts:
- Point2D / Rect: immutable coordinates and bounds (y grows downward)
- AffineTransform: rotation, translation and scale, composable
- Path: ordered segments (move, line, curve, arc, close) forming subpaths
"""

from .primitives import Point2D, Rect, AffineTransform, radians_from_degrees
from .path import (
    Path,
    PathBuilder,
    PathSegment,
    MoveTo,
    LineTo,
    CurveTo,
    ArcTo,
    ClosePath,
)

__all__ = [
    "Point2D",
    "Rect",
    "AffineTransform",
    "radians_from_degrees",
    "Path",
    "PathBuilder",
    "PathSegment",
    "MoveTo",
    "LineTo",
    "CurveTo",
    "ArcTo",
    "ClosePath",
]
