"""SVG output for paths and gradients.

Paths become ``<path d="...">`` elements using M, L, C, A and Z commands.
The fill rule travels with every element, since overlapping subpaths
(the flower's petals) only render correctly under the rule the shape asks
for.
"""

from dataclasses import dataclass, field
from pathlib import Path as FilePath
from typing import List, Optional, Union
import logging
import math

from ..color import LinearGradient
from ..geometry import ArcTo, ClosePath, CurveTo, LineTo, MoveTo, Path, Point2D, Rect
from ..shapes import ShapeGenerator

logger = logging.getLogger(__name__)

FULL_TURN_EPSILON = 1e-9


def _fmt(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def _point(point: Point2D, precision: int) -> str:
    return f"{_fmt(point.x, precision)} {_fmt(point.y, precision)}"


def _arc_commands(seg: ArcTo, has_current: bool, precision: int) -> List[str]:
    """Commands for one arc, starting with a move or line to its start."""
    parts = [("L " if has_current else "M ") + _point(seg.start_point, precision)]
    sweep = seg.sweep
    if seg.radius == 0 or sweep == 0:
        return parts

    r = _fmt(seg.radius, precision)
    sweep_flag = 1 if sweep > 0 else 0
    if abs(sweep) >= 2 * math.pi - FULL_TURN_EPSILON:
        # A single A command cannot describe a full circle
        halfway = seg.point_at(seg.start_angle + sweep / 2)
        parts.append(f"A {r} {r} 0 0 {sweep_flag} {_point(halfway, precision)}")
        parts.append(f"A {r} {r} 0 0 {sweep_flag} {_point(seg.end_point, precision)}")
    else:
        large_arc = 1 if abs(sweep) > math.pi else 0
        parts.append(f"A {r} {r} 0 {large_arc} {sweep_flag} {_point(seg.end_point, precision)}")
    return parts


def path_to_svg_d(path: Path, precision: int = 2) -> str:
    """Convert a Path to SVG path data."""
    parts: List[str] = []
    has_current = False
    for seg in path:
        if isinstance(seg, MoveTo):
            parts.append(f"M {_point(seg.point, precision)}")
        elif isinstance(seg, LineTo):
            parts.append(f"L {_point(seg.point, precision)}")
        elif isinstance(seg, CurveTo):
            parts.append(
                f"C {_point(seg.control1, precision)}, "
                f"{_point(seg.control2, precision)}, "
                f"{_point(seg.point, precision)}"
            )
        elif isinstance(seg, ArcTo):
            parts.extend(_arc_commands(seg, has_current, precision))
        elif isinstance(seg, ClosePath):
            parts.append("Z")
        has_current = True
    return " ".join(parts)


@dataclass
class SvgCanvas:
    """Accumulates SVG elements into one document."""
    width: float
    height: float
    background: Optional[str] = None
    precision: int = 2

    _defs: List[str] = field(default_factory=list, init=False, repr=False)
    _elements: List[str] = field(default_factory=list, init=False, repr=False)

    def add_path(
        self,
        path: Path,
        fill: Optional[str] = "black",
        stroke: Optional[str] = None,
        stroke_width: float = 1.0,
        fill_rule: str = "nonzero",
    ) -> "SvgCanvas":
        if fill_rule not in ("nonzero", "evenodd"):
            raise ValueError(f"fill_rule must be 'nonzero' or 'evenodd', got {fill_rule!r}")
        attrs = [
            f'd="{path_to_svg_d(path, self.precision)}"',
            f'fill="{fill or "none"}"',
            f'fill-rule="{fill_rule}"',
        ]
        if stroke:
            attrs.append(f'stroke="{stroke}"')
            attrs.append(f'stroke-width="{_fmt(stroke_width, self.precision)}"')
            attrs.append('stroke-linecap="round"')
            attrs.append('stroke-linejoin="round"')
        self._elements.append(f"<path {' '.join(attrs)} />")
        return self

    def add_shape(
        self,
        shape: ShapeGenerator,
        bounds: Optional[Rect] = None,
        fill: Optional[str] = "black",
        stroke: Optional[str] = None,
        stroke_width: float = 1.0,
    ) -> "SvgCanvas":
        """Draw a generator into ``bounds`` using the generator's fill rule."""
        bounds = bounds or Rect.of_size(self.width, self.height)
        return self.add_path(
            shape.path(bounds),
            fill=fill,
            stroke=stroke,
            stroke_width=stroke_width,
            fill_rule=shape.fill_rule,
        )

    def add_linear_gradient(self, gradient_id: str, gradient: LinearGradient) -> str:
        """Define a gradient; returns the ``url(#id)`` paint reference."""
        (x1, y1), (x2, y2) = gradient.start_point, gradient.end_point
        stops = "\n".join(
            f'    <stop offset="{_fmt(stop.location * 100, 2)}%" stop-color="{stop.to_hex()}" />'
            for stop in gradient.sorted_stops()
        )
        self._defs.append(
            f'<linearGradient id="{gradient_id}" '
            f'x1="{_fmt(x1 * 100, 2)}%" y1="{_fmt(y1 * 100, 2)}%" '
            f'x2="{_fmt(x2 * 100, 2)}%" y2="{_fmt(y2 * 100, 2)}%">\n'
            f"{stops}\n"
            f"</linearGradient>"
        )
        return f"url(#{gradient_id})"

    def add_rect(self, rect: Rect, fill: str) -> "SvgCanvas":
        self._elements.append(
            f'<rect x="{_fmt(rect.x, self.precision)}" y="{_fmt(rect.y, self.precision)}" '
            f'width="{_fmt(rect.width, self.precision)}" height="{_fmt(rect.height, self.precision)}" '
            f'fill="{fill}" />'
        )
        return self

    def to_string(self) -> str:
        w = _fmt(self.width, self.precision)
        h = _fmt(self.height, self.precision)
        lines = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" viewBox="0 0 {w} {h}">'
        ]
        if self._defs:
            lines.append("<defs>")
            lines.extend(self._defs)
            lines.append("</defs>")
        if self.background:
            lines.append(f'<rect width="100%" height="100%" fill="{self.background}" />')
        lines.extend(self._elements)
        lines.append("</svg>")
        return "\n".join(lines) + "\n"

    def save(self, output_path: Union[str, FilePath]) -> FilePath:
        output_path = FilePath(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(self.to_string())
        logger.debug("Wrote %s (%d elements)", output_path, len(self._elements))
        return output_path


def render_shape_svg(
    shape: ShapeGenerator,
    width: float,
    height: float,
    fill: Optional[str] = "black",
    stroke: Optional[str] = None,
    stroke_width: float = 1.0,
) -> SvgCanvas:
    """One-shape document the size of the shape's bounds."""
    canvas = SvgCanvas(width=width, height=height)
    return canvas.add_shape(shape, fill=fill, stroke=stroke, stroke_width=stroke_width)


def render_gradient_svg(gradient: LinearGradient, width: float, height: float) -> SvgCanvas:
    """Rectangle filled with ``gradient``."""
    canvas = SvgCanvas(width=width, height=height)
    paint = canvas.add_linear_gradient("colorCycle", gradient)
    return canvas.add_rect(Rect.of_size(width, height), fill=paint)
