"""Raster and PDF figures of shapes via matplotlib.

Paths are converted to ``matplotlib.path.Path`` objects (curves stay
cubic Béziers, arcs are flattened) and drawn as patches on axes whose y
axis points down, so coordinates match the SVG output.
"""

from dataclasses import dataclass
from pathlib import Path as FilePath
from typing import List, Optional, Sequence, Tuple, Union
import logging
import math
import numpy as np

# Conditional matplotlib import for environments without display
try:
    import matplotlib.pyplot as plt
    from matplotlib.patches import PathPatch
    from matplotlib.path import Path as MplPath
    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False

from ..animation import Transition
from ..color import LinearGradient
from ..config import DrawingConfig
from ..geometry import ArcTo, ClosePath, CurveTo, LineTo, MoveTo, Path, Point2D, Rect
from ..shapes import ShapeGenerator

logger = logging.getLogger(__name__)


def _require_matplotlib():
    if not HAS_MATPLOTLIB:
        raise ImportError(
            "matplotlib is required for figure rendering. "
            "Install with: pip install matplotlib"
        )


def to_mpl_path(path: Path, segments_per_turn: int = 64) -> "MplPath":
    """Convert a Path to matplotlib vertices and codes."""
    _require_matplotlib()

    vertices: List[Tuple[float, float]] = []
    codes: List[int] = []
    subpath_start: Optional[Point2D] = None
    has_current = False

    for seg in path:
        if isinstance(seg, MoveTo):
            vertices.append(seg.point.as_tuple())
            codes.append(MplPath.MOVETO)
            subpath_start = seg.point
        elif isinstance(seg, LineTo):
            vertices.append(seg.point.as_tuple())
            codes.append(MplPath.LINETO)
        elif isinstance(seg, CurveTo):
            vertices.extend([
                seg.control1.as_tuple(),
                seg.control2.as_tuple(),
                seg.point.as_tuple(),
            ])
            codes.extend([MplPath.CURVE4] * 3)
        elif isinstance(seg, ArcTo):
            points = seg.to_points(segments_per_turn)
            vertices.append(points[0].as_tuple())
            codes.append(MplPath.LINETO if has_current else MplPath.MOVETO)
            if not has_current:
                subpath_start = points[0]
            vertices.extend(p.as_tuple() for p in points[1:])
            codes.extend([MplPath.LINETO] * (len(points) - 1))
        elif isinstance(seg, ClosePath):
            start = subpath_start if subpath_start is not None else Point2D(0.0, 0.0)
            vertices.append(start.as_tuple())
            codes.append(MplPath.CLOSEPOLY)
        has_current = True

    if not vertices:
        return MplPath(np.zeros((0, 2)))
    return MplPath(np.array(vertices, dtype=np.float64), codes)


@dataclass
class ShapeStyle:
    """How a shape is painted."""
    facecolor: str = "none"
    edgecolor: str = "black"
    linewidth: float = 1.0


class FigureRenderer:
    """Draw shapes and gradients onto matplotlib figures."""

    def __init__(self, config: Optional[DrawingConfig] = None):
        _require_matplotlib()
        self.config = config or DrawingConfig()

    def _prepare_axes(self, ax, bounds: Rect):
        ax.set_xlim(bounds.min_x, bounds.max_x)
        ax.set_ylim(bounds.max_y, bounds.min_y)
        ax.set_aspect("equal")
        ax.axis("off")

    def draw_shape(
        self,
        ax,
        shape: ShapeGenerator,
        bounds: Rect,
        style: Optional[ShapeStyle] = None,
    ):
        """Add ``shape`` drawn in ``bounds`` to ``ax`` as a PathPatch."""
        style = style or ShapeStyle()
        path = shape.path(bounds)
        patch = PathPatch(
            to_mpl_path(path),
            facecolor=style.facecolor,
            edgecolor=style.edgecolor,
            linewidth=style.linewidth,
            capstyle="round",
            joinstyle="round",
        )
        ax.add_patch(patch)
        self._prepare_axes(ax, bounds)
        return patch

    def draw_gradient(self, ax, gradient: LinearGradient, bounds: Rect, resolution: int = 256):
        """Fill ``bounds`` with a sampled gradient image."""
        aspect = bounds.height / bounds.width if bounds.width else 1.0
        image = gradient.sample(resolution, max(1, int(round(resolution * aspect))))
        ax.imshow(
            image,
            extent=(bounds.min_x, bounds.max_x, bounds.max_y, bounds.min_y),
            interpolation="bilinear",
        )
        self._prepare_axes(ax, bounds)

    def _save(self, fig, output_path: Union[str, FilePath]) -> FilePath:
        output_path = FilePath(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, dpi=self.config.dpi, bbox_inches="tight", pad_inches=0.05)
        plt.close(fig)
        logger.debug("Saved figure %s", output_path)
        return output_path

    def _figsize(self, bounds: Rect) -> Tuple[float, float]:
        return (max(bounds.width, 1.0) / 100, max(bounds.height, 1.0) / 100)

    def render_shape(
        self,
        shape: ShapeGenerator,
        bounds: Rect,
        output_path: Union[str, FilePath],
        style: Optional[ShapeStyle] = None,
    ) -> FilePath:
        """Render one shape to an image file."""
        fig, ax = plt.subplots(figsize=self._figsize(bounds))
        self.draw_shape(ax, shape, bounds, style)
        return self._save(fig, output_path)

    def render_gradient(
        self,
        gradient: LinearGradient,
        bounds: Rect,
        output_path: Union[str, FilePath],
    ) -> FilePath:
        fig, ax = plt.subplots(figsize=self._figsize(bounds))
        self.draw_gradient(ax, gradient, bounds)
        return self._save(fig, output_path)

    def render_transition(
        self,
        transition: Transition,
        bounds: Rect,
        output_path: Union[str, FilePath],
        samples: int = 6,
        style: Optional[ShapeStyle] = None,
    ) -> FilePath:
        """Small multiples of a transition at evenly spaced times."""
        if samples < 2:
            raise ValueError(f"samples must be at least 2, got {samples}")

        width, height = self._figsize(bounds)
        fig, axes = plt.subplots(1, samples, figsize=(width * samples, height))
        times = np.linspace(0.0, transition.duration, samples)
        for ax, time in zip(axes, times):
            self.draw_shape(ax, transition.shape_at(float(time)), bounds, style)
            ax.set_title(f"t={time:.2f}s", fontsize=8)
        return self._save(fig, output_path)

    def render_gallery(
        self,
        entries: Sequence[Tuple[str, ShapeGenerator, Rect, ShapeStyle]],
        output_path: Union[str, FilePath],
        gradient: Optional[LinearGradient] = None,
        columns: int = 3,
    ) -> FilePath:
        """Grid of every shape (and optionally the gradient), one per cell."""
        count = len(entries) + (1 if gradient is not None else 0)
        rows = max(1, math.ceil(count / columns))
        fig, axes = plt.subplots(rows, columns, figsize=(3 * columns, 3 * rows), squeeze=False)
        cells = list(axes.flat)

        for ax, (title, shape, bounds, style) in zip(cells, entries):
            self.draw_shape(ax, shape, bounds, style)
            ax.set_title(title, fontsize=9)

        used = len(entries)
        if gradient is not None:
            bounds = Rect.of_size(self.config.canvas_width, self.config.canvas_height)
            self.draw_gradient(cells[used], gradient, bounds)
            cells[used].set_title("color cycle", fontsize=9)
            used += 1

        for ax in cells[used:]:
            ax.axis("off")

        return self._save(fig, output_path)

