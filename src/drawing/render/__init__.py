"""Rendering paths to SVG documents and matplotlib figures."""

from .svg import (
    SvgCanvas,
    path_to_svg_d,
    render_shape_svg,
    render_gradient_svg,
)
from .figures import (
    FigureRenderer,
    ShapeStyle,
    to_mpl_path,
    HAS_MATPLOTLIB,
)

__all__ = [
    "SvgCanvas",
    "path_to_svg_d",
    "render_shape_svg",
    "render_gradient_svg",
    "FigureRenderer",
    "ShapeStyle",
    "to_mpl_path",
    "HAS_MATPLOTLIB",
]
