"""Tests for matplotlib figure rendering."""

import math
import sys
from pathlib import Path as FilePath

import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

sys.path.insert(0, str(FilePath(__file__).parent.parent / "src"))

from matplotlib.path import Path as MplPath

from drawing import DrawingConfig
from drawing.animation import TimingCurve, Transition
from drawing.color import ColorCycleGradient
from drawing.geometry import ArcTo, Path, Point2D, Rect
from drawing.gallery import build_entries
from drawing.render import FigureRenderer, ShapeStyle, to_mpl_path
from drawing.shapes import CheckerboardGenerator, FlowerGenerator


class TestToMplPath:
    """Test conversion to matplotlib paths."""

    def test_rect_codes(self):
        mpl = to_mpl_path(Path.rect(Rect(0, 0, 10, 5)))

        assert list(mpl.codes) == [
            MplPath.MOVETO, MplPath.LINETO, MplPath.LINETO, MplPath.LINETO, MplPath.CLOSEPOLY,
        ]
        assert tuple(mpl.vertices[-1]) == (0, 0)

    def test_ellipse_keeps_curves(self):
        mpl = to_mpl_path(Path.ellipse_in(Rect(0, 0, 10, 10)))

        assert len(mpl.vertices) == 14
        assert list(mpl.codes).count(MplPath.CURVE4) == 12

    def test_arc_is_flattened(self):
        arc = ArcTo(Point2D(0, 0), 1.0, 0.0, math.pi / 2, clockwise=False)
        mpl = to_mpl_path(Path((arc,)), segments_per_turn=64)

        assert mpl.codes[0] == MplPath.MOVETO
        assert len(mpl.vertices) == 17

    def test_empty_path(self):
        assert len(to_mpl_path(Path()).vertices) == 0


class TestFigureRenderer:
    """Test that figures are written."""

    def test_render_shape(self, tmp_path):
        renderer = FigureRenderer(DrawingConfig.for_preview())
        output = renderer.render_shape(
            FlowerGenerator(),
            Rect.of_size(300, 300),
            tmp_path / "flower.png",
            ShapeStyle(facecolor="red", edgecolor="none"),
        )
        assert output.exists()
        assert output.stat().st_size > 0

    def test_render_gradient(self, tmp_path):
        renderer = FigureRenderer(DrawingConfig.for_preview())
        gradient = ColorCycleGradient(0.0, 0.5).linear_gradient()
        output = renderer.render_gradient(gradient, Rect.of_size(100, 100), tmp_path / "g.png")
        assert output.exists()

    def test_render_transition(self, tmp_path):
        renderer = FigureRenderer(DrawingConfig.for_preview())
        transition = Transition(
            CheckerboardGenerator(4, 4),
            CheckerboardGenerator(8, 16),
            duration=3.0,
            curve=TimingCurve.LINEAR,
        )
        output = renderer.render_transition(
            transition, Rect.of_size(160, 160), tmp_path / "frames" / "grid.png", samples=3
        )
        assert output.exists()

    def test_transition_needs_two_samples(self, tmp_path):
        renderer = FigureRenderer()
        transition = Transition(CheckerboardGenerator(4, 4), CheckerboardGenerator(8, 8))
        with pytest.raises(ValueError):
            renderer.render_transition(transition, Rect.of_size(10, 10), tmp_path / "x.png", samples=1)

    def test_render_gallery(self, tmp_path):
        config = DrawingConfig.for_preview()
        renderer = FigureRenderer(config)
        entries = [(e.name, e.shape, e.bounds, e.style) for e in build_entries(config)]
        gradient = ColorCycleGradient(0.0, 0.5).linear_gradient()

        output = renderer.render_gallery(entries, tmp_path / "gallery.png", gradient=gradient)
        assert output.exists()
