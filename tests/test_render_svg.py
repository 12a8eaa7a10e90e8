"""Tests for SVG path data and documents."""

import math
import sys
from pathlib import Path as FilePath

import pytest

sys.path.insert(0, str(FilePath(__file__).parent.parent / "src"))

from drawing.color import ColorCycleGradient
from drawing.geometry import ArcTo, Path, PathBuilder, Point2D, Rect
from drawing.render import SvgCanvas, path_to_svg_d, render_gradient_svg, render_shape_svg
from drawing.shapes import ArcGenerator, FlowerGenerator, TrapezoidGenerator


class TestPathData:
    """Test d attribute generation."""

    def test_polyline(self):
        path = TrapezoidGenerator(50).path(Rect.of_size(200, 100))
        assert path_to_svg_d(path) == "M 0 100 L 50 0 L 150 0 L 200 100 L 0 100"

    def test_close_and_curves(self):
        d = path_to_svg_d(Path.ellipse_in(Rect(0, 0, 10, 10)))

        assert d.startswith("M 10 5 C ")
        assert d.count("C ") == 4
        assert d.endswith(" Z")

    def test_precision(self):
        path = PathBuilder().move_to(Point2D(1.23456, -0.0001)).build()
        assert path_to_svg_d(path, precision=2) == "M 1.23 0"
        assert path_to_svg_d(path, precision=4) == "M 1.2346 -0.0001"

    def test_empty_path(self):
        assert path_to_svg_d(Path()) == ""

    def test_arc_command(self):
        """Quarter arc from the top to the right of the circle."""
        path = ArcGenerator(0.0, math.pi / 2, clockwise=True).path(Rect.of_size(200, 200))
        assert path_to_svg_d(path) == "M 100 0 A 100 100 0 0 1 200 100"

    def test_long_way_arc_sets_large_flag(self):
        arc = ArcTo(Point2D(0, 0), 10.0, 0.0, math.pi / 2, clockwise=True)
        d = path_to_svg_d(Path((arc,)))
        assert d == "M 10 0 A 10 10 0 1 0 0 10"

    def test_full_circle_splits_in_two(self):
        arc = ArcTo(Point2D(50, 50), 10.0, 0.0, 2 * math.pi, clockwise=False)
        d = path_to_svg_d(Path((arc,)))

        assert d.count("A ") == 2
        assert d == "M 60 50 A 10 10 0 0 1 40 50 A 10 10 0 0 1 60 50"

    def test_zero_radius_arc_is_a_move(self):
        arc = ArcTo(Point2D(5, 5), 0.0, 0.0, 1.0, clockwise=False)
        assert path_to_svg_d(Path((arc,))) == "M 5 5"


class TestSvgCanvas:
    """Test document assembly."""

    def test_document_envelope(self):
        text = SvgCanvas(300, 200).to_string()

        assert text.startswith('<svg xmlns="http://www.w3.org/2000/svg" width="300" height="200"')
        assert 'viewBox="0 0 300 200"' in text
        assert text.endswith("</svg>\n")

    def test_fill_rule_follows_shape(self):
        text = render_shape_svg(FlowerGenerator(), 300, 300, fill="red").to_string()
        assert 'fill-rule="evenodd"' in text
        assert 'fill="red"' in text

        text = render_shape_svg(TrapezoidGenerator(), 200, 100).to_string()
        assert 'fill-rule="nonzero"' in text

    def test_stroke_attributes(self):
        canvas = SvgCanvas(100, 100)
        canvas.add_path(Path.rect(Rect(10, 10, 20, 20)), fill=None, stroke="blue", stroke_width=40)
        text = canvas.to_string()

        assert 'fill="none"' in text
        assert 'stroke="blue"' in text
        assert 'stroke-width="40"' in text
        assert 'stroke-linecap="round"' in text

    def test_invalid_fill_rule(self):
        with pytest.raises(ValueError):
            SvgCanvas(10, 10).add_path(Path(), fill_rule="winding")

    def test_background(self):
        text = SvgCanvas(10, 10, background="white").to_string()
        assert '<rect width="100%" height="100%" fill="white" />' in text

    def test_save_creates_directories(self, tmp_path):
        output = tmp_path / "nested" / "dir" / "shape.svg"
        written = render_shape_svg(TrapezoidGenerator(), 200, 100).save(output)

        assert written == output
        assert output.exists()
        assert "<path " in output.read_text(encoding="utf-8")


class TestGradientSvg:
    """Test gradient definitions."""

    def test_stops_sorted_by_offset(self):
        gradient = ColorCycleGradient(cycle_position_1=0.0, cycle_position_2=0.5).linear_gradient()
        text = render_gradient_svg(gradient, 300, 300).to_string()

        assert '<linearGradient id="colorCycle" x1="20%" y1="20%" x2="20%" y2="20%">' in text
        assert text.index('offset="0%" stop-color="#00ffff"') < text.index(
            'offset="100%" stop-color="#ff0000"'
        )
        assert 'fill="url(#colorCycle)"' in text

    def test_paint_reference(self):
        gradient = ColorCycleGradient().linear_gradient()
        assert SvgCanvas(10, 10).add_linear_gradient("g1", gradient) == "url(#g1)"
