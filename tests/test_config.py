"""Tests for configuration presets and the demo gallery."""

import sys
from pathlib import Path as FilePath

import numpy as np
import pytest

sys.path.insert(0, str(FilePath(__file__).parent.parent / "src"))

from drawing import DrawingConfig
from drawing.animation import TimingCurve
from drawing.errors import DegenerateGeometryError, DivisionByZeroError, DrawingError
from drawing.errors import require_finite, require_integer
from drawing.gallery import build_entries, build_gradient, build_transitions
from drawing.shapes import ArcGenerator, FlowerGenerator


class TestDrawingConfig:
    """Test presets and dict conversion."""

    def test_defaults(self):
        config = DrawingConfig()
        assert (config.canvas_width, config.canvas_height) == (300, 300)
        assert config.arrow_amount == 50
        assert (config.checkerboard_target_rows, config.checkerboard_target_columns) == (8, 16)
        assert config.transition_duration == pytest.approx(0.35)
        assert config.image_format == "svg"

    def test_presets(self):
        assert DrawingConfig.from_preset("default") == DrawingConfig.default()
        assert DrawingConfig.from_preset("preview").canvas_width == 150
        assert DrawingConfig.from_preset("print").image_format == "pdf"

    def test_unknown_preset(self):
        with pytest.raises(ValueError):
            DrawingConfig.from_preset("poster")

    def test_dict_round_trip(self):
        config = DrawingConfig.for_preview()
        assert DrawingConfig.from_dict(config.to_dict()) == config

    def test_from_dict_ignores_unknown_and_converts_lists(self):
        config = DrawingConfig.from_dict({
            "arrow_random_range": [10, 20],
            "not_a_field": 1,
        })
        assert config.arrow_random_range == (10, 20)
        assert not hasattr(config, "not_a_field")


class TestGallery:
    """Test the example shapes built from a config."""

    def test_entry_order(self):
        names = [entry.name for entry in build_entries(DrawingConfig())]
        assert names == ["arrow", "arc", "flower", "checkerboard", "spirograph", "trapezoid"]

    def test_arc_border_stays_inside(self):
        """Inset by half the stroke width."""
        entry = {e.name: e for e in build_entries(DrawingConfig())}["arc"]

        assert isinstance(entry.shape, ArcGenerator)
        assert entry.shape.radius(entry.bounds) == 130
        assert entry.stroke_width == 40
        assert entry.fill is None

    def test_trapezoid_bounds(self):
        entry = build_entries(DrawingConfig())[-1]
        assert (entry.bounds.width, entry.bounds.height) == (200, 100)

    def test_flower_fill(self):
        entry = build_entries(DrawingConfig())[2]
        assert isinstance(entry.shape, FlowerGenerator)
        assert entry.style.facecolor == "red"
        assert entry.style.linewidth == 0.0

    def test_every_entry_draws(self):
        for entry in build_entries(DrawingConfig.for_preview()):
            assert not entry.shape.path(entry.bounds).is_empty

    def test_gradient(self):
        gradient = build_gradient(DrawingConfig())
        assert gradient.steps == 100
        assert gradient.start_point == (0.2, 0.2)

    def test_seeded_transitions(self):
        config = DrawingConfig()
        first = build_transitions(config, np.random.default_rng(7))
        second = build_transitions(config, np.random.default_rng(7))

        assert set(first) == {"arrow", "trapezoid", "checkerboard"}
        assert first["arrow"].end.amount == second["arrow"].end.amount
        assert 50 <= first["arrow"].end.amount <= 130
        assert 10 <= first["trapezoid"].end.inset_amount <= 90

    def test_checkerboard_transition(self):
        transition = build_transitions(DrawingConfig())["checkerboard"]
        assert transition.curve is TimingCurve.LINEAR
        assert transition.duration == 3.0
        assert (transition.end.rows, transition.end.columns) == (8, 16)


class TestErrors:
    """Test the error hierarchy and validators."""

    def test_hierarchy(self):
        assert issubclass(DivisionByZeroError, DrawingError)
        assert issubclass(DivisionByZeroError, ZeroDivisionError)
        assert issubclass(DegenerateGeometryError, DrawingError)
        assert issubclass(DegenerateGeometryError, ValueError)

    def test_require_finite(self):
        assert require_finite("x", 3) == 3.0
        with pytest.raises(DegenerateGeometryError, match="x must be finite"):
            require_finite("x", float("-inf"))

    def test_require_integer(self):
        assert require_integer("n", 4.0) == 4
        assert require_integer("n", 0, minimum=0) == 0
        with pytest.raises(DegenerateGeometryError):
            require_integer("n", "four")
        with pytest.raises(DegenerateGeometryError):
            require_integer("n", 1.5)
        with pytest.raises(DegenerateGeometryError):
            require_integer("n", -1, minimum=0)

    def test_require_integer_keeps_large_ints_exact(self):
        """Ints past float precision are returned unchanged."""
        assert require_integer("n", 2**53 + 1) == 2**53 + 1
        assert require_integer("n", 10**400) == 10**400
        assert require_integer("n", np.int64(7)) == 7

    def test_require_integer_non_finite_float(self):
        with pytest.raises(DegenerateGeometryError):
            require_integer("n", float("inf"))
        with pytest.raises(DegenerateGeometryError):
            require_integer("n", float("nan"))

    def test_require_finite_huge_int(self):
        with pytest.raises(DegenerateGeometryError):
            require_finite("x", 10**400)
