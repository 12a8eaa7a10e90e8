"""Tests for animatable data, timing curves and transitions."""

import sys
from pathlib import Path as FilePath

import pytest

sys.path.insert(0, str(FilePath(__file__).parent.parent / "src"))

from drawing.animation import (
    AnimatablePair,
    TimingCurve,
    Transition,
    animatable_data,
    cubic_bezier,
    interpolate,
    is_animatable,
    with_animatable_data,
)
from drawing.shapes import (
    ArcGenerator,
    ArrowGenerator,
    CheckerboardGenerator,
    FlowerGenerator,
    TrapezoidGenerator,
)


class TestAnimatableData:
    """Test reading and writing each shape's interpolable value."""

    def test_arrow_amount(self):
        arrow = ArrowGenerator(amount=50)
        assert animatable_data(arrow) == 50
        assert with_animatable_data(arrow, 90).amount == 90
        assert arrow.amount == 50

    def test_trapezoid_inset(self):
        trapezoid = TrapezoidGenerator(inset_amount=20)
        assert animatable_data(trapezoid) == 20
        assert with_animatable_data(trapezoid, 35.5).inset_amount == 35.5

    def test_checkerboard_pair(self):
        board = CheckerboardGenerator(rows=4, columns=6)
        assert animatable_data(board) == AnimatablePair(4, 6)

    def test_checkerboard_truncates(self):
        """Fractional grid counts truncate toward zero."""
        board = with_animatable_data(CheckerboardGenerator(), AnimatablePair(5.99, 7.2))
        assert (board.rows, board.columns) == (5, 7)

    def test_non_animatable_shapes(self):
        assert not is_animatable(FlowerGenerator())
        assert not is_animatable(ArcGenerator(0.0, 1.0, False))
        with pytest.raises(TypeError):
            animatable_data(FlowerGenerator())


class TestInterpolation:
    """Test linear interpolation of scalars and pairs."""

    def test_scalar_endpoints(self):
        assert interpolate(10.0, 20.0, 0.0) == 10.0
        assert interpolate(10.0, 20.0, 1.0) == 20.0
        assert interpolate(10.0, 20.0, 0.25) == 12.5

    def test_pair_moves_together(self):
        value = interpolate(AnimatablePair(4, 4), AnimatablePair(8, 16), 0.5)
        assert value == AnimatablePair(6, 10)

    def test_pair_arithmetic(self):
        a = AnimatablePair(1, 2)
        b = AnimatablePair(3, 5)
        assert a + b == AnimatablePair(4, 7)
        assert b - a == AnimatablePair(2, 3)
        assert 2 * a == AnimatablePair(2, 4)
        assert a * 2 == AnimatablePair(2, 4)


class TestTimingCurves:
    """Test easing functions."""

    @pytest.mark.parametrize("curve", list(TimingCurve))
    def test_endpoints(self, curve):
        assert curve(0.0) == pytest.approx(0.0)
        assert curve(1.0) == pytest.approx(1.0)

    @pytest.mark.parametrize("curve", list(TimingCurve))
    def test_monotonic(self, curve):
        values = [curve(i / 50) for i in range(51)]
        assert all(b >= a - 1e-12 for a, b in zip(values, values[1:]))

    def test_linear_is_identity(self):
        assert TimingCurve.LINEAR(0.3) == pytest.approx(0.3)

    def test_ease_in_out_is_symmetric(self):
        curve = TimingCurve.EASE_IN_OUT
        assert curve(0.5) == pytest.approx(0.5, abs=1e-6)
        assert curve(0.2) + curve(0.8) == pytest.approx(1.0, abs=1e-6)

    def test_ease_in_starts_slow(self):
        assert TimingCurve.EASE_IN(0.25) < 0.25
        assert TimingCurve.EASE_OUT(0.25) > 0.25

    def test_out_of_range_clamps(self):
        timing = cubic_bezier(0.42, 0.0, 0.58, 1.0)
        assert timing(-1.0) == 0.0
        assert timing(2.0) == 1.0

    def test_curve_from_name(self):
        assert TimingCurve("ease_in") is TimingCurve.EASE_IN


class TestTransition:
    """Test sampled transitions between shapes."""

    def _grid_growth(self):
        return Transition(
            CheckerboardGenerator(rows=4, columns=4),
            CheckerboardGenerator(rows=8, columns=16),
            duration=3.0,
            curve=TimingCurve.LINEAR,
        )

    def test_frame_count_includes_both_ends(self):
        assert self._grid_growth().frame_count(10) == 31

    def test_frames_start_and_end_on_shapes(self):
        frames = list(self._grid_growth().frames(fps=10))

        assert len(frames) == 31
        assert frames[0].time == 0.0
        assert frames[-1].time == pytest.approx(3.0)
        assert (frames[0].shape.rows, frames[0].shape.columns) == (4, 4)
        assert (frames[-1].shape.rows, frames[-1].shape.columns) == (8, 16)

    def test_linear_midpoint(self):
        shape = self._grid_growth().shape_at(1.5)
        assert (shape.rows, shape.columns) == (6, 10)

    def test_every_frame_is_a_whole_grid(self):
        for shape in self._grid_growth().shapes(fps=10):
            assert isinstance(shape.rows, int)
            assert isinstance(shape.columns, int)
            assert 4 <= shape.rows <= 8
            assert 4 <= shape.columns <= 16

    def test_times_clamp(self):
        transition = Transition(ArrowGenerator(50), ArrowGenerator(100))
        assert transition.shape_at(-1.0).amount == 50
        assert transition.shape_at(10.0).amount == pytest.approx(100)

    def test_default_easing(self):
        transition = Transition(TrapezoidGenerator(10), TrapezoidGenerator(90))
        assert transition.duration == pytest.approx(0.35)
        assert transition.curve is TimingCurve.EASE_IN_OUT
        assert transition.shape_at(0.35 / 2).inset_amount == pytest.approx(50, abs=1e-4)

    def test_string_curve(self):
        transition = Transition(ArrowGenerator(50), ArrowGenerator(60), curve="linear")
        assert transition.curve is TimingCurve.LINEAR

    def test_mismatched_shapes(self):
        with pytest.raises(TypeError):
            Transition(ArrowGenerator(), TrapezoidGenerator())

    def test_non_animatable(self):
        with pytest.raises(TypeError):
            Transition(FlowerGenerator(), FlowerGenerator(0, 50))

    def test_invalid_timing(self):
        with pytest.raises(ValueError):
            Transition(ArrowGenerator(), ArrowGenerator(), duration=0)
        with pytest.raises(ValueError):
            Transition(ArrowGenerator(), ArrowGenerator()).frame_count(0)
