"""Transitions between two parameter sets of the same shape.

A Transition samples intermediate generators: at each time it eases the
progress, interpolates the animatable data, and writes the value back
into a copy of the start shape. The shape's own ``path`` is then called
per frame like for any other generator.

Usage:
    transition = Transition(
        CheckerboardGenerator(rows=4, columns=4),
        CheckerboardGenerator(rows=8, columns=16),
        duration=3.0,
        curve=TimingCurve.LINEAR,
    )
    for frame in transition.frames(fps=30):
        path = frame.shape.path(bounds)
"""

from dataclasses import dataclass
from typing import Iterator, List, Union
import logging

from ..shapes import ShapeGenerator
from .animatable import (
    AnimatableValue,
    animatable_data,
    interpolate,
    is_animatable,
    with_animatable_data,
)
from .timing import TimingCurve

logger = logging.getLogger(__name__)

DEFAULT_DURATION = 0.35


@dataclass(frozen=True)
class Frame:
    """One sampled step of a transition."""
    index: int
    time: float
    progress: float
    shape: ShapeGenerator


class Transition:
    """Animate a shape from one animatable value to another."""

    def __init__(
        self,
        start: ShapeGenerator,
        end: ShapeGenerator,
        duration: float = DEFAULT_DURATION,
        curve: Union[TimingCurve, str] = TimingCurve.EASE_IN_OUT,
    ):
        if type(start) is not type(end):
            raise TypeError(
                f"Cannot transition from {type(start).__name__} to {type(end).__name__}"
            )
        if not is_animatable(start):
            raise TypeError(f"{type(start).__name__} has no animatable data")
        if duration <= 0:
            raise ValueError(f"duration must be positive, got {duration}")

        self.start = start
        self.end = end
        self.duration = float(duration)
        self.curve = TimingCurve(curve)
        self._start_value = animatable_data(start)
        self._end_value = animatable_data(end)

    def progress_at(self, time: float) -> float:
        """Eased progress in [0, 1]; times outside the transition clamp."""
        linear = min(1.0, max(0.0, time / self.duration))
        return self.curve(linear)

    def value_at(self, time: float) -> AnimatableValue:
        return interpolate(self._start_value, self._end_value, self.progress_at(time))

    def shape_at(self, time: float) -> ShapeGenerator:
        return with_animatable_data(self.start, self.value_at(time))

    def frame_count(self, fps: float) -> int:
        """Frames from time 0 through ``duration``, both ends included."""
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        return max(1, int(round(self.duration * fps))) + 1

    def frames(self, fps: float = 60) -> Iterator[Frame]:
        count = self.frame_count(fps)
        logger.debug(
            "Transition %s over %.2fs: %d frames (%s)",
            type(self.start).__name__, self.duration, count, self.curve.value,
        )
        for index in range(count):
            time = self.duration * index / (count - 1)
            yield Frame(
                index=index,
                time=time,
                progress=self.progress_at(time),
                shape=self.shape_at(time),
            )

    def shapes(self, fps: float = 60) -> List[ShapeGenerator]:
        return [frame.shape for frame in self.frames(fps)]
