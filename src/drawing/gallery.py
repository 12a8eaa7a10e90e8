"""The demo gallery: every shape with its example parameters.

Builds shapes, paint and transitions from a DrawingConfig so the gallery
script and the tests share one definition of what the examples look like.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional
import logging
import numpy as np

from .animation import TimingCurve, Transition
from .color import ColorCycleGradient
from .config import DrawingConfig
from .geometry import Rect
from .render.figures import ShapeStyle
from .shapes import (
    ArcGenerator,
    ArrowGenerator,
    CheckerboardGenerator,
    FlowerGenerator,
    ShapeGenerator,
    SpirographGenerator,
    TrapezoidGenerator,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GalleryEntry:
    """A shape, the bounds it is drawn into, and its paint."""
    name: str
    shape: ShapeGenerator
    bounds: Rect
    fill: Optional[str] = None
    stroke: Optional[str] = None
    stroke_width: float = 1.0

    @property
    def style(self) -> ShapeStyle:
        return ShapeStyle(
            facecolor=self.fill or "none",
            edgecolor=self.stroke or "none",
            linewidth=self.stroke_width if self.stroke else 0.0,
        )


def build_entries(config: DrawingConfig) -> List[GalleryEntry]:
    """All six shapes with their example parameters."""
    canvas = Rect.of_size(config.canvas_width, config.canvas_height)

    # A stroked border stays inside the bounds: inset by half the line width
    arc = ArcGenerator.from_degrees(
        config.arc_start_degrees,
        config.arc_end_degrees,
        config.arc_clockwise,
    ).inset(config.arc_stroke_width / 2)

    return [
        GalleryEntry("arrow", ArrowGenerator(config.arrow_amount), canvas, fill="black"),
        GalleryEntry(
            "arc", arc, canvas,
            stroke="blue", stroke_width=config.arc_stroke_width,
        ),
        GalleryEntry(
            "flower",
            FlowerGenerator(config.petal_offset, config.petal_width),
            canvas,
            fill="red",
        ),
        GalleryEntry(
            "checkerboard",
            CheckerboardGenerator(config.checkerboard_rows, config.checkerboard_columns),
            canvas,
            fill="black",
        ),
        GalleryEntry(
            "spirograph",
            SpirographGenerator(
                config.spirograph_inner_radius,
                config.spirograph_outer_radius,
                config.spirograph_distance,
                config.spirograph_amount,
            ),
            canvas,
            stroke="purple",
            stroke_width=1.0,
        ),
        GalleryEntry(
            "trapezoid",
            TrapezoidGenerator(config.trapezoid_inset),
            Rect.of_size(config.trapezoid_width, config.trapezoid_height),
            fill="black",
        ),
    ]


def build_gradient(config: DrawingConfig) -> ColorCycleGradient:
    return ColorCycleGradient(
        cycle_position_1=config.color_cycle_position_1,
        cycle_position_2=config.color_cycle_position_2,
        steps=config.color_cycle_steps,
        start_point=config.gradient_start,
        end_point=config.gradient_end,
    )


def build_transitions(
    config: DrawingConfig,
    rng: Optional[np.random.Generator] = None,
) -> Dict[str, Transition]:
    """What a tap does for each animatable shape.

    The arrow and trapezoid jump to a random value in their range with the
    default easing; the checkerboard grows linearly to its target grid.
    """
    rng = rng or np.random.default_rng()

    arrow_target = float(rng.uniform(*config.arrow_random_range))
    inset_target = float(rng.uniform(*config.trapezoid_random_range))
    logger.debug("Random targets: arrow=%.1f, trapezoid=%.1f", arrow_target, inset_target)

    return {
        "arrow": Transition(
            ArrowGenerator(config.arrow_amount),
            ArrowGenerator(arrow_target),
            duration=config.transition_duration,
        ),
        "trapezoid": Transition(
            TrapezoidGenerator(config.trapezoid_inset),
            TrapezoidGenerator(inset_target),
            duration=config.transition_duration,
        ),
        "checkerboard": Transition(
            CheckerboardGenerator(config.checkerboard_rows, config.checkerboard_columns),
            CheckerboardGenerator(
                config.checkerboard_target_rows,
                config.checkerboard_target_columns,
            ),
            duration=config.checkerboard_duration,
            curve=TimingCurve.LINEAR,
        ),
    }
