"""Configuration for rendering the shape gallery."""

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Tuple


@dataclass
class DrawingConfig:
    """Canvas sizes, demo parameters and output settings.

    Demo values reproduce the interactive examples each shape was built
    for: tapping the arrow or trapezoid picks a random target in the given
    range, and tapping the checkerboard grows it from 4x4 to 8x16 over
    three seconds.
    """

    # Canvas
    canvas_width: float = 300.0
    canvas_height: float = 300.0

    # Arrow
    arrow_amount: float = 50.0
    arrow_random_range: Tuple[float, float] = (50.0, 130.0)

    # Arc (degrees at this boundary)
    arc_start_degrees: float = 0.0
    arc_end_degrees: float = 110.0
    arc_clockwise: bool = True
    arc_stroke_width: float = 40.0

    # Flower
    petal_offset: float = -20.0
    petal_width: float = 100.0
    petal_offset_range: Tuple[float, float] = (-40.0, 40.0)
    petal_width_range: Tuple[float, float] = (0.0, 100.0)

    # Checkerboard
    checkerboard_rows: int = 4
    checkerboard_columns: int = 4
    checkerboard_target_rows: int = 8
    checkerboard_target_columns: int = 16
    checkerboard_duration: float = 3.0

    # Spirograph
    spirograph_inner_radius: int = 125
    spirograph_outer_radius: int = 75
    spirograph_distance: int = 25
    spirograph_amount: float = 1.0

    # Trapezoid
    trapezoid_inset: float = 50.0
    trapezoid_width: float = 200.0
    trapezoid_height: float = 100.0
    trapezoid_random_range: Tuple[float, float] = (10.0, 90.0)

    # Color cycle
    color_cycle_steps: int = 100
    color_cycle_position_1: float = 0.0
    color_cycle_position_2: float = 0.0
    gradient_start: Tuple[float, float] = (0.2, 0.2)
    gradient_end: Tuple[float, float] = (0.2, 0.2)

    # Animation
    transition_duration: float = 0.35
    frames_per_second: int = 30

    # Output
    output_dir: str = "gallery"
    image_format: str = "svg"    # "svg", "png" or "pdf"
    dpi: int = 150
    svg_precision: int = 2

    @classmethod
    def default(cls) -> "DrawingConfig":
        return cls()

    @classmethod
    def for_preview(cls) -> "DrawingConfig":
        """Small, fast output for quick checks."""
        return cls(
            canvas_width=150.0,
            canvas_height=150.0,
            arrow_amount=25.0,
            arrow_random_range=(25.0, 65.0),
            petal_offset=-10.0,
            petal_width=50.0,
            spirograph_inner_radius=60,
            spirograph_outer_radius=36,
            spirograph_distance=12,
            trapezoid_inset=25.0,
            trapezoid_width=100.0,
            trapezoid_height=50.0,
            trapezoid_random_range=(5.0, 45.0),
            frames_per_second=12,
            dpi=72,
            svg_precision=1,
        )

    @classmethod
    def for_print(cls) -> "DrawingConfig":
        """High resolution vector output."""
        return cls(
            image_format="pdf",
            dpi=300,
            frames_per_second=60,
            svg_precision=3,
        )

    @classmethod
    def from_preset(cls, name: str) -> "DrawingConfig":
        presets = {
            "default": cls.default,
            "preview": cls.for_preview,
            "print": cls.for_print,
        }
        if name not in presets:
            raise ValueError(f"Unknown preset {name!r}; expected one of {sorted(presets)}")
        return presets[name]()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DrawingConfig":
        """Build from a mapping, ignoring keys that are not config fields."""
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            if key not in known:
                continue
            if isinstance(value, list):
                value = tuple(value)
            values[key] = value
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
