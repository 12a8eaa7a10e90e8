"""Demo: Watching shapes animate between parameter sets.

Runs the three tap transitions from the gallery and prints what each
frame would draw, without writing any files.

Key visualizations:
1. Checkerboard growth: grid size per frame, with the filled cell pattern
2. Arrow and trapezoid easing: parameter value against time
3. Spirograph: the curve plotted as text

Usage:
    python examples/demo_transitions.py --fps 10 --seed 3
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np

from drawing import DrawingConfig, Rect, SpirographGenerator
from drawing.gallery import build_transitions


def show_checkerboard(transition, fps: float):
    """Print grid dimensions whenever they change."""
    print(f"\n{'='*60}")
    print(f"CHECKERBOARD ({transition.duration:.1f}s, {transition.curve.value})")
    print(f"{'='*60}")

    last = None
    for frame in transition.frames(fps):
        size = (frame.shape.rows, frame.shape.columns)
        if size == last:
            continue
        last = size
        print(f"  t={frame.time:5.2f}s  {size[0]:2d} x {size[1]:2d}  "
              f"filled={frame.shape.filled_count}")

    final = transition.end
    print("\nFinal pattern:")
    filled = set(final.filled_cells())
    for row in range(final.rows):
        print("  " + "".join("#" if (row, c) in filled else "." for c in range(final.columns)))


def show_easing(name: str, transition, attribute: str, fps: float):
    """Print an eased parameter as a bar per frame."""
    print(f"\n{'='*60}")
    print(f"{name.upper()} ({transition.duration:.2f}s, {transition.curve.value})")
    print(f"{'='*60}")

    start = getattr(transition.start, attribute)
    end = getattr(transition.end, attribute)
    span = max(abs(end - start), 1e-9)
    for frame in transition.frames(fps):
        value = getattr(frame.shape, attribute)
        bar = "=" * int(round(abs(value - start) / span * 40))
        print(f"  t={frame.time:4.2f}s  {attribute}={value:7.2f}  |{bar}")


def plot_spirograph(spirograph: SpirographGenerator, bounds: Rect):
    """Plot the sampled curve onto a character grid."""
    width = 60
    height = 30

    points = spirograph.sample(bounds)
    print(f"\n{'='*60}")
    print(f"SPIROGRAPH {spirograph.inner_radius}/{spirograph.outer_radius}/"
          f"{spirograph.distance}  ({len(points)} points)")
    print(f"{'='*60}")

    grid = [[' ' for _ in range(width)] for _ in range(height)]
    xs = np.clip((points[:, 0] / bounds.width * (width - 1)).astype(int), 0, width - 1)
    ys = np.clip((points[:, 1] / bounds.height * (height - 1)).astype(int), 0, height - 1)
    for xi, yi in zip(xs, ys):
        grid[yi][xi] = '*'

    print('+' + '-' * width + '+')
    for row in grid:
        print('|' + ''.join(row) + '|')
    print('+' + '-' * width + '+')


def main():
    parser = argparse.ArgumentParser(description="Shape transition demo")
    parser.add_argument("--fps", type=float, default=10, help="Frames per second")
    parser.add_argument("--seed", type=int, default=None, help="Seed for random tap targets")
    args = parser.parse_args()

    config = DrawingConfig()
    transitions = build_transitions(config, np.random.default_rng(args.seed))

    show_checkerboard(transitions["checkerboard"], args.fps)
    show_easing("arrow", transitions["arrow"], "amount", args.fps * 6)
    show_easing("trapezoid", transitions["trapezoid"], "inset_amount", args.fps * 6)

    plot_spirograph(
        SpirographGenerator(
            config.spirograph_inner_radius,
            config.spirograph_outer_radius,
            config.spirograph_distance,
            config.spirograph_amount,
        ),
        Rect.of_size(config.canvas_width, config.canvas_height),
    )


if __name__ == "__main__":
    main()
