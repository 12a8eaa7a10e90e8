#!/usr/bin/env python
"""Render every example shape and the color-cycle gradient.

Writes one file per shape into the output directory, plus optional
transition frames for the animatable shapes (arrow, trapezoid,
checkerboard).

Usage:
    python scripts/render_gallery.py [--format svg|png|pdf] [--preset preview] [--frames]

Options:
    --output-dir DIR   Where to write files (default: from preset)
    --format FMT       svg (no extra dependencies), png or pdf (matplotlib)
    --preset NAME      default, preview or print
    --frames           Also render transition frames
    --seed N           Seed for the random tap targets
"""

import sys
import argparse
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np

from drawing import DrawingConfig
from drawing.gallery import build_entries, build_gradient, build_transitions
from drawing.render import SvgCanvas, render_gradient_svg, HAS_MATPLOTLIB


def write_svg_entries(entries, gradient, output_dir, precision):
    paths = []
    for entry in entries:
        canvas = SvgCanvas(entry.bounds.width, entry.bounds.height, precision=precision)
        canvas.add_shape(
            entry.shape,
            entry.bounds,
            fill=entry.fill,
            stroke=entry.stroke,
            stroke_width=entry.stroke_width,
        )
        paths.append(canvas.save(output_dir / f"{entry.name}.svg"))

    bounds = entries[0].bounds
    paths.append(render_gradient_svg(gradient, bounds.width, bounds.height).save(output_dir / "color_cycle.svg"))
    return paths


def write_figure_entries(renderer, entries, gradient, output_dir, fmt):
    paths = []
    for entry in entries:
        paths.append(renderer.render_shape(
            entry.shape, entry.bounds, output_dir / f"{entry.name}.{fmt}", entry.style
        ))
    bounds = entries[0].bounds
    paths.append(renderer.render_gradient(gradient, bounds, output_dir / f"color_cycle.{fmt}"))
    paths.append(renderer.render_gallery(
        [(e.name, e.shape, e.bounds, e.style) for e in entries],
        output_dir / f"gallery.{fmt}",
        gradient=gradient,
    ))
    return paths


def write_transition_frames(transitions, entries, config, output_dir, fmt, renderer=None):
    by_name = {entry.name: entry for entry in entries}
    paths = []
    for name, transition in transitions.items():
        entry = by_name[name]
        frames_dir = output_dir / "frames" / name
        if fmt == "svg":
            for frame in transition.frames(config.frames_per_second):
                canvas = SvgCanvas(entry.bounds.width, entry.bounds.height, precision=config.svg_precision)
                canvas.add_shape(frame.shape, entry.bounds, fill=entry.fill, stroke=entry.stroke,
                                 stroke_width=entry.stroke_width)
                paths.append(canvas.save(frames_dir / f"{name}_{frame.index:04d}.svg"))
        else:
            paths.append(renderer.render_transition(
                transition, entry.bounds, output_dir / f"{name}_transition.{fmt}", style=entry.style
            ))
    return paths


def main():
    parser = argparse.ArgumentParser(description="Render the shape gallery")
    parser.add_argument("--output-dir", type=Path, default=None,
                        help="Directory for rendered files")
    parser.add_argument("--format", choices=["svg", "png", "pdf"], default=None,
                        help="Output format (default: from preset)")
    parser.add_argument("--preset", choices=["default", "preview", "print"], default="default",
                        help="Configuration preset")
    parser.add_argument("--frames", action="store_true",
                        help="Also render transition frames")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for random tap targets")
    args = parser.parse_args()

    config = DrawingConfig.from_preset(args.preset)
    fmt = args.format or config.image_format
    output_dir = args.output_dir or Path(config.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    print(f"Preset: {args.preset}  Format: {fmt}")
    print(f"Output directory: {output_dir}")

    renderer = None
    if fmt != "svg":
        if not HAS_MATPLOTLIB:
            print("matplotlib is required for png/pdf output. Install with: pip install matplotlib")
            return 1
        from drawing.render import FigureRenderer
        renderer = FigureRenderer(config)

    entries = build_entries(config)
    gradient = build_gradient(config).linear_gradient()

    print(f"\n{'='*60}")
    print("Rendering shapes")
    print(f"{'='*60}")
    if fmt == "svg":
        written = write_svg_entries(entries, gradient, output_dir, config.svg_precision)
    else:
        written = write_figure_entries(renderer, entries, gradient, output_dir, fmt)
    for path in written:
        print(f"  - {path.name}")

    if args.frames:
        print(f"\n{'='*60}")
        print("Rendering transitions")
        print(f"{'='*60}")
        rng = np.random.default_rng(args.seed)
        transitions = build_transitions(config, rng)
        frame_paths = write_transition_frames(transitions, entries, config, output_dir, fmt, renderer)
        for name, transition in transitions.items():
            print(f"  - {name}: {transition.frame_count(config.frames_per_second)} frames "
                  f"over {transition.duration:.2f}s ({transition.curve.value})")
        written.extend(frame_paths)

    print(f"\n{len(written)} files written to: {output_dir}")
    print("Done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
