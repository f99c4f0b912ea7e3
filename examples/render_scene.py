#!/usr/bin/env python3
"""Render a JSON scene file to a PNG image.

The scene file describes geometries, lights and materials and may carry
``camera`` and ``tracer`` sections (see ``whitted.scene.loader``). Command
line options override the tracer recursion depth and the anti-aliasing
grid.

Usage:
    python -m examples.render_scene [options]

Options:
    --scene PATH          Scene JSON file (default: examples/scenes/spheres.json)
    --width WIDTH         Image width in pixels (default: 500)
    --height HEIGHT       Image height in pixels (default: 500)
    --output-dir DIR      Directory for the PNG (default: images)
    --anti-aliasing GRID  Sub-pixel grid size per pixel (default: from scene or 1)
    --max-level LEVEL     Recursion depth (default: from scene or 10)
    --arch {cpu,gpu}      Taichi backend for the pixel buffer (default: cpu)
    --verbose             Enable debug logging
    --quiet               Suppress progress output

Example:
    python -m examples.render_scene --scene examples/scenes/mirrors.json --width 300 --height 300
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
import time
from pathlib import Path

import taichi as ti

DEFAULT_SCENE = Path(__file__).parent / "scenes" / "spheres.json"


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a JSON scene with the Whitted ray tracer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--scene",
        type=Path,
        default=DEFAULT_SCENE,
        help=f"Scene JSON file (default: {DEFAULT_SCENE})",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=500,
        help="Image width in pixels (default: 500)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=500,
        help="Image height in pixels (default: 500)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("images"),
        help="Directory for the PNG (default: images)",
    )
    parser.add_argument(
        "--anti-aliasing",
        type=int,
        default=None,
        help="Sub-pixel grid size per pixel (default: from scene or 1)",
    )
    parser.add_argument(
        "--max-level",
        type=int,
        default=None,
        help="Recursion depth (default: from scene or 10)",
    )
    parser.add_argument(
        "--arch",
        choices=("cpu", "gpu"),
        default="cpu",
        help="Taichi backend for the pixel buffer (default: cpu)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def render_scene(
    scene_path: Path,
    width: int = 500,
    height: int = 500,
    output_dir: Path = Path("images"),
    anti_aliasing: int | None = None,
    max_level: int | None = None,
    quiet: bool = False,
) -> Path:
    """Load a scene file, render it and save the image.

    Args:
        scene_path: Scene JSON file.
        width: Image width in pixels.
        height: Image height in pixels.
        output_dir: Directory the PNG is written to.
        anti_aliasing: Overrides the scene's anti-aliasing grid.
        max_level: Overrides the scene's recursion depth.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports so Taichi is initialized before any field is created
    from whitted.core.errors import ConfigurationError
    from whitted.preview.image_writer import ImageWriter
    from whitted.renderer.ray_tracer import SimpleRayTracer
    from whitted.scene.loader import (
        camera_builder_from_config,
        read_config,
        scene_from_config,
        tracer_config_from_config,
    )

    config = read_config(scene_path)
    if "camera" not in config:
        raise ConfigurationError(f"{scene_path}: no camera section")

    scene = scene_from_config(config)
    tracer_config = tracer_config_from_config(config.get("tracer", {}))
    if max_level is not None:
        tracer_config = dataclasses.replace(tracer_config, max_level=max_level)

    builder = (
        camera_builder_from_config(config["camera"])
        .set_image_writer(ImageWriter(scene.name, width, height, output_dir))
        .set_ray_tracer(SimpleRayTracer(scene, tracer_config))
    )
    if anti_aliasing is not None:
        builder.set_anti_aliasing(anti_aliasing)
    camera = builder.build()

    start_time = time.time()

    def progress_callback(rows_done: int, total_rows: int) -> None:
        if not quiet:
            elapsed = time.time() - start_time
            progress_pct = rows_done / total_rows * 100
            print(
                f"\r  Progress: {rows_done}/{total_rows} rows "
                f"({progress_pct:.1f}%) - {elapsed:.1f}s",
                end="",
                flush=True,
            )

    if not quiet:
        print(f"Rendering {scene.name!r} ({width}x{height})...")
    camera.render_image(progress=progress_callback)
    if not quiet:
        print()  # Newline after progress

    output_file = camera.write_to_image()
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {time.time() - start_time:.2f}s")
    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    ti.init(arch=ti.gpu if args.arch == "gpu" else ti.cpu)

    from whitted.core.errors import ConfigurationError

    try:
        render_scene(
            args.scene,
            width=args.width,
            height=args.height,
            output_dir=args.output_dir,
            anti_aliasing=args.anti_aliasing,
            max_level=args.max_level,
            quiet=args.quiet,
        )
        return 0
    except (ConfigurationError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
