#!/usr/bin/env python3
"""Render the red/green gradient test image.

This script writes the classic first image of a ray tracer: red increases
left to right, green increases top to bottom, blue is zero. It exercises the
color conversion and image export path end to end.

Usage:
    python -m examples.render_gradient [options]

Options:
    --width WIDTH       Image width in pixels (default: 256)
    --height HEIGHT     Image height in pixels (default: 256)
    --output OUTPUT     Output file path, .ppm or .png (default: gradient.ppm)
    --quiet             Suppress progress output

Example:
    python -m examples.render_gradient --width 400 --height 225 --output image.png
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from src.python.core.color import Color3


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the red/green gradient test image.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=256,
        help="Image width in pixels (default: 256)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=256,
        help="Image height in pixels (default: 256)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="gradient.ppm",
        help="Output file path, .ppm or .png (default: gradient.ppm)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def gradient_pixels(width: int, height: int, quiet: bool = True) -> list[Color3]:
    """Compute the gradient image as row-major pixels.

    Args:
        width: Image width in pixels (at least 2).
        height: Image height in pixels (at least 2).
        quiet: If False, report remaining scanlines on stderr.

    Returns:
        ``width * height`` colors, top row first.
    """
    pixels = []
    for j in range(height):
        if not quiet:
            print(f"\rScanlines remaining: {height - j} ", end="", file=sys.stderr, flush=True)
        for i in range(width):
            pixels.append(Color3(i / (width - 1), j / (height - 1), 0.0))
    return pixels


def render_gradient(
    width: int = 256,
    height: int = 256,
    output_path: str = "gradient.ppm",
    quiet: bool = False,
) -> Path:
    """Render the gradient and write it out.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        output_path: Output file path; the suffix selects PPM or PNG.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    from src.python.preview.export import save_png, save_ppm

    if width < 2 or height < 2:
        raise ValueError(f"Gradient needs at least 2x2 pixels, got {width}x{height}")

    start_time = time.time()
    pixels = gradient_pixels(width, height, quiet=quiet)

    if Path(output_path).suffix.lower() == ".png":
        output_file = save_png(output_path, width, height, pixels)
    else:
        output_file = save_ppm(output_path, width, height, pixels)

    if not quiet:
        print("\rDone.                 ", file=sys.stderr)
        print(f"Saved to: {output_file.absolute()}", file=sys.stderr)
        print(f"Total time: {time.time() - start_time:.2f}s", file=sys.stderr)

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    try:
        render_gradient(
            width=args.width,
            height=args.height,
            output_path=args.output,
            quiet=args.quiet,
        )
        return 0
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
