"""Image export utilities for rendered pixel colors.

This module writes a row-major list of ``Color3`` pixels (top row first) to
image files.

Supported formats:
    - PPM (plain-text ``P3`` portable pixmap)
    - PNG (8-bit RGB via Pillow)

Both formats use the same byte conversion as ``Color3.to_bytes`` so a PPM
and a PNG of the same pixels hold identical values.

Example:
    >>> from src.python.core.color import Color3
    >>> from src.python.preview.export import save_ppm
    >>>
    >>> pixels = [Color3.RED, Color3.GREEN, Color3.BLUE, Color3.WHITE]
    >>> save_ppm("out.ppm", 2, 2, pixels)
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from src.python.core.color import Color3, write_colors_batch

# Maximum channel value declared in the PPM header
PPM_MAX_VALUE = 255


def _check_dimensions(width: int, height: int, colors: Sequence[Color3]) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions must be positive: {width}x{height}")
    if len(colors) != width * height:
        raise ValueError(
            f"Expected {width * height} pixels for a {width}x{height} image, got {len(colors)}"
        )


def write_ppm(out: TextIO, width: int, height: int, colors: Sequence[Color3]) -> None:
    """Write a plain-text PPM image to a text sink.

    The header is ``P3``, ``"<width> <height>"`` and ``255`` on separate
    lines, followed by one ``"R G B"`` line per pixel.

    Args:
        out: Text sink owned by the caller.
        width: Image width in pixels.
        height: Image height in pixels.
        colors: Row-major pixels, ``width * height`` of them.

    Raises:
        ValueError: If the dimensions are not positive or do not match
            the number of pixels.
        OSError: Propagated unchanged from the sink.
    """
    _check_dimensions(width, height, colors)
    out.write(f"P3\n{width} {height}\n{PPM_MAX_VALUE}\n")
    write_colors_batch(out, colors)


def save_ppm(
    filepath: str | Path,
    width: int,
    height: int,
    colors: Sequence[Color3],
) -> Path:
    """Save pixels as a PPM file.

    Args:
        filepath: Output file path (should end in .ppm).
        width: Image width in pixels.
        height: Image height in pixels.
        colors: Row-major pixels.

    Returns:
        Path to the written file.
    """
    path = Path(filepath)
    with path.open("w", encoding="ascii", newline="\n") as f:
        write_ppm(f, width, height, colors)
    return path


def colors_to_array(
    colors: Sequence[Color3],
    width: int,
    height: int,
) -> npt.NDArray[np.uint8]:
    """Convert row-major pixels to an 8-bit image array.

    Args:
        colors: Row-major pixels, ``width * height`` of them.
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        Array of shape (height, width, 3) with dtype uint8.
    """
    _check_dimensions(width, height, colors)
    image = np.array([color.to_bytes() for color in colors], dtype=np.uint8)
    return image.reshape(height, width, 3)


def save_png(
    filepath: str | Path,
    width: int,
    height: int,
    colors: Sequence[Color3],
) -> Path:
    """Save pixels as an 8-bit RGB PNG file.

    Args:
        filepath: Output file path (should end in .png).
        width: Image width in pixels.
        height: Image height in pixels.
        colors: Row-major pixels.

    Returns:
        Path to the written file.
    """
    path = Path(filepath)
    image_uint8 = colors_to_array(colors, width, height)

    # Save using Pillow; a (H, W, 3) uint8 array is read as RGB
    pil_image = PILImage.fromarray(image_uint8)
    pil_image.save(path)
    return path
