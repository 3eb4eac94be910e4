"""Preview module for image output.

This module turns rendered pixel colors into image files:

Components:
    export: PPM and PNG writers

Example:
    >>> from src.python.preview import save_png
    >>> save_png("output.png", width, height, pixels)
"""

from src.python.preview.export import (
    PPM_MAX_VALUE,
    colors_to_array,
    save_png,
    save_ppm,
    write_ppm,
)

__all__ = [
    "PPM_MAX_VALUE",
    "write_ppm",
    "save_ppm",
    "colors_to_array",
    "save_png",
]
