"""
Procedural image generators.

Functions:
    generate_rainbow: Seven-band rainbow stripes
    generate_checkerboard: Two-color checkerboard
    generate_image: Dispatch on a generator spec
"""

import numpy as np

from IP_Libs.constants import CHECKERBOARD_COLORS, RAINBOW_COLORS
from IP_Libs.ImageEditingLib.image_models import (
    CheckerboardSpec,
    GeneratorSpec,
    Orientation,
    PixelBuffer,
    RainbowSpec,
)


def _band_indices(extent: int, band_count: int) -> np.ndarray:
    return np.arange(extent, dtype=np.int64) * band_count // extent


def generate_rainbow(spec: RainbowSpec) -> PixelBuffer:
    """
    Generate rainbow stripes.

    A horizontal rainbow splits the width into equal-width bands laid out
    left to right; a vertical rainbow splits the height into equal-height
    bands stacked top to bottom. Colors run red, orange, yellow, green, blue,
    indigo, violet. Band sizes differ by at most one pixel when the extent is
    not a multiple of 7.

    Args:
        spec: Orientation and image dimensions

    Returns:
        New width x height buffer
    """
    palette = np.asarray(RAINBOW_COLORS, dtype=np.uint8)
    if spec.orientation is Orientation.HORIZONTAL:
        bands = _band_indices(spec.width, len(palette))
        columns = palette[bands]
        pixels = np.repeat(columns[np.newaxis, :, :], spec.height, axis=0)
    else:
        bands = _band_indices(spec.height, len(palette))
        rows = palette[bands]
        pixels = np.repeat(rows[:, np.newaxis, :], spec.width, axis=1)
    return PixelBuffer(pixels)


def generate_checkerboard(spec: CheckerboardSpec) -> PixelBuffer:
    """
    Generate a square checkerboard.

    The board is ``squares_per_side`` squares wide and tall; the top-left
    square takes the first checkerboard color.
    """
    side = spec.square_size * spec.squares_per_side
    cells = np.arange(side, dtype=np.int64) // spec.square_size
    parity = (cells[:, np.newaxis] + cells[np.newaxis, :]) % 2
    palette = np.asarray(CHECKERBOARD_COLORS, dtype=np.uint8)
    return PixelBuffer(palette[parity])


def generate_image(spec: GeneratorSpec) -> PixelBuffer:
    if isinstance(spec, RainbowSpec):
        return generate_rainbow(spec)
    if isinstance(spec, CheckerboardSpec):
        return generate_checkerboard(spec)
    raise TypeError(f"Unknown generator spec: {type(spec).__name__}")
