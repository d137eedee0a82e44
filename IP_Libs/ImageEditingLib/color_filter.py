"""
Color Filter Operations.

Provides per-pixel color transforms and black/white dithering:
- Greyscale: Rec. 709 luma written to all three channels
- Sepia: Fixed 3x3 color matrix
- Dither: Greyscale followed by Floyd-Steinberg error diffusion

Greyscale and sepia are vectorized over the whole image. Dithering carries
error from each pixel to pixels not yet visited, so it walks the image in
row-major order one pixel at a time and must stay sequential.
"""

from typing import List

import numpy as np

from IP_Libs.constants import (
    CHANNEL_MAX,
    CHANNEL_MIN,
    DITHER_THRESHOLD,
    LUMA_WEIGHTS,
    SEPIA_MATRIX,
)
from IP_Libs.ImageEditingLib.convolution_filter import round_half_up
from IP_Libs.ImageEditingLib.image_models import PixelBuffer

# (dx, dy, weight) of the Floyd-Steinberg error distribution
_DIFFUSION = (
    (1, 0, 7 / 16),
    (-1, 1, 3 / 16),
    (0, 1, 5 / 16),
    (1, 1, 1 / 16),
)


def compute_luma(image: PixelBuffer) -> np.ndarray:
    """
    Compute the rounded luma of every pixel.

    Args:
        image: Source buffer

    Returns:
        Integer array of shape (height, width) with values 0-255
    """
    pixels = image.to_array().astype(np.float64)
    luma = pixels @ np.asarray(LUMA_WEIGHTS, dtype=np.float64)
    return np.clip(round_half_up(luma), CHANNEL_MIN, CHANNEL_MAX).astype(np.int64)


def apply_greyscale(image: PixelBuffer) -> PixelBuffer:
    """Replace every pixel with its luma on all three channels."""
    luma = compute_luma(image)
    return PixelBuffer(np.repeat(luma[:, :, np.newaxis], 3, axis=2))


def apply_sepia(image: PixelBuffer) -> PixelBuffer:
    """Apply the sepia color matrix to every pixel."""
    pixels = image.to_array().astype(np.float64)
    matrix = np.asarray(SEPIA_MATRIX, dtype=np.float64)
    toned = pixels @ matrix.T
    result = np.clip(round_half_up(toned), CHANNEL_MIN, CHANNEL_MAX)
    return PixelBuffer(result.astype(np.uint8))


def apply_dither(image: PixelBuffer) -> PixelBuffer:
    """
    Reduce the image to pure black and white with error diffusion.

    The image is first converted to greyscale. Each pixel is then set to 0 or
    255 by thresholding, and the rounding error is pushed to the right,
    lower-left, lower and lower-right neighbours so that average brightness
    is roughly preserved.

    Returns:
        Buffer whose channels are all exactly 0 or 255
    """
    width, height = image.width, image.height
    values: List[List[float]] = compute_luma(image).astype(np.float64).tolist()
    output = np.zeros((height, width), dtype=np.uint8)

    for y in range(height):
        row = values[y]
        for x in range(width):
            old = row[x]
            new = CHANNEL_MAX if old >= DITHER_THRESHOLD else CHANNEL_MIN
            output[y, x] = new
            error = old - new
            if error == 0:
                continue
            for dx, dy, weight in _DIFFUSION:
                nx, ny = x + dx, y + dy
                if 0 <= nx < width and ny < height:
                    values[ny][nx] += error * weight

    return PixelBuffer(np.repeat(output[:, :, np.newaxis], 3, axis=2))
