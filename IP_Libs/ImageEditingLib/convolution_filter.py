"""
Convolution Filter Operations.

Provides 3x3 kernel filters applied to each channel independently:
- Blur: Weighted average of the pixel and its neighbours
- Sharpen: Boosts the pixel against its direct neighbours

Border pixels use clamp-to-edge sampling: a neighbour outside the image
reads the nearest edge pixel. A uniform image is therefore left unchanged
by any kernel whose weights sum to one.

Example:
    >>> from IP_Libs.ImageEditingLib.image_models import PixelBuffer
    >>> image = PixelBuffer.filled(4, 4, (200, 10, 10))
    >>>
    >>> blurred = apply_blur(image)
    >>> sharpened = apply_sharpen(image)
"""

from typing import Sequence

import numpy as np

from IP_Libs.constants import BLUR_KERNEL, CHANNEL_MAX, CHANNEL_MIN, SHARPEN_KERNEL
from IP_Libs.ImageEditingLib.image_models import PixelBuffer


def round_half_up(values: np.ndarray) -> np.ndarray:
    """Round to the nearest integer, halves away from negative infinity."""
    return np.floor(values + 0.5)


def convolve(image: PixelBuffer, kernel: Sequence[Sequence[float]]) -> PixelBuffer:
    """
    Convolve every channel of ``image`` with a 3x3 kernel.

    Args:
        image: Source buffer
        kernel: 3x3 weights, row-major, centre at [1][1]

    Returns:
        New buffer with rounded, clamped results

    Raises:
        ValueError: If kernel is not 3x3
    """
    weights = np.asarray(kernel, dtype=np.float64)
    if weights.shape != (3, 3):
        raise ValueError(f"kernel must be 3x3, got shape {weights.shape}")

    source = image.to_array().astype(np.float64)
    padded = np.pad(source, ((1, 1), (1, 1), (0, 0)), mode="edge")
    height, width = image.height, image.width

    accumulated = np.zeros_like(source)
    for dy in range(3):
        for dx in range(3):
            weight = weights[dy, dx]
            if weight == 0.0:
                continue
            accumulated += weight * padded[dy:dy + height, dx:dx + width]

    result = np.clip(round_half_up(accumulated), CHANNEL_MIN, CHANNEL_MAX)
    return PixelBuffer(result.astype(np.uint8))


def apply_blur(image: PixelBuffer) -> PixelBuffer:
    """Apply a 3x3 Gaussian-style blur."""
    return convolve(image, BLUR_KERNEL)


def apply_sharpen(image: PixelBuffer) -> PixelBuffer:
    """Apply a 3x3 sharpening kernel."""
    return convolve(image, SHARPEN_KERNEL)
