"""
Filter dispatch.

Maps a FilterRequest onto the filter function that implements it. Every
FilterKind other than MOSAIC must have an entry in SIMPLE_FILTERS.
"""

import logging
from typing import Any, Callable, Dict, Optional

from IP_Libs.errors import EmptyImageError
from IP_Libs.ImageEditingLib.color_filter import apply_dither, apply_greyscale, apply_sepia
from IP_Libs.ImageEditingLib.convolution_filter import apply_blur, apply_sharpen
from IP_Libs.ImageEditingLib.image_models import FilterKind, FilterRequest, PixelBuffer
from IP_Libs.ImageEditingLib.mosaic_filter import apply_mosaic

logger = logging.getLogger(__name__)

SimpleFilter = Callable[[PixelBuffer], PixelBuffer]

SIMPLE_FILTERS: Dict[FilterKind, SimpleFilter] = {
    FilterKind.BLUR: apply_blur,
    FilterKind.SHARPEN: apply_sharpen,
    FilterKind.GREYSCALE: apply_greyscale,
    FilterKind.SEPIA: apply_sepia,
    FilterKind.DITHER: apply_dither,
}

_unhandled = set(FilterKind) - set(SIMPLE_FILTERS) - {FilterKind.MOSAIC}
if _unhandled:
    raise RuntimeError(f"No filter implementation for: {sorted(k.value for k in _unhandled)}")


def apply_filter(
    image: Optional[PixelBuffer],
    request: FilterRequest,
    rng: Optional[Any] = None,
    max_workers: Optional[int] = None,
) -> PixelBuffer:
    """
    Run one filter.

    Args:
        image: Current image, or None when nothing is loaded
        request: Filter kind and parameters
        rng: Random source for the mosaic filter
        max_workers: Thread count for the mosaic assignment phase

    Returns:
        New filtered buffer

    Raises:
        EmptyImageError: If image is None
        InvalidParameterError: If the request's parameters are invalid
    """
    if image is None:
        raise EmptyImageError(f"Cannot apply {request.kind.value}: no image is loaded")

    logger.debug(f"Applying {request.kind.value} to {image.width}x{image.height} image")

    if request.kind is FilterKind.MOSAIC:
        return apply_mosaic(image, request.seed_count, rng=rng, max_workers=max_workers)
    return SIMPLE_FILTERS[request.kind](image)
