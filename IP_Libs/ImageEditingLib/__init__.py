"""
ImageEditingLib - Core image editing functionality

This module provides the pixel buffer model, filters, the mosaic filter,
procedural generators and file I/O for the Open Image Processor.
"""

from IP_Libs.ImageEditingLib.image_models import (
    CheckerboardSpec,
    FilterKind,
    FilterRequest,
    GeneratorKind,
    GeneratorSpec,
    Orientation,
    PixelBuffer,
    RainbowSpec,
    RgbColor,
)
from IP_Libs.ImageEditingLib.convolution_filter import apply_blur, apply_sharpen, convolve
from IP_Libs.ImageEditingLib.color_filter import apply_dither, apply_greyscale, apply_sepia
from IP_Libs.ImageEditingLib.mosaic_filter import apply_mosaic
from IP_Libs.ImageEditingLib.generators import (
    generate_checkerboard,
    generate_image,
    generate_rainbow,
)
from IP_Libs.ImageEditingLib.filter_engine import apply_filter
from IP_Libs.ImageEditingLib.image_editing_ops import (
    load_image,
    save_image,
)

__all__ = [
    "CheckerboardSpec",
    "FilterKind",
    "FilterRequest",
    "GeneratorKind",
    "GeneratorSpec",
    "Orientation",
    "PixelBuffer",
    "RainbowSpec",
    "RgbColor",
    "apply_blur",
    "apply_sharpen",
    "convolve",
    "apply_dither",
    "apply_greyscale",
    "apply_sepia",
    "apply_mosaic",
    "generate_checkerboard",
    "generate_image",
    "generate_rainbow",
    "apply_filter",
    "load_image",
    "save_image",
]
