"""
Core image I/O and conversion operations for Open Image Processor.

This module bridges PixelBuffers and Pillow: conversion in both directions,
loading and saving files.

Functions:
    to_pil_image: Convert a PixelBuffer to a Pillow RGB image
    from_pil_image: Convert any Pillow image to a PixelBuffer
    resolve_image_format: Map a file extension to a Pillow format name
    load_image: Decode an image file into a PixelBuffer
    save_image: Encode a PixelBuffer into an image file
    to_png_bytes: Encode a PixelBuffer as PNG bytes
"""

from io import BytesIO
from pathlib import Path
from typing import Any, Dict, List, Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from IP_Libs.constants import DEFAULT_JPEG_QUALITY, SUPPORTED_IMAGE_FORMATS
from IP_Libs.errors import ImageIOError
from IP_Libs.ImageEditingLib.image_models import PixelBuffer

PathLike = Union[str, Path]


def to_pil_image(buffer: PixelBuffer) -> Image.Image:
    return Image.fromarray(buffer.to_array())


def from_pil_image(image: Any) -> PixelBuffer:
    """
    Convert a Pillow image of any mode to a PixelBuffer.

    Args:
        image: A PIL Image object

    Returns:
        RGB PixelBuffer with the same dimensions
    """
    if image.mode != "RGB":
        image = image.convert("RGB")
    return PixelBuffer.from_array(np.asarray(image))


def get_supported_extensions() -> List[str]:
    return sorted(SUPPORTED_IMAGE_FORMATS)


def resolve_image_format(file_path: PathLike) -> str:
    """
    Map a file extension to a Pillow format name.

    Raises:
        ImageIOError: If the extension is not a supported image format
    """
    ext = Path(file_path).suffix.lower()
    if ext not in SUPPORTED_IMAGE_FORMATS:
        supported = ", ".join(get_supported_extensions())
        raise ImageIOError(
            f"Unsupported image format '{ext or Path(file_path).name}'. "
            f"Supported formats: {supported}"
        )
    return SUPPORTED_IMAGE_FORMATS[ext]


def get_save_kwargs(save_format: str, quality: int = DEFAULT_JPEG_QUALITY) -> Dict[str, Any]:
    """Get PIL Image.save() kwargs based on format."""
    kwargs: Dict[str, Any] = {"format": save_format}
    if save_format == "JPEG":
        kwargs["quality"] = max(1, min(100, quality))
    return kwargs


def load_image(file_path: PathLike) -> PixelBuffer:
    """
    Load an image file.

    Args:
        file_path: Path to a PNG, JPEG, BMP or GIF file

    Returns:
        Decoded RGB PixelBuffer

    Raises:
        ImageIOError: If the file is missing, unsupported or cannot be decoded
    """
    path = Path(file_path)
    resolve_image_format(path)

    if not path.is_file():
        raise ImageIOError(f"Image file not found: {path}")

    try:
        with Image.open(path) as img:
            return from_pil_image(img)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise ImageIOError(f"Failed to load image from {path}: {e}") from e


def save_image(
    buffer: PixelBuffer,
    file_path: PathLike,
    quality: int = DEFAULT_JPEG_QUALITY,
) -> Path:
    """
    Save a buffer to disk; the format follows the file extension.

    Args:
        buffer: Image to save
        file_path: Destination path
        quality: JPEG quality 1-100 (ignored for other formats)

    Returns:
        The path written

    Raises:
        ImageIOError: If the extension is unsupported or writing fails
    """
    path = Path(file_path)
    save_format = resolve_image_format(path)

    try:
        to_pil_image(buffer).save(path, **get_save_kwargs(save_format, quality))
    except (OSError, ValueError) as e:
        raise ImageIOError(f"Failed to save image to {path}: {e}") from e

    return path


def to_png_bytes(buffer: PixelBuffer) -> bytes:
    data = BytesIO()
    to_pil_image(buffer).save(data, format="PNG")
    return data.getvalue()

