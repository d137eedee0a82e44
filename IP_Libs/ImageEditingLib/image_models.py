"""
Image editing data models for Open Image Processor.

This module defines core data structures used throughout the image editing system.

Classes:
    PixelBuffer: Immutable RGB raster image
    FilterKind: The closed set of filters the editor can apply
    FilterRequest: A filter kind together with its inline parameters
    GeneratorKind: The closed set of procedural image generators
    Orientation: Stripe orientation for the rainbow generator
    RainbowSpec: Parameters for a rainbow image
    CheckerboardSpec: Parameters for a checkerboard image

Type Aliases:
    RgbColor: A tuple of 3 integers representing RGB color values (0-255)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple, Union

import numpy as np

from IP_Libs.constants import CHANNEL_MAX, CHANNEL_MIN, DEFAULT_CHECKERBOARD_SQUARES
from IP_Libs.errors import InvalidParameterError, OutOfBoundsError

RgbColor = Tuple[int, int, int]


def clamp_channel(value: float) -> int:
    """Clamp a single channel value to the 0-255 range."""
    return int(max(CHANNEL_MIN, min(CHANNEL_MAX, value)))


class PixelBuffer:
    """
    Immutable RGB image.

    Pixels are stored row-major in a read-only ``uint8`` array of shape
    (height, width, 3). Every editing operation returns a new buffer, which
    keeps history entries safe to share.

    Example:
        >>> buffer = PixelBuffer.filled(2, 2, (10, 20, 30))
        >>> red = buffer.with_pixel(0, 0, 300, 0, 0)
        >>> red.get(0, 0)
        (255, 0, 0)
        >>> buffer.get(0, 0)
        (10, 20, 30)
    """

    __slots__ = ("_pixels",)

    def __init__(self, pixels: np.ndarray) -> None:
        if pixels.ndim != 3 or pixels.shape[2] != 3:
            raise InvalidParameterError(
                f"pixel array must have shape (height, width, 3), got {pixels.shape}"
            )
        height, width = pixels.shape[0], pixels.shape[1]
        if width < 1 or height < 1:
            raise InvalidParameterError(
                f"image dimensions must be >= 1, got {width}x{height}"
            )

        stored = np.clip(pixels, CHANNEL_MIN, CHANNEL_MAX).astype(np.uint8)
        stored.setflags(write=False)
        self._pixels = stored

    @classmethod
    def from_array(cls, array: Any) -> "PixelBuffer":
        """
        Build a buffer from any (height, width, 3) array-like.

        Values are clamped to 0-255; the input is copied, never referenced.
        """
        return cls(np.array(array))

    @classmethod
    def filled(cls, width: int, height: int, color: RgbColor = (0, 0, 0)) -> "PixelBuffer":
        """Create a width x height buffer where every pixel has ``color``."""
        if width < 1 or height < 1:
            raise InvalidParameterError(
                f"image dimensions must be >= 1, got {width}x{height}"
            )
        pixels = np.empty((height, width, 3), dtype=np.int64)
        pixels[:, :] = [clamp_channel(c) for c in color]
        return cls(pixels)

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height), in the same order Pillow uses."""
        return self.width, self.height

    def get(self, x: int, y: int) -> RgbColor:
        """
        Read one pixel.

        Raises:
            OutOfBoundsError: If (x, y) is outside the buffer
        """
        self._check_bounds(x, y)
        r, g, b = self._pixels[y, x]
        return int(r), int(g), int(b)

    def with_pixel(self, x: int, y: int, r: int, g: int, b: int) -> "PixelBuffer":
        """
        Return a copy of this buffer with one pixel replaced.

        Channel values are clamped to 0-255, not rejected.

        Raises:
            OutOfBoundsError: If (x, y) is outside the buffer
        """
        self._check_bounds(x, y)
        pixels = self._pixels.copy()
        pixels[y, x] = (clamp_channel(r), clamp_channel(g), clamp_channel(b))
        return PixelBuffer(pixels)

    def to_array(self) -> np.ndarray:
        """Return a writable copy of the pixel data, shape (height, width, 3)."""
        return self._pixels.copy()

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBoundsError(
                f"pixel ({x}, {y}) is outside {self.width}x{self.height} image"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return np.array_equal(self._pixels, other._pixels)

    __hash__ = None

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height})"


class FilterKind(Enum):
    BLUR = "blur"
    SHARPEN = "sharpen"
    GREYSCALE = "greyscale"
    SEPIA = "sepia"
    DITHER = "dither"
    MOSAIC = "mosaic"


@dataclass(frozen=True)
class FilterRequest:
    """A filter to apply, with its parameters carried inline.

    Attributes:
        kind: Which filter to run
        seed_count: Number of mosaic seeds; required for MOSAIC, absent otherwise
    """
    kind: FilterKind
    seed_count: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind is FilterKind.MOSAIC:
            if self.seed_count is None:
                raise InvalidParameterError("mosaic requires a seed count")
            if self.seed_count < 1:
                raise InvalidParameterError(
                    f"seed count must be >= 1, got {self.seed_count}"
                )
        elif self.seed_count is not None:
            raise InvalidParameterError(
                f"{self.kind.value} does not take a seed count"
            )


class GeneratorKind(Enum):
    RAINBOW = "rainbow"
    CHECKERBOARD = "checkerboard"


class Orientation(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @classmethod
    def parse(cls, text: str) -> "Orientation":
        """Case-insensitive lookup by name."""
        try:
            return cls(str(text).strip().lower())
        except ValueError:
            raise InvalidParameterError(
                f"orientation must be 'horizontal' or 'vertical', got {text!r}"
            ) from None


@dataclass(frozen=True)
class RainbowSpec:
    orientation: Orientation
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidParameterError(
                f"rainbow dimensions must be positive, got {self.width}x{self.height}"
            )


@dataclass(frozen=True)
class CheckerboardSpec:
    """Checkerboard parameters.

    Attributes:
        square_size: Side of one square in pixels
        squares_per_side: Number of squares along each edge of the board
    """
    square_size: int
    squares_per_side: int = DEFAULT_CHECKERBOARD_SQUARES

    def __post_init__(self) -> None:
        if self.square_size <= 0:
            raise InvalidParameterError(
                f"square size must be positive, got {self.square_size}"
            )
        if self.squares_per_side <= 0:
            raise InvalidParameterError(
                f"squares per side must be positive, got {self.squares_per_side}"
            )


GeneratorSpec = Union[RainbowSpec, CheckerboardSpec]
