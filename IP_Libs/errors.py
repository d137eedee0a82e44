"""
Exception types raised by the Open Image Processor core.

Every error derives from ImageProcessorError so the controller can route all
user-facing failures to the view with a single handler. Each one also derives
from the closest builtin so callers that only know about ValueError or
IOError still catch them.
"""


class ImageProcessorError(Exception):
    """Base class for all editor errors."""


class OutOfBoundsError(ImageProcessorError, IndexError):
    """A pixel coordinate lies outside the buffer."""


class EmptyImageError(ImageProcessorError):
    """The operation needs an image but none is loaded."""

    def __init__(self, message: str = "No image is loaded") -> None:
        super().__init__(message)


class InvalidParameterError(ImageProcessorError, ValueError):
    """A user-supplied parameter failed validation."""


class ScriptSyntaxError(ImageProcessorError, ValueError):
    """A script line could not be parsed."""

    def __init__(self, line_number: int, reason: str) -> None:
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Script error on line {line_number}: {reason}")


class NothingToUndoError(ImageProcessorError):
    def __init__(self, message: str = "Nothing to undo") -> None:
        super().__init__(message)


class NothingToRedoError(ImageProcessorError):
    def __init__(self, message: str = "Nothing to redo") -> None:
        super().__init__(message)


class ImageIOError(ImageProcessorError, IOError):
    """Reading or writing an image file failed."""
