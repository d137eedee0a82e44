"""
Pytest configuration and shared fixtures for Open Image Processor tests.

This module provides shared test fixtures, plus a RecordingView that
stands in for the desktop window in controller tests.
"""

from typing import Any, List, Optional, Tuple

import numpy as np
import pytest

from IP_Libs.ControllerLib.view import ImageView
from IP_Libs.ImageEditingLib.image_models import PixelBuffer


class RecordingView(ImageView):
    """
    View double that records every call.

    Prompt answers are queued in the ``*_answers`` lists; an empty queue
    answers None (cancelled).
    """

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Any]] = []
        self.shown: List[PixelBuffer] = []
        self.errors: List[str] = []
        self.open_paths: List[Optional[str]] = []
        self.save_paths: List[Optional[str]] = []
        self.number_answers: List[Optional[str]] = []
        self.rainbow_answers: List[Optional[Tuple[str, str, str]]] = []
        self.checkerboard_answers: List[Optional[str]] = []
        self.confirm_answer = True
        self.features = None

    def _pop(self, queue: List[Any]) -> Any:
        return queue.pop(0) if queue else None

    def set_features(self, features: Any) -> None:
        self.features = features
        self.calls.append(("set_features", None))

    def display(self) -> None:
        self.calls.append(("display", None))

    def show_image(self, buffer: PixelBuffer) -> None:
        self.shown.append(buffer)
        self.calls.append(("show_image", buffer))

    def clear_image(self) -> None:
        self.calls.append(("clear_image", None))

    def pick_open_path(self) -> Optional[str]:
        self.calls.append(("pick_open_path", None))
        return self._pop(self.open_paths)

    def pick_save_path(self) -> Optional[str]:
        self.calls.append(("pick_save_path", None))
        return self._pop(self.save_paths)

    def show_error(self, message: str) -> None:
        self.errors.append(message)
        self.calls.append(("show_error", message))

    def prompt_number(self, prompt: str) -> Optional[str]:
        self.calls.append(("prompt_number", prompt))
        return self._pop(self.number_answers)

    def prompt_rainbow_specs(self) -> Optional[Tuple[str, str, str]]:
        self.calls.append(("prompt_rainbow_specs", None))
        return self._pop(self.rainbow_answers)

    def prompt_checkerboard_size(self) -> Optional[str]:
        self.calls.append(("prompt_checkerboard_size", None))
        return self._pop(self.checkerboard_answers)

    def clear_script_editor(self) -> None:
        self.calls.append(("clear_script_editor", None))

    def confirm_overwrite(self) -> bool:
        self.calls.append(("confirm_overwrite", None))
        return self.confirm_answer

    def notifications(self) -> List[str]:
        """Names of the calls that update what the user sees."""
        return [
            name for name, _ in self.calls
            if name in ("show_image", "clear_image", "show_error")
        ]


@pytest.fixture
def recording_view():
    """Provide a fresh RecordingView."""
    return RecordingView()


@pytest.fixture
def gradient_buffer():
    """
    Provide a 6x4 buffer whose pixels all differ.

    Returns:
        PixelBuffer with r = 40 * x, g = 60 * y, b = 10 * (x + y)
    """
    height, width = 4, 6
    ys, xs = np.mgrid[0:height, 0:width]
    pixels = np.stack([40 * xs, 60 * ys, 10 * (xs + ys)], axis=2)
    return PixelBuffer.from_array(pixels)


@pytest.fixture
def sample_rgb_colors():
    """
    Provide a list of sample RGB color tuples for testing.

    Returns:
        List of (R, G, B) tuples with common test colors
    """
    return [
        (255, 0, 0),      # Red
        (0, 255, 0),      # Green
        (0, 0, 255),      # Blue
        (255, 255, 255),  # White
        (0, 0, 0),        # Black
        (128, 128, 128),  # Gray
    ]
