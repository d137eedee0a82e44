"""
Contracts between the controller and the presentation layer.

Classes:
    ImageView: What the controller asks of a view
    Features: The entry points a view calls in response to user actions

A view never touches image buffers or history directly. Every prompt may
return None when the user cancels; the controller treats that as a no-op.
"""

from typing import Any, Optional, Sequence, Tuple

from IP_Libs.ImageEditingLib.image_models import FilterKind, GeneratorKind, PixelBuffer

RainbowInput = Tuple[str, str, str]


class ImageView:

    def set_features(self, features: "Features") -> None:
        raise NotImplementedError("Connect user actions to the feature callbacks")

    def display(self) -> None:
        raise NotImplementedError("Make the view visible")

    def show_image(self, buffer: PixelBuffer) -> None:
        raise NotImplementedError("Display the image, replacing any existing one")

    def clear_image(self) -> None:
        raise NotImplementedError("Remove the displayed image")

    def pick_open_path(self) -> Optional[str]:
        raise NotImplementedError("Ask for an image file to open")

    def pick_save_path(self) -> Optional[str]:
        raise NotImplementedError("Ask for a file name to save to")

    def show_error(self, message: str) -> None:
        raise NotImplementedError("Show an error message")

    def prompt_number(self, prompt: str) -> Optional[str]:
        raise NotImplementedError("Ask for a single number, returned as text")

    def prompt_rainbow_specs(self) -> Optional[RainbowInput]:
        raise NotImplementedError("Ask for (orientation, width, height) as text")

    def prompt_checkerboard_size(self) -> Optional[str]:
        raise NotImplementedError("Ask for the checkerboard square size as text")

    def clear_script_editor(self) -> None:
        raise NotImplementedError("Empty the script editor")

    def confirm_overwrite(self) -> bool:
        raise NotImplementedError("Ask whether the current image may be replaced")


class Features:

    def exit_program(self) -> None:
        raise NotImplementedError

    def open_file(self) -> bool:
        raise NotImplementedError

    def save_file(self) -> bool:
        raise NotImplementedError

    def apply_filter(self, kind: FilterKind, params: Optional[Sequence[Any]] = None) -> bool:
        raise NotImplementedError

    def generate(self, kind: GeneratorKind, params: Optional[Sequence[Any]] = None) -> bool:
        raise NotImplementedError

    def run_script(self, text: str) -> bool:
        raise NotImplementedError

    def undo(self) -> bool:
        raise NotImplementedError

    def redo(self) -> bool:
        raise NotImplementedError
