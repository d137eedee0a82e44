"""
Image Controller.

Mediates between the view and the editing engine. Every user action and
every script line becomes a Command; the controller runs it against the
image held by the HistoryManager, commits the result and tells the view
what to show.

Each public action produces exactly one view notification: the new image
(or an empty view) on success, or an error message on failure. Errors never
escape to the caller; they are logged and shown.

Example:
    >>> controller = ImageController(view)
    >>> controller.generate(GeneratorKind.CHECKERBOARD, [4])
    >>> controller.apply_filter(FilterKind.BLUR)
    >>> controller.run_script("sepia\\nmosaic 200\\nsave out.png")
"""

import logging
import random
import sys
from typing import Any, Callable, Optional, Sequence

from IP_Libs.ControllerLib.editor_config import EditorConfig
from IP_Libs.ControllerLib.view import Features, ImageView
from IP_Libs.errors import (
    EmptyImageError,
    ImageProcessorError,
    InvalidParameterError,
    ScriptSyntaxError,
)
from IP_Libs.HistoryLib.history_manager import HistoryManager
from IP_Libs.ImageEditingLib.filter_engine import apply_filter
from IP_Libs.ImageEditingLib.generators import generate_image
from IP_Libs.ImageEditingLib.image_editing_ops import load_image, save_image
from IP_Libs.ImageEditingLib.image_models import (
    CheckerboardSpec,
    FilterKind,
    FilterRequest,
    GeneratorKind,
    GeneratorSpec,
    Orientation,
    RainbowSpec,
)
from IP_Libs.ScriptLib.command_parsers import parse_positive_int
from IP_Libs.ScriptLib.commands import (
    ApplyFilterCommand,
    Command,
    GenerateCommand,
    LoadCommand,
    RedoCommand,
    SaveCommand,
    UndoCommand,
    describe_command,
)
from IP_Libs.ScriptLib.script_interpreter import ScriptInterpreter
from IP_Libs.ScriptLib.script_registry import (
    ScriptCommandRegistry,
    register_default_commands,
)

logger = logging.getLogger(__name__)

MOSAIC_PROMPT = "Number of Seed Pixels: "


class ImageController(Features):
    """
    Controller for one editor session.

    Args:
        view: The presentation layer
        config: Session settings (default: EditorConfig())
        history: History to use (default: new HistoryManager sized from config)
        registry: Script keywords (default: built-in keywords sized from config)
        rng: Random source for the mosaic filter
        on_exit: Called by exit_program (default: sys.exit)
    """

    def __init__(
        self,
        view: ImageView,
        config: Optional[EditorConfig] = None,
        history: Optional[HistoryManager] = None,
        registry: Optional[ScriptCommandRegistry] = None,
        rng: Optional[Any] = None,
        on_exit: Callable[[], Any] = sys.exit,
    ) -> None:
        self.view = view
        self.config = config if config is not None else EditorConfig()
        self.history = history if history is not None else HistoryManager(self.config.history_depth)

        if registry is None:
            registry = ScriptCommandRegistry()
            register_default_commands(registry, self.config.checkerboard_squares)
        self.interpreter = ScriptInterpreter(registry)

        self._rng = rng if rng is not None else random.Random()
        self._on_exit = on_exit

    def start(self) -> None:
        """Hand the feature callbacks to the view and show it."""
        self.view.set_features(self)
        self.view.display()

    # ------------------------------------------------------------------
    # Features
    # ------------------------------------------------------------------

    def exit_program(self) -> None:
        logger.info("Exiting")
        self._on_exit()

    def open_file(self) -> bool:
        path = self.view.pick_open_path()
        if path is None:
            return False
        return self.load(path)

    def save_file(self) -> bool:
        if not self.history.has_image:
            return self._report(ImageProcessorError("There is no image to save"))
        path = self.view.pick_save_path()
        if path is None:
            return False
        return self.save(path)

    def apply_filter(self, kind: FilterKind, params: Optional[Sequence[Any]] = None) -> bool:
        """
        Apply a filter to the current image.

        Args:
            kind: Filter to apply
            params: For MOSAIC, the seed count; when empty the view is asked.
                    Other filters take no parameters.
        """
        if not self.history.has_image:
            return self._report(
                EmptyImageError(f"Cannot apply {kind.value}: no image is loaded")
            )

        try:
            if kind is FilterKind.MOSAIC:
                if params:
                    seed_text = str(params[0])
                else:
                    seed_text = self.view.prompt_number(MOSAIC_PROMPT)
                    if seed_text is None:
                        return False
                request = FilterRequest(kind, parse_positive_int(seed_text, "seed count"))
            else:
                if params:
                    raise InvalidParameterError(f"{kind.value} does not take parameters")
                request = FilterRequest(kind)
        except ImageProcessorError as e:
            return self._report(e)

        return self._perform(ApplyFilterCommand(request))

    def generate(self, kind: GeneratorKind, params: Optional[Sequence[Any]] = None) -> bool:
        """
        Replace the current image with a generated one.

        Args:
            kind: Generator to run
            params: RAINBOW: (orientation, width, height); CHECKERBOARD:
                    (square_size,). When empty the view is asked.
        """
        if not self._confirm_overwrite():
            return False

        try:
            spec = self._resolve_generator_spec(kind, params)
        except ImageProcessorError as e:
            return self._report(e)
        if spec is None:
            return False

        return self._perform(GenerateCommand(spec))

    def run_script(self, text: str) -> bool:
        """
        Parse and run a script as one action.

        The script is parsed in full first; a syntax error runs nothing. If a
        command fails while running, history is rolled back to where it was
        before the script started. Files written by earlier ``save`` lines
        are kept.
        """
        try:
            commands = self.interpreter.parse(text)
        except ScriptSyntaxError as e:
            return self._report(e)

        snapshot = self.history.snapshot()
        for index, command in enumerate(commands, start=1):
            try:
                self._execute(command)
            except ImageProcessorError as e:
                self.history.restore(snapshot)
                return self._report(ImageProcessorError(
                    f"Script stopped at command {index} ({describe_command(command)}): {e}. "
                    f"No changes were kept."
                ))

        logger.info(f"Script finished: {len(commands)} commands")
        self._show_current()
        self.view.clear_script_editor()
        return True

    def undo(self) -> bool:
        return self._perform(UndoCommand())

    def redo(self) -> bool:
        return self._perform(RedoCommand())

    # ------------------------------------------------------------------
    # Direct operations
    # ------------------------------------------------------------------

    def load(self, path: str) -> bool:
        """Load an image file, asking first if an image would be replaced."""
        if not self._confirm_overwrite():
            return False
        return self._perform(LoadCommand(str(path)))

    def save(self, path: str) -> bool:
        return self._perform(SaveCommand(str(path)))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _confirm_overwrite(self) -> bool:
        if not self.history.has_image:
            return True
        return bool(self.view.confirm_overwrite())

    def _resolve_generator_spec(
        self,
        kind: GeneratorKind,
        params: Optional[Sequence[Any]],
    ) -> Optional[GeneratorSpec]:
        if kind is GeneratorKind.RAINBOW:
            values = list(params) if params else self.view.prompt_rainbow_specs()
            if values is None:
                return None
            if len(values) != 3:
                raise InvalidParameterError(
                    f"rainbow needs orientation, width and height, got {len(values)} values"
                )
            orientation, width, height = values
            if not isinstance(orientation, Orientation):
                orientation = Orientation.parse(orientation)
            return RainbowSpec(
                orientation,
                parse_positive_int(str(width), "width"),
                parse_positive_int(str(height), "height"),
            )

        if kind is GeneratorKind.CHECKERBOARD:
            if params:
                size_text = str(params[0])
            else:
                size_text = self.view.prompt_checkerboard_size()
                if size_text is None:
                    return None
            square_size = parse_positive_int(size_text, "square size")
            return CheckerboardSpec(square_size, self.config.checkerboard_squares)

        raise InvalidParameterError(f"Unknown generator: {kind!r}")

    def _execute(self, command: Command) -> None:
        """
        Run one command against history.

        Image-changing commands mutate history exactly once, and only after
        the new image has been fully computed.

        Raises:
            ImageProcessorError: Whatever the command's engine call raises
        """
        logger.info(f"Executing: {describe_command(command)}")

        if isinstance(command, ApplyFilterCommand):
            result = apply_filter(
                self.history.peek(),
                command.request,
                rng=self._rng,
                max_workers=self.config.mosaic_workers,
            )
            self.history.commit(result)
        elif isinstance(command, GenerateCommand):
            self.history.commit(generate_image(command.spec))
        elif isinstance(command, LoadCommand):
            self.history.commit(load_image(command.path))
        elif isinstance(command, SaveCommand):
            save_image(self.history.current(), command.path, quality=self.config.jpeg_quality)
        elif isinstance(command, UndoCommand):
            self.history.undo()
        elif isinstance(command, RedoCommand):
            self.history.redo()
        else:
            raise TypeError(f"Unknown command: {command!r}")

    def _perform(self, command: Command) -> bool:
        try:
            self._execute(command)
        except ImageProcessorError as e:
            return self._report(e)
        self._show_current()
        return True

    def _show_current(self) -> None:
        current = self.history.peek()
        if current is None:
            self.view.clear_image()
        else:
            self.view.show_image(current)

    def _report(self, error: Exception) -> bool:
        logger.warning(f"{type(error).__name__}: {error}")
        self.view.show_error(str(error))
        return False
