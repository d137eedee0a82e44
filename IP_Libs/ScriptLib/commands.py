"""
Editor commands.

Every user action and every script line resolves to one of these values
before the controller executes it.

Classes:
    ApplyFilterCommand: Apply a filter to the current image
    GenerateCommand: Replace the current image with a generated one
    UndoCommand: Step back in history
    RedoCommand: Step forward in history
    LoadCommand: Replace the current image with a file's contents
    SaveCommand: Write the current image to a file
"""

from dataclasses import dataclass
from typing import Union

from IP_Libs.ImageEditingLib.image_models import FilterRequest, GeneratorSpec, RainbowSpec


@dataclass(frozen=True)
class ApplyFilterCommand:
    request: FilterRequest


@dataclass(frozen=True)
class GenerateCommand:
    spec: GeneratorSpec


@dataclass(frozen=True)
class UndoCommand:
    pass


@dataclass(frozen=True)
class RedoCommand:
    pass


@dataclass(frozen=True)
class LoadCommand:
    path: str


@dataclass(frozen=True)
class SaveCommand:
    path: str


Command = Union[
    ApplyFilterCommand,
    GenerateCommand,
    UndoCommand,
    RedoCommand,
    LoadCommand,
    SaveCommand,
]


def describe_command(command: Command) -> str:
    """Short human-readable form, used in log messages."""
    if isinstance(command, ApplyFilterCommand):
        request = command.request
        if request.seed_count is not None:
            return f"{request.kind.value} {request.seed_count}"
        return request.kind.value
    if isinstance(command, GenerateCommand):
        spec = command.spec
        if isinstance(spec, RainbowSpec):
            return f"rainbow {spec.orientation.value} {spec.width} {spec.height}"
        return f"checkerboard {spec.square_size}"
    if isinstance(command, (LoadCommand, SaveCommand)):
        verb = "load" if isinstance(command, LoadCommand) else "save"
        return f"{verb} {command.path}"
    if isinstance(command, UndoCommand):
        return "undo"
    if isinstance(command, RedoCommand):
        return "redo"
    raise TypeError(f"Unknown command: {command!r}")
