"""
Argument parsers for script keywords.

Each parser receives the text following the keyword on its line and returns
a typed Command. Parsers raise InvalidParameterError with a short reason;
the interpreter attaches the line number.
"""

from typing import Callable, List

from IP_Libs.errors import InvalidParameterError
from IP_Libs.ImageEditingLib.image_models import (
    CheckerboardSpec,
    FilterKind,
    FilterRequest,
    Orientation,
    RainbowSpec,
)
from IP_Libs.ScriptLib.commands import (
    ApplyFilterCommand,
    Command,
    GenerateCommand,
    LoadCommand,
    RedoCommand,
    SaveCommand,
    UndoCommand,
)

ParserFunction = Callable[[str], Command]


def parse_int(text: str, name: str) -> int:
    """
    Parse a base-10 integer.

    Raises:
        InvalidParameterError: If text is not an integer
    """
    value = str(text).strip()
    try:
        return int(value, 10)
    except ValueError:
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}") from None


def parse_positive_int(text: str, name: str) -> int:
    """Parse an integer that must be >= 1."""
    value = parse_int(text, name)
    if value < 1:
        raise InvalidParameterError(f"{name} must be a positive integer, got {value}")
    return value


def _split_args(argument_text: str, expected: int, usage: str) -> List[str]:
    args = argument_text.split()
    if len(args) != expected:
        raise InvalidParameterError(
            f"expected {expected} argument{'s' if expected != 1 else ''}, "
            f"got {len(args)} (usage: {usage})"
        )
    return args


def make_simple_filter_parser(kind: FilterKind) -> ParserFunction:
    """Build a parser for a filter keyword that takes no arguments."""
    def parser(argument_text: str) -> Command:
        _split_args(argument_text, 0, kind.value)
        return ApplyFilterCommand(FilterRequest(kind))

    return parser


def parse_mosaic(argument_text: str) -> Command:
    (seed_text,) = _split_args(argument_text, 1, "mosaic <seedCount>")
    seed_count = parse_positive_int(seed_text, "seed count")
    return ApplyFilterCommand(FilterRequest(FilterKind.MOSAIC, seed_count))


def parse_rainbow(argument_text: str) -> Command:
    orientation_text, width_text, height_text = _split_args(
        argument_text, 3, "rainbow <horizontal|vertical> <width> <height>"
    )
    return GenerateCommand(
        RainbowSpec(
            orientation=Orientation.parse(orientation_text),
            width=parse_positive_int(width_text, "width"),
            height=parse_positive_int(height_text, "height"),
        )
    )


def make_checkerboard_parser(squares_per_side: int) -> ParserFunction:
    def parser(argument_text: str) -> Command:
        (size_text,) = _split_args(argument_text, 1, "checkerboard <size>")
        square_size = parse_positive_int(size_text, "square size")
        return GenerateCommand(CheckerboardSpec(square_size, squares_per_side))

    return parser


def _parse_path(argument_text: str, keyword: str) -> str:
    path = argument_text.strip()
    if not path:
        raise InvalidParameterError(f"expected a file path (usage: {keyword} <path>)")
    return path


def parse_load(argument_text: str) -> Command:
    return LoadCommand(_parse_path(argument_text, "load"))


def parse_save(argument_text: str) -> Command:
    return SaveCommand(_parse_path(argument_text, "save"))


def parse_undo(argument_text: str) -> Command:
    _split_args(argument_text, 0, "undo")
    return UndoCommand()


def parse_redo(argument_text: str) -> Command:
    _split_args(argument_text, 0, "redo")
    return RedoCommand()
