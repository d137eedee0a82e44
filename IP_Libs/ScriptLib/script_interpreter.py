"""
Script Interpreter.

Turns script text into an ordered list of Commands. A script is one command
per line; tokens are separated by whitespace:

    load photos/cat.png
    blur
    mosaic 500
    rainbow horizontal 700 300
    undo
    save out/cat mosaic.png

Keywords are case-insensitive; paths keep their case and run to the end of
the line. Blank lines and lines starting with '#' are skipped.

The whole script is parsed before anything is returned: one bad line rejects
the script with a ScriptSyntaxError naming that line.
"""

from typing import List, Optional

from IP_Libs.errors import InvalidParameterError, ScriptSyntaxError
from IP_Libs.ScriptLib.commands import Command
from IP_Libs.ScriptLib.script_registry import ScriptCommandRegistry, get_default_registry

COMMENT_PREFIX = "#"


class ScriptInterpreter:
    def __init__(self, registry: Optional[ScriptCommandRegistry] = None) -> None:
        self.registry = registry if registry is not None else get_default_registry()

    def parse_line(self, line: str, line_number: int) -> Optional[Command]:
        """
        Parse one line.

        Args:
            line: Raw line text
            line_number: 1-based position in the script, for error messages

        Returns:
            The Command, or None for blank and comment lines

        Raises:
            ScriptSyntaxError: If the keyword is unknown or its arguments are invalid
        """
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            return None

        parts = stripped.split(None, 1)
        keyword = parts[0]
        argument_text = parts[1] if len(parts) > 1 else ""

        if not self.registry.has_keyword(keyword):
            raise ScriptSyntaxError(line_number, f"unknown command '{keyword}'")

        parser = self.registry.get_parser(keyword)
        try:
            return parser(argument_text)
        except InvalidParameterError as e:
            raise ScriptSyntaxError(line_number, f"{keyword.lower()}: {e}") from e

    def parse(self, text: str) -> List[Command]:
        """
        Parse a full script.

        Returns:
            Commands in script order

        Raises:
            ScriptSyntaxError: On the first malformed line
        """
        commands: List[Command] = []
        for line_number, line in enumerate(text.splitlines(), start=1):
            command = self.parse_line(line, line_number)
            if command is not None:
                commands.append(command)
        return commands


def parse_script(text: str, registry: Optional[ScriptCommandRegistry] = None) -> List[Command]:
    """Parse script text with the given (or default) registry."""
    return ScriptInterpreter(registry).parse(text)
