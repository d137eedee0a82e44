"""
ScriptLib - Editor commands and the script language

This module defines the Command values, the keyword registry and the
interpreter that compiles script text into commands.
"""

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
from IP_Libs.ScriptLib.script_registry import (
    ScriptCommandRegistry,
    get_default_registry,
    register_default_commands,
)
from IP_Libs.ScriptLib.script_interpreter import ScriptInterpreter, parse_script

__all__ = [
    "ApplyFilterCommand",
    "Command",
    "GenerateCommand",
    "LoadCommand",
    "RedoCommand",
    "SaveCommand",
    "UndoCommand",
    "describe_command",
    "ScriptCommandRegistry",
    "get_default_registry",
    "register_default_commands",
    "ScriptInterpreter",
    "parse_script",
]
