"""
Script Command Registry.

This module provides a registry of script keywords. It enables registration,
lookup and description of the parsers that turn one script line into a
Command.

Classes:
    ScriptCommandRegistry: Registry for keyword parsers

Functions:
    get_default_registry: Get the global default registry (singleton)
    register_default_commands: Register all built-in script keywords
"""

from typing import Any, Dict, List, Optional
import logging

from IP_Libs.constants import DEFAULT_CHECKERBOARD_SQUARES
from IP_Libs.ImageEditingLib.image_models import FilterKind
from IP_Libs.ScriptLib.command_parsers import (
    ParserFunction,
    make_checkerboard_parser,
    make_simple_filter_parser,
    parse_load,
    parse_mosaic,
    parse_rainbow,
    parse_redo,
    parse_save,
    parse_undo,
)

logger = logging.getLogger(__name__)


class ScriptCommandRegistry:
    """
    Registry for script keyword parsers.

    Keywords are case-insensitive: they are stored and looked up in lower case.

    Example:
        >>> registry = ScriptCommandRegistry()
        >>> registry.register("undo", parse_undo, usage="undo")
        >>> command = registry.get_parser("UNDO")("")
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._parsers: Dict[str, ParserFunction] = {}
        self._metadata: Dict[str, Dict[str, Any]] = {}

    @staticmethod
    def _normalize(keyword: str) -> str:
        return str(keyword).strip().lower()

    def register(
        self,
        keyword: str,
        parser: ParserFunction,
        usage: str = "",
        description: str = "",
        aliases: Optional[List[str]] = None,
    ) -> None:
        """
        Register a keyword parser.

        Args:
            keyword: Script keyword (e.g., "blur")
            parser: Callable taking the text after the keyword, returning a Command
            usage: Usage line shown in help and error messages
            description: Human-readable description of the command
            aliases: Alternative spellings sharing the same parser

        Raises:
            ValueError: If keyword is empty or parser is not callable
            RuntimeError: If keyword (or an alias) is already registered
        """
        keyword = self._normalize(keyword)

        if not keyword:
            raise ValueError("keyword cannot be empty")

        if not callable(parser):
            raise ValueError(f"parser must be callable, got {type(parser)}")

        names = [keyword] + [self._normalize(a) for a in (aliases or [])]
        for name in names:
            if name in self._parsers:
                raise RuntimeError(
                    f"Keyword '{name}' is already registered. "
                    f"Use unregister() first to replace it."
                )

        for name in names:
            self._parsers[name] = parser
            self._metadata[name] = {
                "keyword": keyword,
                "usage": str(usage or keyword),
                "description": str(description),
                "alias": name != keyword,
            }

        logger.debug(f"Registered script keyword: {keyword}")

    def unregister(self, keyword: str) -> bool:
        """
        Unregister a keyword and its aliases.

        Returns:
            True if unregistered, False if keyword was not registered
        """
        keyword = self._normalize(keyword)
        if keyword not in self._parsers:
            return False

        primary = self._metadata[keyword]["keyword"]
        for name in [n for n, meta in self._metadata.items() if meta["keyword"] == primary]:
            del self._parsers[name]
            del self._metadata[name]
        logger.debug(f"Unregistered script keyword: {primary}")
        return True

    def get_parser(self, keyword: str) -> ParserFunction:
        """
        Get the parser for a keyword.

        Raises:
            KeyError: If keyword is not registered
        """
        keyword = self._normalize(keyword)

        if keyword not in self._parsers:
            available = ", ".join(self.list_keywords())
            raise KeyError(
                f"Unknown command '{keyword}'. Available commands: {available}"
            )

        return self._parsers[keyword]

    def has_keyword(self, keyword: str) -> bool:
        return self._normalize(keyword) in self._parsers

    def list_keywords(self, include_aliases: bool = False) -> List[str]:
        """
        Get list of registered keywords.

        Returns:
            Sorted list of keywords
        """
        return sorted(
            name for name, meta in self._metadata.items()
            if include_aliases or not meta["alias"]
        )

    def get_metadata(self, keyword: str) -> Dict[str, Any]:
        """
        Get metadata for a keyword.

        Raises:
            KeyError: If keyword is not registered
        """
        keyword = self._normalize(keyword)

        if keyword not in self._metadata:
            raise KeyError(f"No metadata for keyword: {keyword}")

        return dict(self._metadata[keyword])

    def get_usage_text(self) -> str:
        """One usage line per keyword, for help displays."""
        lines = []
        for keyword in self.list_keywords():
            meta = self._metadata[keyword]
            description = f"  - {meta['description']}" if meta["description"] else ""
            lines.append(f"{meta['usage']}{description}")
        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all registered keywords. Use with caution."""
        self._parsers.clear()
        self._metadata.clear()
        logger.warning("Script command registry cleared")


# Global singleton registry
_default_registry: Optional[ScriptCommandRegistry] = None


def get_default_registry() -> ScriptCommandRegistry:
    """
    Get the global default registry (singleton).

    Creates the registry on first call and registers default keywords.
    """
    global _default_registry

    if _default_registry is None:
        _default_registry = ScriptCommandRegistry()
        register_default_commands(_default_registry)

    return _default_registry


def register_default_commands(
    registry: ScriptCommandRegistry,
    checkerboard_squares: int = DEFAULT_CHECKERBOARD_SQUARES,
) -> None:
    """
    Register all built-in script keywords.

    Args:
        registry: The registry to register keywords with
        checkerboard_squares: Squares per side for the checkerboard keyword
    """
    registry.register(
        "blur",
        make_simple_filter_parser(FilterKind.BLUR),
        description="Blur the current image",
    )
    registry.register(
        "sharpen",
        make_simple_filter_parser(FilterKind.SHARPEN),
        description="Sharpen the current image",
    )
    registry.register(
        "greyscale",
        make_simple_filter_parser(FilterKind.GREYSCALE),
        description="Convert the current image to greyscale",
        aliases=["grayscale"],
    )
    registry.register(
        "sepia",
        make_simple_filter_parser(FilterKind.SEPIA),
        description="Apply a sepia tone",
    )
    registry.register(
        "dither",
        make_simple_filter_parser(FilterKind.DITHER),
        description="Dither to black and white",
    )
    registry.register(
        "mosaic",
        parse_mosaic,
        usage="mosaic <seedCount>",
        description="Cluster pixels around random seeds",
    )
    registry.register(
        "rainbow",
        parse_rainbow,
        usage="rainbow <horizontal|vertical> <width> <height>",
        description="Generate rainbow stripes",
    )
    registry.register(
        "checkerboard",
        make_checkerboard_parser(checkerboard_squares),
        usage="checkerboard <size>",
        description="Generate a checkerboard",
    )
    registry.register(
        "load",
        parse_load,
        usage="load <path>",
        description="Load an image file",
    )
    registry.register(
        "save",
        parse_save,
        usage="save <path>",
        description="Save the current image",
    )
    registry.register("undo", parse_undo, description="Undo the last change")
    registry.register("redo", parse_redo, description="Redo the last undone change")

    logger.info("Registered default script commands")
