"""
Undo/redo history of committed images.

HistoryManager owns the editor's current image and both history stacks;
nothing else mutates them. Stacks are ordered oldest-first, so the most
recent entry is always last.

The empty editor is a valid history state: committing onto an empty editor
records an empty entry (None) on the undo stack, which lets the first load
or generate be undone back to "no image".

Classes:
    HistorySnapshot: Frozen copy of the full history state
    HistoryManager: Current image plus bounded undo and redo stacks
"""

from dataclasses import dataclass
import logging
from typing import List, Optional, Tuple

from IP_Libs.constants import DEFAULT_HISTORY_DEPTH
from IP_Libs.errors import EmptyImageError, NothingToRedoError, NothingToUndoError
from IP_Libs.ImageEditingLib.image_models import PixelBuffer

logger = logging.getLogger(__name__)

HistoryEntry = Optional[PixelBuffer]


@dataclass(frozen=True)
class HistorySnapshot:
    current: HistoryEntry
    undo_stack: Tuple[HistoryEntry, ...]
    redo_stack: Tuple[HistoryEntry, ...]


class HistoryManager:
    """
    Current image with undo and redo stacks.

    Args:
        max_depth: Maximum undo entries kept; the oldest is evicted first.
                   0 keeps everything.

    Example:
        >>> history = HistoryManager()
        >>> history.commit(PixelBuffer.filled(2, 2))
        >>> history.undo()
        >>> history.has_image
        False
        >>> history.redo()
        >>> history.current().size
        (2, 2)
    """

    def __init__(self, max_depth: int = DEFAULT_HISTORY_DEPTH) -> None:
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")
        self.max_depth = max_depth
        self._current: HistoryEntry = None
        self._undo: List[HistoryEntry] = []
        self._redo: List[HistoryEntry] = []

    @property
    def has_image(self) -> bool:
        return self._current is not None

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def current(self) -> PixelBuffer:
        """
        Return the current image.

        Raises:
            EmptyImageError: If no image has been loaded or generated
        """
        if self._current is None:
            raise EmptyImageError()
        return self._current

    def peek(self) -> HistoryEntry:
        """Return the current image, or None when the editor is empty."""
        return self._current

    def commit(self, buffer: PixelBuffer) -> None:
        """
        Make ``buffer`` the current image.

        The previous state goes onto the undo stack and the redo stack is
        cleared.
        """
        if buffer is None:
            raise ValueError("Cannot commit an empty image")

        self._undo.append(self._current)
        if self.max_depth and len(self._undo) > self.max_depth:
            self._undo.pop(0)
            logger.debug(f"History depth {self.max_depth} reached, evicted oldest entry")

        self._current = buffer
        self._redo.clear()
        logger.debug(f"Committed {buffer!r} (undo depth {len(self._undo)})")

    def undo(self) -> HistoryEntry:
        """
        Step back one state.

        Returns:
            The new current image (None when back at the empty editor)

        Raises:
            NothingToUndoError: If the undo stack is empty
        """
        if not self._undo:
            raise NothingToUndoError()

        self._redo.append(self._current)
        self._current = self._undo.pop()
        return self._current

    def redo(self) -> HistoryEntry:
        """
        Step forward one state.

        Raises:
            NothingToRedoError: If the redo stack is empty
        """
        if not self._redo:
            raise NothingToRedoError()

        self._undo.append(self._current)
        self._current = self._redo.pop()
        return self._current

    def clear(self) -> None:
        self._current = None
        self._undo.clear()
        self._redo.clear()

    def snapshot(self) -> HistorySnapshot:
        """Capture the full state; buffers are immutable, so sharing them is safe."""
        return HistorySnapshot(
            current=self._current,
            undo_stack=tuple(self._undo),
            redo_stack=tuple(self._redo),
        )

    def restore(self, snapshot: HistorySnapshot) -> None:
        """Return to a previously captured state."""
        self._current = snapshot.current
        self._undo = list(snapshot.undo_stack)
        self._redo = list(snapshot.redo_stack)
        logger.debug("History restored from snapshot")
