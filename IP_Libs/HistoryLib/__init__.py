"""
HistoryLib - Undo/redo history

This module keeps the editor's current image and its undo/redo stacks.
"""

from IP_Libs.HistoryLib.history_manager import HistoryManager, HistorySnapshot

__all__ = [
    "HistoryManager",
    "HistorySnapshot",
]
