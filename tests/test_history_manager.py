"""
Tests for HistoryManager.

Tests cover:
- Commit, undo and redo ordering
- The empty editor as an undoable state
- Depth-bounded eviction
- Snapshot and restore
"""

import unittest

from IP_Libs.errors import EmptyImageError, NothingToRedoError, NothingToUndoError
from IP_Libs.HistoryLib.history_manager import HistoryManager
from IP_Libs.ImageEditingLib.image_models import PixelBuffer


def make_buffer(value: int) -> PixelBuffer:
    return PixelBuffer.filled(2, 2, (value, value, value))


class TestCommitUndoRedo(unittest.TestCase):

    def setUp(self):
        self.history = HistoryManager()
        self.a = make_buffer(10)
        self.b = make_buffer(20)
        self.c = make_buffer(30)

    def test_starts_empty(self):
        self.assertFalse(self.history.has_image)
        self.assertIsNone(self.history.peek())
        with self.assertRaises(EmptyImageError):
            self.history.current()

    def test_undo_on_fresh_history_raises(self):
        with self.assertRaises(NothingToUndoError):
            self.history.undo()

    def test_redo_on_fresh_history_raises(self):
        with self.assertRaises(NothingToRedoError):
            self.history.redo()

    def test_undo_then_redo_restores_image(self):
        self.history.commit(self.a)
        self.history.commit(self.b)

        self.assertIs(self.history.undo(), self.a)
        self.assertIs(self.history.redo(), self.b)
        self.assertIs(self.history.current(), self.b)

    def test_first_commit_can_be_undone_to_empty(self):
        self.history.commit(self.a)

        self.assertIsNone(self.history.undo())
        self.assertFalse(self.history.has_image)

        self.history.redo()
        self.assertIs(self.history.current(), self.a)

    def test_commit_clears_redo(self):
        self.history.commit(self.a)
        self.history.commit(self.b)
        self.history.undo()
        self.assertTrue(self.history.can_redo)

        self.history.commit(self.c)

        self.assertFalse(self.history.can_redo)
        with self.assertRaises(NothingToRedoError):
            self.history.redo()

    def test_undo_walks_back_in_order(self):
        for buffer in (self.a, self.b, self.c):
            self.history.commit(buffer)

        self.assertIs(self.history.undo(), self.b)
        self.assertIs(self.history.undo(), self.a)
        self.assertIsNone(self.history.undo())
        with self.assertRaises(NothingToUndoError):
            self.history.undo()

    def test_depth_counters(self):
        self.history.commit(self.a)
        self.history.commit(self.b)
        self.history.undo()

        self.assertEqual(self.history.undo_depth, 1)
        self.assertEqual(self.history.redo_depth, 1)

    def test_commit_none_rejected(self):
        with self.assertRaises(ValueError):
            self.history.commit(None)

    def test_clear(self):
        self.history.commit(self.a)
        self.history.clear()

        self.assertFalse(self.history.has_image)
        self.assertFalse(self.history.can_undo)
        self.assertFalse(self.history.can_redo)


class TestBoundedDepth(unittest.TestCase):

    def test_oldest_entry_evicted(self):
        history = HistoryManager(max_depth=2)
        buffers = [make_buffer(v) for v in (1, 2, 3, 4)]
        for buffer in buffers:
            history.commit(buffer)

        self.assertEqual(history.undo_depth, 2)
        self.assertIs(history.undo(), buffers[2])
        self.assertIs(history.undo(), buffers[1])
        with self.assertRaises(NothingToUndoError):
            history.undo()

    def test_zero_depth_is_unbounded(self):
        history = HistoryManager(max_depth=0)
        for value in range(60):
            history.commit(make_buffer(value))

        self.assertEqual(history.undo_depth, 60)

    def test_negative_depth_rejected(self):
        with self.assertRaises(ValueError):
            HistoryManager(max_depth=-1)


class TestSnapshot(unittest.TestCase):

    def test_restore_discards_later_changes(self):
        history = HistoryManager()
        first = make_buffer(1)
        history.commit(first)
        snapshot = history.snapshot()

        history.commit(make_buffer(2))
        history.commit(make_buffer(3))
        history.undo()
        history.restore(snapshot)

        self.assertIs(history.current(), first)
        self.assertEqual(history.undo_depth, 1)
        self.assertEqual(history.redo_depth, 0)

    def test_snapshot_is_independent_of_later_commits(self):
        history = HistoryManager()
        snapshot = history.snapshot()

        history.commit(make_buffer(5))

        self.assertIsNone(snapshot.current)
        self.assertEqual(snapshot.undo_stack, ())


if __name__ == "__main__":
    unittest.main()
