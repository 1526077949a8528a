"""Snapshot-based undo/redo history over any cloneable state.

Every push stores a deep clone of the outgoing state, so snapshots held on
either stack are never aliased by later edits.  Retention is bounded: once
the undo stack holds max_depth snapshots, the oldest one is evicted.
"""

import copy
import logging
from collections import deque
from typing import Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_HISTORY_DEPTH = 100


class UndoRedoStack(Generic[T]):
    """Holds the current state plus undo and redo snapshot stacks (most recent last).

    Instantiate one per open document; history must not be shared across documents.
    """

    def __init__(
        self,
        initial: T,
        max_depth: int = DEFAULT_HISTORY_DEPTH,
        clone: Callable[[T], T] = copy.deepcopy,
    ):
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        self._clone = clone
        self._max_depth = max_depth
        self._current = initial
        self._undo_stack: deque[T] = deque(maxlen=max_depth)
        self._redo_stack: list[T] = []

    @property
    def current(self) -> T:
        return self._current

    @property
    def can_undo(self) -> bool:
        return len(self._undo_stack) > 0

    @property
    def can_redo(self) -> bool:
        return len(self._redo_stack) > 0

    @property
    def undo_depth(self) -> int:
        return len(self._undo_stack)

    @property
    def redo_depth(self) -> int:
        return len(self._redo_stack)

    def push(self, next_state: T) -> None:
        """Make *next_state* current, saving the previous state and discarding the redo branch."""
        if len(self._undo_stack) == self._max_depth:
            logger.debug("History full (%d snapshots), evicting oldest", self._max_depth)
        self._undo_stack.append(self._clone(self._current))
        self._redo_stack.clear()
        self._current = next_state

    def undo(self) -> T:
        """Restore the previous state; no-op when there is nothing to undo."""
        if not self._undo_stack:
            return self._current
        previous = self._undo_stack.pop()
        self._redo_stack.append(self._clone(self._current))
        self._current = previous
        return self._current

    def redo(self) -> T:
        """Re-apply the most recently undone state; no-op when there is nothing to redo."""
        if not self._redo_stack:
            return self._current
        following = self._redo_stack.pop()
        self._undo_stack.append(self._clone(self._current))
        self._current = following
        return self._current

    def reset(self, value: T) -> None:
        """Clear both stacks and make *value* current (used when a new document is loaded)."""
        self._undo_stack.clear()
        self._redo_stack.clear()
        self._current = value
