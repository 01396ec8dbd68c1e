"""Bounded undo/redo stacks of whole-text snapshots."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional

from .state import Cursor


@dataclass(frozen=True, slots=True)
class UndoEntry:
    """One committed edit: the text and cursor on either side of it."""

    label: str
    before_text: str
    after_text: str
    cursor_before: Cursor
    cursor_after: Cursor


class UndoTimeline:
    """Undo stack plus redo stack; recording a new edit empties the redo side.

    Only the newest ``limit`` edits are kept.
    """

    def __init__(self, *, limit: int = 500) -> None:
        if limit <= 0:
            raise ValueError("undo limit must be positive")
        self._done: Deque[UndoEntry] = deque(maxlen=limit)
        self._undone: list[UndoEntry] = []

    def __len__(self) -> int:
        return len(self._done)

    def push(self, entry: UndoEntry) -> None:
        self._done.append(entry)
        self._undone.clear()

    def can_undo(self) -> bool:
        return bool(self._done)

    def can_redo(self) -> bool:
        return bool(self._undone)

    def undo(self) -> Optional[UndoEntry]:
        if not self._done:
            return None
        entry = self._done.pop()
        self._undone.append(entry)
        return entry

    def redo(self) -> Optional[UndoEntry]:
        if not self._undone:
            return None
        entry = self._undone.pop()
        self._done.append(entry)
        return entry

    def clear(self) -> None:
        self._done.clear()
        self._undone.clear()


__all__ = ["UndoEntry", "UndoTimeline"]
