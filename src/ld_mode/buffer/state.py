"""Where the cursor is and which rows a region command would touch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

Cursor = Tuple[int, int]  # (row, column), both zero-based
Selection = Tuple[Cursor, Cursor]  # (anchor, point), in either order


@dataclass(slots=True)
class BufferState:
    cursor: Cursor = (0, 0)
    selection: Optional[Selection] = None
    # Document version of the last committed edit.
    last_change_tick: int = 0

    def set_cursor(self, row: int, col: int) -> None:
        self.cursor = (row, col)

    def set_selection(self, anchor: Cursor, point: Cursor) -> None:
        self.selection = (anchor, point)

    def clear_selection(self) -> None:
        self.selection = None

    @property
    def has_selection(self) -> bool:
        return self.selection is not None

    def selected_rows(self) -> Optional[Tuple[int, int]]:
        """Inclusive ``(first, last)`` rows covered by the selection, if any."""

        if self.selection is None:
            return None
        anchor, point = self.selection
        return min(anchor[0], point[0]), max(anchor[0], point[0])


__all__ = ["BufferState", "Cursor", "Selection"]
