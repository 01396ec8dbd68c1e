"""Row and cursor checks shared by the document, buffer and scanners."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .state import Cursor

if TYPE_CHECKING:
    from .document import BufferDocument


class BufferValidationError(RuntimeError):
    """A row or cursor falls outside the document.

    This signals a caller bug; the offending position is kept on ``cursor``.
    """

    def __init__(self, message: str, *, cursor: Cursor | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor


def ensure_row(document: "BufferDocument", row: int) -> int:
    if not 0 <= row < document.line_count:
        raise BufferValidationError(
            f"row {row} outside 0..{document.line_count - 1}", cursor=(row, 0)
        )
    return row


def ensure_cursor(document: "BufferDocument", cursor: Cursor) -> Cursor:
    """Return ``cursor`` if its row exists and its column is ``0..len(line)``."""

    row, column = cursor
    if not 0 <= row < document.line_count:
        raise BufferValidationError(f"row {row} out of range", cursor=cursor)
    width = len(document.get_line(row))
    if not 0 <= column <= width:
        raise BufferValidationError(
            f"column {column} outside 0..{width} on row {row}", cursor=cursor
        )
    return cursor


__all__ = ["BufferValidationError", "ensure_cursor", "ensure_row"]
