"""Document model, cursor state, and undoable edit buffer."""

from .buffer import Buffer, BufferDelta, BufferMirror, Transaction
from .document import BufferDocument
from .state import BufferState, Cursor, Selection
from .undo import UndoEntry, UndoTimeline
from .validation import BufferValidationError, ensure_cursor, ensure_row

__all__ = [
    "Buffer",
    "BufferDelta",
    "BufferDocument",
    "BufferMirror",
    "BufferState",
    "BufferValidationError",
    "Cursor",
    "Selection",
    "Transaction",
    "UndoEntry",
    "UndoTimeline",
    "ensure_cursor",
    "ensure_row",
]
