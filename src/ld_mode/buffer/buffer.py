"""Edit buffer combining document, cursor state, and undo history."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from typing import ContextManager, Optional, Sequence

from ld_mode.runtime import telemetry

from .document import BufferDocument
from .state import BufferState, Cursor, Selection
from .undo import UndoEntry, UndoTimeline
from .validation import ensure_cursor, ensure_row


@dataclass(slots=True)
class BufferDelta:
    """State of the buffer right after the edit named by ``label``."""

    version: int
    text: str
    cursor: Cursor
    selection: Optional[Selection]
    label: str


@dataclass(slots=True)
class BufferMirror:
    """Snapshot handed to host widgets; ``attributes`` carries host extras."""

    text: str
    cursor: Cursor
    selection: Optional[Selection]
    version: int = 0
    attributes: dict[str, str] = field(default_factory=dict)


class Buffer:
    def __init__(
        self,
        *,
        name: str = "default",
        path: Optional[str] = None,
        document: Optional[BufferDocument] = None,
        state: Optional[BufferState] = None,
        undo: Optional[UndoTimeline] = None,
    ) -> None:
        self.name = name
        self.path = path
        self.document = document or BufferDocument()
        self.state = state or BufferState()
        self.history = undo if undo is not None else UndoTimeline()

    @classmethod
    def from_text(
        cls, text: str, *, name: str = "default", path: Optional[str] = None
    ) -> "Buffer":
        return cls(name=name, path=path, document=BufferDocument.from_text(text))

    @property
    def text(self) -> str:
        return self.document.text

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            text=self.document.text,
            cursor=self.state.cursor,
            selection=self.state.selection,
            version=self.document.version,
            attributes=dict(attributes or {}),
        )

    def replace_range(
        self, start: Cursor, end: Cursor, text: str, *, label: str
    ) -> BufferDelta:
        start = ensure_cursor(self.document, start)
        end = ensure_cursor(self.document, end)
        if start > end:
            start, end = end, start
        with Transaction(self, label) as tx:
            lines = self.document.snapshot()
            (start_row, start_col), (end_row, end_col) = start, end
            merged = lines[start_row][:start_col] + text + lines[end_row][end_col:]
            replacement = merged.split("\n")
            self.document = self.document.update_lines(
                start_row, end_row + 1, replacement
            )
            tail = len(lines[end_row]) - end_col
            last_row = start_row + len(replacement) - 1
            self.state.set_cursor(last_row, len(replacement[-1]) - tail)
            tx.commit()
        return self._delta(label)

    def insert_text(self, text: str, *, cursor: Optional[Cursor] = None) -> BufferDelta:
        position = cursor or self.state.cursor
        return self.replace_range(position, position, text, label="insert_text")

    def delete_range(self, start: Cursor, end: Cursor) -> BufferDelta:
        return self.replace_range(start, end, "", label="delete_range")

    def get_text_range(self, start: Cursor, end: Cursor) -> str:
        start = ensure_cursor(self.document, start)
        end = ensure_cursor(self.document, end)
        if start > end:
            start, end = end, start
        lines = self.document.snapshot()
        if start[0] == end[0]:
            return lines[start[0]][start[1] : end[1]]
        parts = [lines[start[0]][start[1] :]]
        parts.extend(lines[start[0] + 1 : end[0]])
        parts.append(lines[end[0]][: end[1]])
        return "\n".join(parts)

    def set_indentation(self, row: int, width: int) -> BufferDelta:
        """Replace the leading whitespace of ``row`` with ``width`` spaces.

        Negative widths are applied as zero. A cursor sitting inside the old
        indentation lands on the first non-blank character; a cursor further
        right keeps its place relative to the text.
        """

        line = self.document.get_line(ensure_row(self.document, row))
        new_line = " " * max(width, 0) + line[self.document.indentation(row) :]
        return self.reindent_rows(row, [new_line], label="set_indentation")

    def reindent_rows(
        self, start: int, new_lines: Sequence[str], *, label: str
    ) -> BufferDelta:
        """Overwrite rows from ``start`` with ``new_lines`` as one undoable edit.

        Only the indentation of those rows is expected to differ. The cursor
        follows its text the way :meth:`set_indentation` describes.
        """

        new_lines = list(new_lines)
        end = start + len(new_lines)
        ensure_row(self.document, start)
        ensure_row(self.document, end - 1)
        old_lines = self.document.snapshot()[start:end]
        if list(old_lines) == new_lines:
            return self._delta(label)

        with Transaction(self, label) as tx:
            cursor_row, cursor_col = self.state.cursor
            if start <= cursor_row < end:
                old_width = self.document.indentation(cursor_row)
                self.document = self.document.update_lines(start, end, new_lines)
                width = self.document.indentation(cursor_row)
                if cursor_col < old_width:
                    cursor_col = width
                else:
                    cursor_col += width - old_width
                line_length = len(self.document.get_line(cursor_row))
                self.state.set_cursor(cursor_row, min(cursor_col, line_length))
            else:
                self.document = self.document.update_lines(start, end, new_lines)
            tx.commit()
        return self._delta(label)

    def undo(self) -> Optional[BufferDelta]:
        entry = self.history.undo()
        if entry is None:
            return None
        self._restore(entry.before_text, entry.cursor_before)
        return self._delta(f"undo:{entry.label}")

    def redo(self) -> Optional[BufferDelta]:
        entry = self.history.redo()
        if entry is None:
            return None
        self._restore(entry.after_text, entry.cursor_after)
        return self._delta(f"redo:{entry.label}")

    def _restore(self, text: str, cursor: Cursor) -> None:
        self.document = self.document.replace(lines=text.split("\n"))
        self.state.set_cursor(*cursor)
        self.state.last_change_tick = self.document.version

    def _delta(self, label: str) -> BufferDelta:
        return BufferDelta(
            version=self.document.version,
            text=self.document.text,
            cursor=self.state.cursor,
            selection=self.state.selection,
            label=label,
        )


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps one edit in a telemetry span and records it for undo."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None
        self._before_text = ""
        self._before_cursor: Cursor = (0, 0)

    def __enter__(self) -> "Transaction":
        self._before_text = self.buffer.document.text
        self._before_cursor = self.buffer.state.cursor
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def commit(self) -> None:
        self.buffer.state.last_change_tick = self.buffer.document.version
        self.buffer.history.push(
            UndoEntry(
                label=self.label,
                before_text=self._before_text,
                after_text=self.buffer.document.text,
                cursor_before=self._before_cursor,
                cursor_after=self.buffer.state.cursor,
            )
        )

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
