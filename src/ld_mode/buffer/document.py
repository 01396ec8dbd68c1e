"""Line-oriented document storage for linker scripts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from .state import Cursor
from .validation import BufferValidationError

WHITESPACE = " \t"


@dataclass(slots=True)
class BufferDocument:
    """List-of-lines text model with a version counter.

    Every mutation returns a new document with ``version`` bumped, so
    readers that cache derived data (the comment scanner) can tell when a
    snapshot went stale.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0
    dirty: bool = False

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        lines = text.split("\n")
        return cls(_lines=[line.rstrip("\r") for line in lines])

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "BufferDocument":
        collected = list(lines)
        return cls(_lines=collected or [""])

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    def replace(self, *, lines: Iterable[str]) -> "BufferDocument":
        """Return a new document holding ``lines`` with the version bumped."""

        collected = list(lines) or [""]
        return BufferDocument(_lines=collected, version=self.version + 1, dirty=True)

    def update_lines(
        self, start: int, end: int, new_lines: Iterable[str]
    ) -> "BufferDocument":
        """Return a document with ``[start:end]`` replaced by ``new_lines``."""

        lines = list(self._lines)
        lines[start:end] = list(new_lines)
        return self.replace(lines=lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        if index < 0 or index >= len(self._lines):
            raise BufferValidationError(f"Line {index} out of range")
        return self._lines[index]

    def indentation(self, index: int) -> int:
        """Count of leading whitespace characters on line ``index``."""

        line = self.get_line(index)
        return len(line) - len(line.lstrip(WHITESPACE))

    def first_nonblank(self, index: int) -> Cursor:
        """Position of the first non-whitespace character (end of line if blank)."""

        return (index, self.indentation(index))

    def stripped(self, index: int) -> str:
        return self.get_line(index).lstrip(WHITESPACE)
