"""Block-comment detection for linker scripts.

Linker scripts only have ``/* ... */`` comments. They do not nest: a ``/*``
opens a comment and the next ``*/`` closes it whatever lies between. A
comment span includes both delimiters, and an unterminated comment runs to
the end of the document.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from ld_mode.buffer import BufferDocument, Cursor, ensure_cursor, ensure_row

COMMENT_START = "/*"
COMMENT_END = "*/"

Span = Tuple[int, int]  # [start, end) columns


def _scan_line(line: str, inside: bool) -> Tuple[List[Span], bool]:
    """Comment spans on ``line`` and whether the line ends inside a comment."""

    spans: List[Span] = []
    column = 0
    start = 0
    while True:
        if inside:
            close = line.find(COMMENT_END, column)
            if close == -1:
                spans.append((start, len(line)))
                return spans, True
            column = close + len(COMMENT_END)
            spans.append((start, column))
            inside = False
        else:
            start = line.find(COMMENT_START, column)
            if start == -1:
                return spans, False
            column = start + len(COMMENT_START)
            inside = True


def comment_spans(text: str) -> List[Span]:
    """Comment spans of a standalone line that starts outside any comment."""

    return _scan_line(text, False)[0]


class CommentScanner:
    """Replays comment delimiters from the top of a document.

    The scanner remembers, for every line it has visited, whether that line
    starts inside a comment. Checkpoints belong to one document snapshot and
    are dropped as soon as a different snapshot (or version) is queried.
    """

    def __init__(self) -> None:
        self._document: Optional[BufferDocument] = None
        self._version = -1
        self._checkpoints: List[bool] = [False]

    def _sync(self, document: BufferDocument) -> None:
        if document is self._document and document.version == self._version:
            return
        self._document = document
        self._version = document.version
        self._checkpoints = [False]

    def starts_inside(self, document: BufferDocument, row: int) -> bool:
        """Whether line ``row`` begins inside an open comment."""

        ensure_row(document, row)
        self._sync(document)
        while len(self._checkpoints) <= row:
            previous = len(self._checkpoints) - 1
            _, ends_inside = _scan_line(
                document.get_line(previous), self._checkpoints[previous]
            )
            self._checkpoints.append(ends_inside)
        return self._checkpoints[row]

    def line_spans(self, document: BufferDocument, row: int) -> List[Span]:
        inside = self.starts_inside(document, row)
        return _scan_line(document.get_line(row), inside)[0]

    def is_inside_comment(self, document: BufferDocument, position: Cursor) -> bool:
        row, column = ensure_cursor(document, position)
        line = document.get_line(row)
        spans, ends_inside = _scan_line(line, self.starts_inside(document, row))
        if column >= len(line):
            return ends_inside
        return any(start <= column < end for start, end in spans)

    def visible_text(self, document: BufferDocument, row: int) -> str:
        """Line ``row`` with every comment character blanked to a space."""

        line = document.get_line(row)
        chars = list(line)
        for start, end in self.line_spans(document, row):
            chars[start:end] = " " * (end - start)
        return "".join(chars)


def is_inside_comment(document: BufferDocument, position: Cursor) -> bool:
    """Whether ``position`` lies inside a block comment of ``document``."""

    return CommentScanner().is_inside_comment(document, position)


__all__ = [
    "COMMENT_START",
    "COMMENT_END",
    "CommentScanner",
    "comment_spans",
    "is_inside_comment",
]
