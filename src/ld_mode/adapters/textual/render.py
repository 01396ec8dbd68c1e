"""Turn classifier and comment spans into styled ``rich`` text."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence, Tuple

from rich.text import Text

from ld_mode.buffer import BufferDocument, Cursor
from ld_mode.syntax import Category, CommentScanner, classify_line

CATEGORY_STYLES: Mapping[Category, str] = {
    Category.KEYWORD: "bold magenta",
    Category.BUILTIN: "cyan",
    Category.SECTION_NAME: "green",
    Category.WILDCARD: "bold yellow",
    Category.HEX_ADDRESS: "blue",
    Category.WARNING: "bold white on red",
}
COMMENT_STYLE = "italic bright_black"
CURSOR_STYLE = "reverse"


def highlight_line(
    line: str, comment_spans: Sequence[Tuple[int, int]] = ()
) -> Text:
    """Style one line; nothing inside a comment gets a category style."""

    text = Text(line)
    for start, end in comment_spans:
        text.stylize(COMMENT_STYLE, start, end)
    for span in classify_line(line):
        if any(span.start < end and start < span.end for start, end in comment_spans):
            continue
        text.stylize(CATEGORY_STYLES[span.category], span.start, span.end)
    return text


def highlight_document(
    document: BufferDocument,
    scanner: Optional[CommentScanner] = None,
    *,
    cursor: Optional[Cursor] = None,
) -> Text:
    scanner = scanner or CommentScanner()
    rendered = []
    for row in range(document.line_count):
        line = document.get_line(row)
        text = highlight_line(line, scanner.line_spans(document, row))
        if cursor is not None and cursor[0] == row:
            column = cursor[1]
            if column < len(line):
                text.stylize(CURSOR_STYLE, column, column + 1)
            else:
                text.append(" ", style=CURSOR_STYLE)
        rendered.append(text)
    return Text("\n").join(rendered)


__all__ = [
    "CATEGORY_STYLES",
    "COMMENT_STYLE",
    "CURSOR_STYLE",
    "highlight_document",
    "highlight_line",
]
