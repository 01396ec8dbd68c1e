"""Brace-depth indentation for linker scripts.

The engine infers nesting from plain text. It only ever reads the target
line and the lines above it, keeps no state between calls, and always
returns a column, including negative ones when unmatched closing braces
pile up. Clamping is left to whoever applies the column.

Decision order for line ``row``:

1. The first line is always at column 0.
2. If the line begins with ``{`` (leading whitespace ignored) it takes the
   indentation of the line right above; if it begins with ``}`` it takes
   that indentation minus one unit.
3. Otherwise walk upward. Lines whose first non-blank character sits in a
   comment are skipped. The first line containing ``}`` gives its own
   indentation minus one unit; the first containing ``{`` gives its own
   indentation plus one unit. Running off the top gives 0.

In ``IndentStyle.FAITHFUL`` the step 2 tests look at raw text, so a brace
inside a comment on the current line still counts, and so does one inside a
trailing comment of a scanned line. ``IndentStyle.COMMENT_AWARE`` runs every
brace test on the comment-free text instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional, Tuple

from ld_mode.buffer import BufferDocument, Cursor, ensure_row
from ld_mode.buffer.document import WHITESPACE
from ld_mode.config import IndentStyle, get_indent_unit
from ld_mode.syntax.comments import CommentScanner

CommentProbe = Callable[[BufferDocument, Cursor], bool]


class IndentRule(str, Enum):
    FIRST_LINE = "first-line"
    OPEN_BRACE = "open-brace"
    CLOSE_BRACE = "close-brace"
    SCAN_CLOSE = "scan-close"
    SCAN_OPEN = "scan-open"
    SCAN_EXHAUSTED = "scan-exhausted"


# (brace, rule, units added to the anchor line's indentation)
IMMEDIATE_RULES: Tuple[Tuple[str, IndentRule, int], ...] = (
    ("{", IndentRule.OPEN_BRACE, 0),
    ("}", IndentRule.CLOSE_BRACE, -1),
)
SCAN_RULES: Tuple[Tuple[str, IndentRule, int], ...] = (
    ("}", IndentRule.SCAN_CLOSE, -1),
    ("{", IndentRule.SCAN_OPEN, 1),
)


@dataclass(frozen=True, slots=True)
class IndentDecision:
    """Column chosen for a line, the rule that fired, and the line it used."""

    column: int
    rule: IndentRule
    anchor_row: Optional[int] = None


def indent_decision(
    document: BufferDocument,
    row: int,
    indent_unit: Optional[int] = None,
    *,
    style: IndentStyle = IndentStyle.FAITHFUL,
    scanner: Optional[CommentScanner] = None,
    comment_probe: Optional[CommentProbe] = None,
) -> IndentDecision:
    """Like :func:`compute_indent` but reports which rule decided."""

    ensure_row(document, row)
    unit = get_indent_unit() if indent_unit is None else indent_unit
    if row == 0:
        return IndentDecision(0, IndentRule.FIRST_LINE)

    scanner = scanner or CommentScanner()
    comment_aware = IndentStyle(style) is IndentStyle.COMMENT_AWARE
    if comment_aware:
        text_of: Callable[[int], str] = lambda r: scanner.visible_text(document, r)
    else:
        text_of = document.get_line

    head = text_of(row).lstrip(WHITESPACE)
    for brace, rule, units in IMMEDIATE_RULES:
        if head.startswith(brace):
            anchor = row - 1
            return IndentDecision(
                document.indentation(anchor) + units * unit, rule, anchor
            )

    probe = comment_probe or scanner.is_inside_comment
    for anchor in range(row - 1, -1, -1):
        if not comment_aware and probe(document, document.first_nonblank(anchor)):
            continue
        text = text_of(anchor)
        for brace, rule, units in SCAN_RULES:
            if brace in text:
                return IndentDecision(
                    document.indentation(anchor) + units * unit, rule, anchor
                )
    return IndentDecision(0, IndentRule.SCAN_EXHAUSTED)


def compute_indent(
    document: BufferDocument,
    row: int,
    indent_unit: Optional[int] = None,
    *,
    style: IndentStyle = IndentStyle.FAITHFUL,
    scanner: Optional[CommentScanner] = None,
    comment_probe: Optional[CommentProbe] = None,
) -> int:
    """Target indentation column for line ``row`` of ``document``.

    ``indent_unit`` defaults to the configured unit, read on every call.
    ``comment_probe`` replaces the comment test used while scanning upward;
    by default a :class:`CommentScanner` answers it. The result is not
    clamped and may be negative for unbalanced scripts.
    """

    return indent_decision(
        document,
        row,
        indent_unit,
        style=style,
        scanner=scanner,
        comment_probe=comment_probe,
    ).column


def reindent_lines(
    lines: Iterable[str],
    indent_unit: Optional[int] = None,
    *,
    style: IndentStyle = IndentStyle.FAITHFUL,
    start: int = 0,
    end: Optional[int] = None,
) -> List[str]:
    """Re-indent lines ``[start:end]`` top to bottom, each seeing the settled
    lines above it. Lines outside the range are returned untouched.

    Blank lines come out empty. Negative columns are written as no
    indentation.
    """

    unit = get_indent_unit() if indent_unit is None else indent_unit
    work = list(lines) or [""]
    # Only leading whitespace changes below, which never moves a comment
    # boundary, so one document and one scanner serve the whole pass.
    document = BufferDocument(_lines=work)
    scanner = CommentScanner()
    stop = len(work) if end is None else min(end, len(work))
    for row in range(max(start, 0), stop):
        content = work[row].lstrip(WHITESPACE)
        if not content:
            work[row] = ""
            continue
        column = compute_indent(document, row, unit, style=style, scanner=scanner)
        work[row] = " " * max(column, 0) + content
    return work


__all__ = [
    "CommentProbe",
    "IMMEDIATE_RULES",
    "SCAN_RULES",
    "IndentDecision",
    "IndentRule",
    "compute_indent",
    "indent_decision",
    "reindent_lines",
]
