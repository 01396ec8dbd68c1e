"""Indentation commands: indent line, newline-and-indent, indent region."""

from __future__ import annotations

from ld_mode.config import get_indent_style, get_indent_unit
from ld_mode.indent import IndentDecision, indent_decision, reindent_lines
from ld_mode.keymaps import ResolutionMatch
from ld_mode.modes.base_mode import ModeContext, ModeResult
from ld_mode.runtime import telemetry
from ld_mode.syntax import CommentScanner


def _scanner(context: ModeContext) -> CommentScanner:
    return context.service("comment_scanner", CommentScanner) or CommentScanner()


def indent_row(context: ModeContext, row: int) -> IndentDecision:
    """Compute the column for ``row`` and write it into the buffer."""

    buffer = context.buffer
    decision = indent_decision(
        buffer.document,
        row,
        get_indent_unit(),
        style=get_indent_style(),
        scanner=_scanner(context),
    )
    buffer.set_indentation(row, decision.column)
    context.bus.emit(
        "indent.line",
        {"row": row, "column": decision.column, "rule": decision.rule.value},
    )
    return decision


def indent_line(context: ModeContext, match: ResolutionMatch | None) -> ModeResult:
    del match
    row = context.buffer.state.cursor[0]
    with telemetry.span(
        "indent::line", component="indent", metadata={"row": row}
    ) as handle:
        decision = indent_row(context, row)
        handle.add_metadata("column", decision.column)
        handle.add_metadata("rule", decision.rule.value)
    return ModeResult(
        consumed=True, status="indent_line", message=f"indent {decision.column}"
    )


def newline_and_indent(
    context: ModeContext, match: ResolutionMatch | None
) -> ModeResult:
    context.buffer.insert_text("\n")
    return indent_line(context, match)


def indent_region(context: ModeContext, match: ResolutionMatch | None) -> ModeResult:
    """Re-indent the selected rows, or the whole buffer without a selection."""

    del match
    buffer = context.buffer
    rows = buffer.state.selected_rows()
    first, last = rows if rows is not None else (0, buffer.document.line_count - 1)
    with telemetry.span(
        "indent::region",
        component="indent",
        metadata={"first": first, "last": last},
    ):
        lines = reindent_lines(
            buffer.document.snapshot(),
            get_indent_unit(),
            style=get_indent_style(),
            start=first,
            end=last + 1,
        )
        buffer.reindent_rows(first, lines[first : last + 1], label="indent_region")
    context.bus.emit("indent.region", {"first": first, "last": last})
    return ModeResult(
        consumed=True,
        status="indent_region",
        message=f"indented {last - first + 1} lines",
    )


__all__ = ["indent_row", "indent_line", "newline_and_indent", "indent_region"]
