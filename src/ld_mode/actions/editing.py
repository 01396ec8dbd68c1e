"""Plain editing commands the linker-script mode binds besides indentation."""

from __future__ import annotations

from ld_mode.keymaps import ResolutionMatch
from ld_mode.modes.base_mode import ModeContext, ModeResult


def delete_backward(context: ModeContext, match: ResolutionMatch | None) -> ModeResult:
    del match
    buffer = context.buffer
    row, col = buffer.state.cursor
    if col > 0:
        buffer.delete_range((row, col - 1), (row, col))
    elif row > 0:
        previous = buffer.document.get_line(row - 1)
        buffer.delete_range((row - 1, len(previous)), (row, 0))
    else:
        return ModeResult(consumed=True, status="noop")
    return ModeResult(consumed=True, status="delete_backward")


def undo(context: ModeContext, match: ResolutionMatch | None) -> ModeResult:
    del match
    delta = context.buffer.undo()
    if delta is None:
        return ModeResult(consumed=True, status="noop", message="nothing to undo")
    return ModeResult(consumed=True, status="undo", message=delta.label)


def redo(context: ModeContext, match: ResolutionMatch | None) -> ModeResult:
    del match
    delta = context.buffer.redo()
    if delta is None:
        return ModeResult(consumed=True, status="noop", message="nothing to redo")
    return ModeResult(consumed=True, status="redo", message=delta.label)


def _move(context: ModeContext, row_delta: int, col_delta: int) -> ModeResult:
    document = context.buffer.document
    row, col = context.buffer.state.cursor
    if row_delta:
        row = min(max(row + row_delta, 0), document.line_count - 1)
        col = min(col, len(document.get_line(row)))
    elif col_delta < 0 and col == 0:
        if row > 0:
            row -= 1
            col = len(document.get_line(row))
    elif col_delta > 0 and col == len(document.get_line(row)):
        if row + 1 < document.line_count:
            row, col = row + 1, 0
    else:
        col += col_delta
    context.buffer.state.set_cursor(row, col)
    return ModeResult(consumed=True, status="move")


def cursor_left(context: ModeContext, match: ResolutionMatch | None) -> ModeResult:
    del match
    return _move(context, 0, -1)


def cursor_right(context: ModeContext, match: ResolutionMatch | None) -> ModeResult:
    del match
    return _move(context, 0, 1)


def cursor_up(context: ModeContext, match: ResolutionMatch | None) -> ModeResult:
    del match
    return _move(context, -1, 0)


def cursor_down(context: ModeContext, match: ResolutionMatch | None) -> ModeResult:
    del match
    return _move(context, 1, 0)


__all__ = [
    "cursor_down",
    "cursor_left",
    "cursor_right",
    "cursor_up",
    "delete_backward",
    "redo",
    "undo",
]
