"""Editor commands bound by the linker-script mode."""

from .editing import (
    cursor_down,
    cursor_left,
    cursor_right,
    cursor_up,
    delete_backward,
    redo,
    undo,
)
from .indent import indent_line, indent_region, indent_row, newline_and_indent

__all__ = [
    "cursor_down",
    "cursor_left",
    "cursor_right",
    "cursor_up",
    "delete_backward",
    "indent_line",
    "indent_region",
    "indent_row",
    "newline_and_indent",
    "redo",
    "undo",
]
