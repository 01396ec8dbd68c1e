"""Brace-depth indentation engine."""

from .engine import (
    IMMEDIATE_RULES,
    SCAN_RULES,
    CommentProbe,
    IndentDecision,
    IndentRule,
    compute_indent,
    indent_decision,
    reindent_lines,
)

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
