"""Lexical tables and comment detection for linker scripts."""

from .classifier import (
    RULES,
    Category,
    ClassifiedSpan,
    LineClassification,
    PatternRule,
    classify_line,
    classify_text,
)
from .comments import CommentScanner, comment_spans, is_inside_comment
from .lexicon import BUILTINS, KEYWORDS, WARNING_TOKENS

__all__ = [
    "BUILTINS",
    "KEYWORDS",
    "RULES",
    "WARNING_TOKENS",
    "Category",
    "ClassifiedSpan",
    "CommentScanner",
    "LineClassification",
    "PatternRule",
    "classify_line",
    "classify_text",
    "comment_spans",
    "is_inside_comment",
]
