"""Textual host for the linker-script mode."""

from .controller import TextualLdAdapter, TextualUIHooks, normalize_key
from .render import CATEGORY_STYLES, highlight_document, highlight_line

__all__ = [
    "CATEGORY_STYLES",
    "TextualLdAdapter",
    "TextualUIHooks",
    "highlight_document",
    "highlight_line",
    "normalize_key",
]
