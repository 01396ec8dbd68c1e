"""Syntax-aware editing support for GNU linker scripts."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "config",
    "indent",
    "keymaps",
    "ld_script",
    "modes",
    "runtime",
    "syntax",
]

__version__ = "0.1.0"
