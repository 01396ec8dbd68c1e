"""Key binding models and the registry that resolves them.

Default bindings live in :mod:`ld_mode.keymaps.defaults`, imported on demand
because they pull in the action implementations.
"""

from .models import ActionRef, Binding, KeySequence, normalize_token
from .registry import (
    KeymapConflictError,
    KeymapRegistry,
    ResolutionMatch,
    ResolutionResult,
)

__all__ = [
    "ActionRef",
    "Binding",
    "KeySequence",
    "KeymapConflictError",
    "KeymapRegistry",
    "ResolutionMatch",
    "ResolutionResult",
    "normalize_token",
]
