"""Helper utilities for keymap-driven modes."""

from __future__ import annotations

from ld_mode.keymaps import KeymapRegistry, normalize_token

from .base_mode import KeyInput, ModeContext


def key_to_token(key: KeyInput) -> str:
    if key.modifiers:
        return normalize_token("+".join([*key.modifiers, key.key]))
    return key.key


def require_keymap_registry(context: ModeContext) -> KeymapRegistry:
    registry = context.service("keymap_registry", KeymapRegistry)
    if registry is None:
        raise RuntimeError("ModeContext.extras missing 'keymap_registry'")
    return registry


def is_printable(key: KeyInput) -> bool:
    """Plain text input: a character with no modifier other than SHIFT."""

    if not key.text or any(mod.upper() != "SHIFT" for mod in key.modifiers):
        return False
    return key.text == "\t" or key.text.isprintable()


__all__ = ["key_to_token", "require_keymap_registry", "is_printable"]
