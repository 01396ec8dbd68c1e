"""Built-in actions and key bindings of the linker-script mode."""

from __future__ import annotations

from typing import Iterable, Sequence

from ld_mode.actions import editing as editing_actions
from ld_mode.actions import indent as indent_actions
from ld_mode.modes.ld_script_mode import LD_SCRIPT_MODE

from .models import ActionRef, Binding, KeySequence
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="indent.line",
        handler=indent_actions.indent_line,
        description="Indent the current line",
    ),
    ActionRef(
        id="indent.newline",
        handler=indent_actions.newline_and_indent,
        description="Insert a newline and indent it",
    ),
    ActionRef(
        id="indent.region",
        handler=indent_actions.indent_region,
        description="Indent the selection, or the whole buffer",
    ),
    ActionRef(
        id="edit.delete_backward",
        handler=editing_actions.delete_backward,
        description="Delete the character before the cursor",
    ),
    ActionRef(id="edit.undo", handler=editing_actions.undo, description="Undo"),
    ActionRef(id="edit.redo", handler=editing_actions.redo, description="Redo"),
    ActionRef(id="cursor.left", handler=editing_actions.cursor_left),
    ActionRef(id="cursor.right", handler=editing_actions.cursor_right),
    ActionRef(id="cursor.up", handler=editing_actions.cursor_up),
    ActionRef(id="cursor.down", handler=editing_actions.cursor_down),
)


def _bind(
    binding_id: str, action_id: str, *keys: str, description: str = ""
) -> Binding:
    return Binding(
        id=f"{LD_SCRIPT_MODE}.{binding_id}",
        mode=LD_SCRIPT_MODE,
        sequence=KeySequence.from_strings(*keys),
        action_id=action_id,
        description=description,
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _bind("tab", "indent.line", "TAB", description="Indent line"),
    _bind("enter", "indent.newline", "ENTER", description="Newline and indent"),
    _bind(
        "indent_region",
        "indent.region",
        "CTRL+ALT+\\",
        description="Indent region",
    ),
    _bind(
        "indent_region_seq",
        "indent.region",
        "CTRL+x",
        "TAB",
        description="Indent region",
    ),
    _bind("backspace", "edit.delete_backward", "BACKSPACE"),
    _bind("undo", "edit.undo", "CTRL+z"),
    _bind("redo", "edit.redo", "CTRL+y"),
    _bind("left", "cursor.left", "LEFT"),
    _bind("right", "cursor.right", "RIGHT"),
    _bind("up", "cursor.up", "UP"),
    _bind("down", "cursor.down", "DOWN"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    exclude_bindings: Sequence[str] | None = None,
    extra_bindings: Iterable[Binding] | None = None,
) -> None:
    """Register the built-in actions and bindings into ``registry``."""

    excluded = set(exclude_bindings or ())
    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)
    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)
    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=replace)


__all__ = ["DEFAULT_ACTIONS", "DEFAULT_BINDINGS", "load_default_keymaps"]
