"""The linker-script mode as one descriptor, plus a ready-to-use manager."""

from __future__ import annotations

from typing import Optional

from ld_mode.buffer import Buffer
from ld_mode.keymaps.defaults import DEFAULT_ACTIONS, DEFAULT_BINDINGS
from ld_mode.modes import (
    LD_SCRIPT_MODE,
    LdScriptMode,
    ModeBus,
    ModeContext,
    ModeDescriptor,
    ModeManager,
)
from ld_mode.syntax import RULES
from ld_mode.syntax.comments import COMMENT_END, COMMENT_START

FILE_PATTERNS: tuple[str, ...] = ("*.ld", "*.lds")


def ld_script_descriptor() -> ModeDescriptor:
    return ModeDescriptor(
        name=LD_SCRIPT_MODE,
        mode_factory=LdScriptMode,
        file_patterns=FILE_PATTERNS,
        comment_start=f"{COMMENT_START} ",
        comment_end=f" {COMMENT_END}",
        rules=RULES,
        actions=DEFAULT_ACTIONS,
        bindings=DEFAULT_BINDINGS,
    )


def create_manager(buffer: Optional[Buffer] = None) -> ModeManager:
    """Manager with the linker-script mode registered and active.

    It is the only mode on offer, so a path that no pattern claims still
    ends up in it.
    """

    buffer = buffer or Buffer()
    context = ModeContext(buffer=buffer, bus=ModeBus())
    manager = ModeManager(context)
    manager.register_descriptor(ld_script_descriptor())
    if buffer.path is None or manager.activate_for_path(buffer.path) is None:
        manager.activate(LD_SCRIPT_MODE)
    return manager


__all__ = ["FILE_PATTERNS", "create_manager", "ld_script_descriptor"]
