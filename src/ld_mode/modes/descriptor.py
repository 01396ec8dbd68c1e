"""Explicit description of an editing mode, handed to the host at registration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from fnmatch import fnmatchcase
from typing import Callable

from ld_mode.keymaps import ActionRef, Binding
from ld_mode.syntax import PatternRule

from .base_mode import Mode, ModeContext


@dataclass(frozen=True, slots=True)
class ModeDescriptor:
    """Everything a host needs to offer a mode: files, highlighting, keys."""

    name: str
    mode_factory: Callable[[ModeContext], Mode]
    file_patterns: tuple[str, ...] = ()
    comment_start: str = ""
    comment_end: str = ""
    rules: tuple[PatternRule, ...] = ()
    actions: tuple[ActionRef, ...] = ()
    bindings: tuple[Binding, ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("mode name cannot be empty")
        for binding in self.bindings:
            if binding.mode != self.name:
                raise ValueError(
                    f"Binding '{binding.id}' targets mode '{binding.mode}', "
                    f"not '{self.name}'"
                )

    def matches(self, path: str) -> bool:
        filename = os.path.basename(path)
        return any(fnmatchcase(filename, pattern) for pattern in self.file_patterns)


__all__ = ["ModeDescriptor"]
