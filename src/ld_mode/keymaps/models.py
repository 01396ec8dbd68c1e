"""Dataclasses describing key bindings and the actions they trigger."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


def normalize_token(token: str) -> str:
    """Canonical form of ``"ctrl+alt+\\"``-style tokens: sorted upper-case modifiers."""

    parts = token.split("+")
    if len(parts) == 1 or not parts[-1]:
        return token
    *modifiers, key = parts
    ordered = sorted(dict.fromkeys(m.strip().upper() for m in modifiers if m.strip()))
    return "+".join([*ordered, key])


@dataclass(frozen=True, slots=True)
class KeySequence:
    """Immutable chain of key tokens, e.g. ``("CTRL+c", "TAB")``."""

    tokens: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.tokens:
            raise ValueError("KeySequence requires at least one token")
        object.__setattr__(
            self, "tokens", tuple(normalize_token(token) for token in self.tokens)
        )

    @classmethod
    def from_strings(cls, *keys: str) -> "KeySequence":
        return cls(tuple(key for key in keys if key))

    @property
    def signature(self) -> str:
        return " ".join(self.tokens)


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Named editor command."""

    id: str
    handler: Callable[..., object]
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a key sequence in one mode with an action id."""

    id: str
    mode: str
    sequence: KeySequence
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.mode:
            raise ValueError("binding mode cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")


__all__ = ["ActionRef", "Binding", "KeySequence", "normalize_token"]
