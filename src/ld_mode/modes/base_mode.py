"""Key events, results, the shared context and the event bus used by modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple, Type, TypeVar

from ld_mode.buffer import Buffer

T = TypeVar("T")
Subscriber = Callable[[object], None]


@dataclass(slots=True)
class KeyInput:
    """Host-independent key press.

    ``key`` is a name such as ``"TAB"`` or a single character, ``modifiers``
    holds upper-case names (``"CTRL"``, ``"ALT"``, ``"SHIFT"``) and ``text``
    is what the key would type, if anything.
    """

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None


@dataclass(slots=True)
class ModeResult:
    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None


@dataclass(slots=True)
class ModeContext:
    """Buffer, bus, and named services (keymap registry, comment scanner...)."""

    buffer: Buffer
    bus: "ModeBus"
    extras: Dict[str, object] = field(default_factory=dict)

    def service(self, name: str, kind: Type[T]) -> Optional[T]:
        """``extras[name]`` when it is a ``kind``, else ``None``."""

        value = self.extras.get(name)
        return value if isinstance(value, kind) else None


class ModeBus:
    """Synchronous publish/subscribe channel shared by modes, actions and hosts."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, List[Subscriber]] = {}

    def subscribe(self, event: str, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback``; calling the returned function detaches it."""

        self._subscribers.setdefault(event, []).append(callback)
        return lambda: self.unsubscribe(event, callback)

    def unsubscribe(self, event: str, callback: Subscriber) -> None:
        callbacks = self._subscribers.get(event, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        # Copy so a subscriber may detach itself while being called.
        for callback in list(self._subscribers.get(event, ())):
            callback(payload)


class Mode:
    """Base class all concrete editor modes inherit from."""

    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def on_enter(self, previous: Optional[str]) -> None:  # pragma: no cover
        del previous

    def on_exit(self, next_mode: Optional[str]) -> None:  # pragma: no cover
        del next_mode

    def handle_key(self, key: KeyInput) -> ModeResult:  # pragma: no cover
        raise NotImplementedError


__all__ = ["KeyInput", "Mode", "ModeBus", "ModeContext", "ModeResult", "Subscriber"]
