"""Adapter wiring ModeManager results and bus events into Textual callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from rich.text import Text

from ld_mode.buffer import BufferMirror
from ld_mode.config import get_indent_style, get_indent_unit
from ld_mode.modes import KeyInput, ModeManager, ModeResult
from ld_mode.syntax import CommentScanner

from .render import highlight_document

_KEY_NAMES = {
    "escape": "ESC",
    "enter": "ENTER",
    "return": "ENTER",
    "tab": "TAB",
    "backspace": "BACKSPACE",
    "left": "LEFT",
    "right": "RIGHT",
    "up": "UP",
    "down": "DOWN",
    "backslash": "\\",
    "space": " ",
}

_FORWARDED_EVENTS = (
    "indent.line",
    "indent.region",
    "mode.enter",
    "mode.exit",
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def normalize_key(
    key: str, character: Optional[str] = None
) -> Tuple[str, Optional[str], Tuple[str, ...]]:
    """Map a Textual key name to ``(key, text, modifiers)`` for ``KeyInput``."""

    *raw_modifiers, name = key.split("+") if key != "+" else ["+"]
    modifiers = tuple(modifier.upper() for modifier in raw_modifiers)
    if character and character.isprintable() and set(modifiers) <= {"SHIFT"}:
        return character, character, ()
    if name in _KEY_NAMES:
        return _KEY_NAMES[name], None, modifiers
    return name, None, modifiers


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[Text, BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualLdAdapter:
    """Bridges ModeManager and bus events to a Textual-friendly surface."""

    def __init__(self, manager: ModeManager, hooks: TextualUIHooks) -> None:
        self.manager = manager
        self.hooks = hooks
        self._fallback_scanner = CommentScanner()
        self._detach: List[Callable[[], None]] = []
        self._subscribe_events()
        self._refresh_buffer()
        self.hooks.update_status(self.status_line())

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        normalized_modifiers = tuple(str(mod).upper() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized_modifiers)
        result = self.manager.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized_modifiers)
        )
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
        )
        self._refresh_buffer()
        status = self.status_line()
        if result.message:
            status = f"{status} | {result.message}"
        self.hooks.update_status(status)
        return result

    def render(self) -> Text:
        buffer = self.manager.context.buffer
        return highlight_document(
            buffer.document, self._scanner(), cursor=buffer.state.cursor
        )

    def status_line(self) -> str:
        buffer = self.manager.context.buffer
        active = self.manager.active_mode
        row, col = buffer.state.cursor
        return (
            f"{active.name if active else '-'} | Ln {row + 1}, Col {col + 1}"
            f" | indent {get_indent_unit()} ({get_indent_style().value})"
        )

    def close(self) -> None:
        """Stop forwarding bus events to the hooks."""

        while self._detach:
            self._detach.pop()()

    def _scanner(self) -> CommentScanner:
        scanner = self.manager.context.service("comment_scanner", CommentScanner)
        return scanner or self._fallback_scanner

    def _subscribe_events(self) -> None:
        bus = self.manager.context.bus
        for event in _FORWARDED_EVENTS:
            self._detach.append(
                bus.subscribe(
                    event,
                    lambda payload, name=event: self._handle_event(name, payload),
                )
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _refresh_buffer(self) -> None:
        buffer = self.manager.context.buffer
        active = self.manager.active_mode
        mirror = buffer.mirror(attributes={"mode": active.name if active else ""})
        self.hooks.update_buffer(self.render(), mirror)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.manager.context.buffer
        active = self.manager.active_mode
        return {
            "mode": active.name if active else "?",
            "cursor": buffer.state.cursor,
            "buffer": buffer.name,
            "buffer_version": buffer.document.version,
        }


__all__ = ["TextualLdAdapter", "TextualUIHooks", "normalize_key"]
