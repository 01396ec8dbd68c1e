"""Major mode for editing GNU linker scripts."""

from __future__ import annotations

from typing import List, Optional

from ld_mode.keymaps import ResolutionMatch
from ld_mode.runtime import telemetry
from ld_mode.syntax import CommentScanner

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import is_printable, key_to_token, require_keymap_registry

LD_SCRIPT_MODE = "ld-script"


class LdScriptMode(Mode):
    """Routes keys through the keymap; anything unbound and printable is typed."""

    name = LD_SCRIPT_MODE

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("ld_mode.modes.ld_script")
        self._registry = require_keymap_registry(context)
        self._pending: List[str] = []
        self.scanner = CommentScanner()

    def on_enter(self, previous: Optional[str]) -> None:
        # Actions find the scanner here so its checkpoints survive between keys.
        self.context.extras["comment_scanner"] = self.scanner
        self.context.bus.emit("ld-script.enter", previous)

    def on_exit(self, next_mode: Optional[str]) -> None:
        self._pending.clear()
        if self.context.extras.get("comment_scanner") is self.scanner:
            del self.context.extras["comment_scanner"]
        self.context.bus.emit("ld-script.exit", next_mode)

    def handle_key(self, key: KeyInput) -> ModeResult:
        self._pending.append(key_to_token(key))
        result = self._registry.resolve(self.name, tuple(self._pending))

        if result.status == "match" and result.match:
            self._pending.clear()
            return self._execute_match(result.match)

        if result.status == "pending":
            return ModeResult(
                consumed=True, status="pending", message="awaiting_sequence"
            )

        self._pending.clear()
        if is_printable(key):
            assert key.text is not None
            self.context.buffer.insert_text(key.text)
            return ModeResult(consumed=True, status="insert")
        return ModeResult(consumed=False, status="unbound")

    def _execute_match(self, match: ResolutionMatch) -> ModeResult:
        with telemetry.span(
            "keymaps::execute",
            component="keymaps",
            metadata={"binding_id": match.binding.id, "action": match.action.id},
        ):
            outcome = match.action(self.context, match)

        if isinstance(outcome, ModeResult):
            return outcome
        return ModeResult(consumed=True)


__all__ = ["LD_SCRIPT_MODE", "LdScriptMode"]
