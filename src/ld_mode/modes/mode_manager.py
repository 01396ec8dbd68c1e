"""Host-facing registry of mode descriptors and the active-mode dispatcher."""

from __future__ import annotations

from typing import Dict, Iterator, Optional

from ld_mode.keymaps import KeymapRegistry
from ld_mode.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .descriptor import ModeDescriptor


class ModeManager:
    """Owns registered descriptors, the active mode, and key dispatch.

    Registering a descriptor installs its actions and bindings in the shared
    keymap registry; activating a mode instantiates it once and emits
    ``mode.exit`` / ``mode.enter`` on the context bus.
    """

    def __init__(
        self,
        context: ModeContext,
        *,
        keymap_registry: KeymapRegistry | None = None,
    ) -> None:
        self.context = context
        self._descriptors: Dict[str, ModeDescriptor] = {}
        self._modes: Dict[str, Mode] = {}
        self._active: Optional[str] = None
        self.logger = telemetry.get_logger("ld_mode.modes")
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="ld_mode.keymaps"
        )
        self.context.extras.setdefault("keymap_registry", self.keymap_registry)
        self.context.extras.setdefault("mode_manager", self)

    @property
    def active_mode(self) -> Optional[Mode]:
        if self._active is None:
            return None
        return self._modes.get(self._active)

    def descriptors(self) -> Iterator[ModeDescriptor]:
        yield from self._descriptors.values()

    def register_descriptor(self, descriptor: ModeDescriptor) -> ModeDescriptor:
        if descriptor.name in self._descriptors:
            raise ValueError(f"Mode '{descriptor.name}' already registered")
        with telemetry.span(
            "modes::register",
            component="modes",
            metadata={"mode": descriptor.name},
        ):
            for action in descriptor.actions:
                self.keymap_registry.register_action(action, replace=True)
            for binding in descriptor.bindings:
                self.keymap_registry.register_binding(binding)
            self._descriptors[descriptor.name] = descriptor
        return descriptor

    def get_descriptor(self, name: str) -> ModeDescriptor:
        try:
            return self._descriptors[name]
        except KeyError as exc:
            raise KeyError(f"Unknown mode '{name}'") from exc

    def descriptor_for_path(self, path: str) -> Optional[ModeDescriptor]:
        for descriptor in self._descriptors.values():
            if descriptor.matches(path):
                return descriptor
        return None

    def activate(self, name: str) -> Mode:
        descriptor = self.get_descriptor(name)
        previous = self.active_mode
        if previous is not None and previous.name == name:
            return previous
        if previous is not None:
            previous.on_exit(name)
            self.context.bus.emit("mode.exit", previous.name)

        mode = self._modes.get(name)
        if mode is None:
            mode = descriptor.mode_factory(self.context)
            self._modes[name] = mode
        self._active = name
        mode.on_enter(previous.name if previous else None)
        self.context.bus.emit("mode.enter", name)
        telemetry.record_event("mode.switch", data={"mode": name})
        return mode

    def activate_for_path(self, path: str) -> Optional[Mode]:
        """Activate the mode associated with ``path``; ``None`` if no mode claims it."""

        descriptor = self.descriptor_for_path(path)
        if descriptor is None:
            telemetry.record_event("mode.no_match", level="debug", data={"path": path})
            return None
        return self.activate(descriptor.name)

    def handle_key(self, key: KeyInput) -> ModeResult:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active mode")
        with telemetry.span(
            name=f"mode::{mode.name}",
            component=True,
            metadata={"key": key.key, "mode": mode.name},
        ):
            result = mode.handle_key(key)
        if result.switch_to:
            self.activate(result.switch_to)
        return result


__all__ = ["ModeManager"]
