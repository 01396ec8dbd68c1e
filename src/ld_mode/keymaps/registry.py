"""Keymap registry: stores actions and bindings and resolves key sequences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Literal, Optional, Sequence

from ld_mode.runtime.telemetry import span

from .models import ActionRef, Binding, normalize_token


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    status: Literal["match", "pending", "miss"]
    match: Optional[ResolutionMatch] = None
    consumed: int = 0


class KeymapConflictError(RuntimeError):
    """Raised when a binding reuses a sequence already bound in its mode."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        conflicts_tuple = tuple(conflicts)
        message = (
            f"Binding '{binding.id}' conflicts with {[b.id for b in conflicts_tuple]}"
        )
        super().__init__(message)
        self.binding = binding
        self.conflicts = conflicts_tuple


class KeymapRegistry:
    """Owns action references and the per-mode binding index."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        # mode -> sequence tokens -> binding id
        self._by_sequence: Dict[str, Dict[tuple[str, ...], str]] = {}
        self._logger_name = logger_name

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def get_binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        with span(
            "keymaps::register_action",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"action_id": action.id},
        ):
            if not replace and action.id in self._actions:
                raise ValueError(f"Action '{action.id}' already registered")
            self._actions[action.id] = action
            return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "mode": binding.mode},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action "
                    f"'{binding.action_id}'"
                )

            conflicts = self.detect_conflicts(binding)
            if conflicts and not replace:
                handle.add_metadata(
                    "conflicts", ",".join(conflict.id for conflict in conflicts)
                )
                raise KeymapConflictError(binding, conflicts)
            if binding.id in self._bindings and not replace:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            for stale in [*conflicts, self._bindings.get(binding.id)]:
                if stale is not None:
                    self._drop(stale)

            self._bindings[binding.id] = binding
            self._by_sequence.setdefault(binding.mode, {})[
                binding.sequence.tokens
            ] = binding.id
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        binding = self._bindings.get(binding_id)
        if binding is not None:
            self._drop(binding)
        return binding

    def detect_conflicts(self, binding: Binding) -> list[Binding]:
        existing = self._by_sequence.get(binding.mode, {}).get(binding.sequence.tokens)
        if existing is None or existing == binding.id:
            return []
        return [self._bindings[existing]]

    def iter_bindings(self, mode: Optional[str] = None) -> Iterator[Binding]:
        for binding in self._bindings.values():
            if mode is None or binding.mode == mode:
                yield binding

    def resolve(self, mode: str, tokens: Sequence[str]) -> ResolutionResult:
        """Match ``tokens`` against the bindings of ``mode``.

        ``pending`` means the tokens are a strict prefix of some binding and
        the caller should wait for more keys.
        """

        normalized = tuple(normalize_token(token) for token in tokens)
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"mode": mode, "keys": " ".join(normalized)},
        ) as handle:
            table = self._by_sequence.get(mode, {})
            binding_id = table.get(normalized)
            if binding_id is not None:
                binding = self._bindings[binding_id]
                handle.add_metadata("status", "match")
                return ResolutionResult(
                    status="match",
                    match=ResolutionMatch(
                        binding=binding, action=self.get_action(binding.action_id)
                    ),
                    consumed=len(normalized),
                )
            if any(
                len(sequence) > len(normalized)
                and sequence[: len(normalized)] == normalized
                for sequence in table
            ):
                handle.add_metadata("status", "pending")
                return ResolutionResult(status="pending", consumed=len(normalized))
            handle.add_metadata("status", "miss")
            return ResolutionResult(status="miss")

    def _drop(self, binding: Binding) -> None:
        self._bindings.pop(binding.id, None)
        table = self._by_sequence.get(binding.mode)
        if table and table.get(binding.sequence.tokens) == binding.id:
            del table[binding.sequence.tokens]


__all__ = [
    "KeymapConflictError",
    "KeymapRegistry",
    "ResolutionMatch",
    "ResolutionResult",
]
