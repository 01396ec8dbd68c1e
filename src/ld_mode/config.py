"""Process-wide indentation settings.

The indentation unit is seeded from ``LD_MODE_INDENT_UNIT`` (default 4) and
can be overridden at runtime. Readers call ``get_indent_unit()`` on every
computation, so an override applies from the next call onward.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import Optional

from ld_mode.runtime import telemetry

ENV_PREFIX = "LD_MODE_"
DEFAULT_INDENT_UNIT = 4


class ConfigError(ValueError):
    """Raised when a setting is overridden with an unusable value."""


class IndentStyle(str, Enum):
    """How brace tests treat comment text."""

    FAITHFUL = "faithful"
    COMMENT_AWARE = "comment-aware"


DEFAULT_INDENT_STYLE = IndentStyle.FAITHFUL

_indent_unit_override: Optional[int] = None
_indent_style_override: Optional[IndentStyle] = None


def _env(name: str) -> Optional[str]:
    return os.environ.get(f"{ENV_PREFIX}{name}")


def _indent_unit_from_env() -> int:
    raw = _env("INDENT_UNIT")
    if raw is None:
        return DEFAULT_INDENT_UNIT
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value <= 0:
        telemetry.record_event(
            "config.invalid_indent_unit",
            level="warning",
            data={"value": raw, "fallback": DEFAULT_INDENT_UNIT},
        )
        return DEFAULT_INDENT_UNIT
    return value


def _indent_style_from_env() -> IndentStyle:
    raw = _env("INDENT_STYLE")
    if raw is None:
        return DEFAULT_INDENT_STYLE
    try:
        return IndentStyle(raw.strip().lower())
    except ValueError:
        telemetry.record_event(
            "config.invalid_indent_style",
            level="warning",
            data={"value": raw, "fallback": DEFAULT_INDENT_STYLE.value},
        )
        return DEFAULT_INDENT_STYLE


def get_indent_unit() -> int:
    """Columns added per brace nesting level."""

    if _indent_unit_override is not None:
        return _indent_unit_override
    return _indent_unit_from_env()


def set_indent_unit(width: int) -> None:
    global _indent_unit_override
    if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
        raise ConfigError(f"indent unit must be a positive integer, got {width!r}")
    _indent_unit_override = width
    telemetry.record_event("config.indent_unit", data={"width": width})


def reset_indent_unit() -> None:
    global _indent_unit_override
    _indent_unit_override = None


def get_indent_style() -> IndentStyle:
    if _indent_style_override is not None:
        return _indent_style_override
    return _indent_style_from_env()


def set_indent_style(style: IndentStyle | str) -> None:
    global _indent_style_override
    try:
        resolved = IndentStyle(style)
    except ValueError as exc:
        raise ConfigError(f"unknown indent style {style!r}") from exc
    _indent_style_override = resolved
    telemetry.record_event("config.indent_style", data={"style": resolved.value})


def reset_indent_style() -> None:
    global _indent_style_override
    _indent_style_override = None


__all__ = [
    "ConfigError",
    "DEFAULT_INDENT_UNIT",
    "DEFAULT_INDENT_STYLE",
    "IndentStyle",
    "get_indent_unit",
    "set_indent_unit",
    "reset_indent_unit",
    "get_indent_style",
    "set_indent_style",
    "reset_indent_style",
]
