from __future__ import annotations

import pytest

from ld_mode.runtime import telemetry
from ld_mode.runtime.telemetry import PRESETS, TelemetrySettings


def test_settings_default_without_environment() -> None:
    assert TelemetrySettings.from_env({}) == TelemetrySettings()
    assert TelemetrySettings().level == "WARNING"


def test_settings_read_prefixed_environment() -> None:
    settings = TelemetrySettings.from_env(
        {
            "LD_MODE_LOG_LEVEL": "debug",
            "LD_MODE_DISABLE_CONSOLE": "yes",
            "LD_MODE_LOG_JSON": "1",
            "LD_MODE_LOG_FILE": "ld.log",
            "LD_MODE_PROFILE": "off",
        }
    )

    assert settings == TelemetrySettings(
        level="DEBUG", console=False, json=True, log_file="ld.log", profile=False
    )


def test_presets_keep_environment_log_file() -> None:
    base = TelemetrySettings(log_file="ld.log")

    assert PRESETS["quiet"](base) == TelemetrySettings(console=False, log_file="ld.log")
    assert PRESETS["production"](TelemetrySettings()).log_file == "ld_mode.log"
    assert PRESETS["development"](base).level == "DEBUG"


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="loud")


def test_span_yields_handle_and_reraises() -> None:
    with pytest.raises(RuntimeError, match="boom"):
        with telemetry.span("test::boom", metadata={"row": 3}) as handle:
            assert handle.metadata == {"row": "3"}
            handle.add_metadata("rule", ("scan", 1))
            raise RuntimeError("boom")

    assert handle.metadata == {"row": "3", "rule": "('scan', 1)"}


def test_record_event_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("test.event", level="shout")
