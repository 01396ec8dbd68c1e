from __future__ import annotations

from typing import Iterator

import pytest

from ld_mode import config


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("LD_MODE_INDENT_UNIT", raising=False)
    monkeypatch.delenv("LD_MODE_INDENT_STYLE", raising=False)
    config.reset_indent_unit()
    config.reset_indent_style()
    yield
    config.reset_indent_unit()
    config.reset_indent_style()
