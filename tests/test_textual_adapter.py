from __future__ import annotations

from pathlib import Path
from typing import Any, List, Tuple

import pytest
from rich.text import Span, Text

from ld_mode.adapters.textual import (
    CATEGORY_STYLES,
    TextualLdAdapter,
    TextualUIHooks,
    highlight_document,
    highlight_line,
    normalize_key,
)
from ld_mode.adapters.textual.app import main
from ld_mode.adapters.textual.render import COMMENT_STYLE, CURSOR_STYLE
from ld_mode.buffer import Buffer, BufferDocument, BufferMirror
from ld_mode.ld_script import create_manager
from ld_mode.syntax import Category


def make_adapter(
    text: str = "",
) -> Tuple[TextualLdAdapter, List[BufferMirror], List[str], List[str], List[Any]]:
    manager = create_manager(Buffer.from_text(text, name="script.ld", path="script.ld"))
    mirrors: List[BufferMirror] = []
    statuses: List[str] = []
    logs: List[str] = []
    events: List[Any] = []
    hooks = TextualUIHooks(
        update_buffer=lambda rendered, mirror: mirrors.append(mirror),
        update_status=statuses.append,
        handle_event=lambda name, payload: events.append((name, payload)),
        log=logs.append,
    )
    return TextualLdAdapter(manager, hooks), mirrors, statuses, logs, events


def test_normalize_key_maps_textual_names() -> None:
    assert normalize_key("tab", "\t") == ("TAB", None, ())
    assert normalize_key("enter", "\r") == ("ENTER", None, ())
    assert normalize_key("a", "a") == ("a", "a", ())
    assert normalize_key("shift+a", "A") == ("A", "A", ())
    assert normalize_key("ctrl+z", None) == ("z", None, ("CTRL",))
    assert normalize_key("ctrl+alt+backslash", None) == ("\\", None, ("CTRL", "ALT"))
    assert normalize_key("space", " ") == (" ", " ", ())


def test_highlight_line_styles_categories() -> None:
    text = highlight_line("SECTIONS {")

    assert text.plain == "SECTIONS {"
    assert text.spans == [Span(0, 8, CATEGORY_STYLES[Category.KEYWORD])]


def test_highlight_line_leaves_comments_plain() -> None:
    line = "/* SECTIONS */ KEEP"

    text = highlight_line(line, [(0, 14)])

    assert text.spans == [
        Span(0, 14, COMMENT_STYLE),
        Span(15, 19, CATEGORY_STYLES[Category.KEYWORD]),
    ]


def test_highlight_document_tracks_open_comments_and_cursor() -> None:
    document = BufferDocument.from_lines(["/* MEMORY", "SECTIONS */", ""])

    rendered = highlight_document(document, cursor=(2, 0))

    assert isinstance(rendered, Text)
    assert rendered.plain == "/* MEMORY\nSECTIONS */\n "
    styles = {span.style for span in rendered.spans}
    assert CATEGORY_STYLES[Category.KEYWORD] not in styles
    assert COMMENT_STYLE in styles
    assert CURSOR_STYLE in styles


def test_adapter_dispatches_keys_and_reports_status() -> None:
    adapter, mirrors, statuses, logs, events = make_adapter("SECTIONS {\n*(.text)")
    adapter.manager.context.buffer.state.set_cursor(1, 0)

    result = adapter.handle_textual_key("TAB")

    assert result.status == "indent_line"
    assert mirrors[-1].text == "SECTIONS {\n    *(.text)"
    assert mirrors[-1].attributes == {"mode": "ld-script"}
    assert statuses[-1] == "ld-script | Ln 2, Col 5 | indent 4 (faithful) | indent 4"
    assert events == [("indent.line", {"row": 1, "column": 4, "rule": "scan-open"})]
    assert logs[0].startswith("key -> ")
    assert any(line.startswith("event -> ") for line in logs)
    assert logs[-1].startswith("result <- ")


def test_adapter_types_printable_text() -> None:
    adapter, mirrors, _, _, _ = make_adapter()

    key, text, modifiers = normalize_key("x", "x")
    adapter.handle_textual_key(key, text=text, modifiers=modifiers)

    assert mirrors[-1].text == "x"
    assert "x" in adapter.render().plain


def test_adapter_status_line_shows_settings() -> None:
    adapter, _, statuses, _, _ = make_adapter()

    assert statuses == ["ld-script | Ln 1, Col 1 | indent 4 (faithful)"]
    assert adapter.status_line() == statuses[0]


def test_reindent_command_writes_stdout(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    script = tmp_path / "app.ld"
    script.write_text("SECTIONS {\n.text : {\n*(.text)\n}\n}\n", encoding="utf-8")

    assert main(["--reindent", "--indent-unit", "2", str(script)]) == 0

    captured = capsys.readouterr()
    assert captured.out == "SECTIONS {\n  .text : {\n    *(.text)\n  }\n}\n"


def test_reindent_command_errors(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main(["--reindent"]) == 2
    assert main(["--indent-unit", "0", str(tmp_path / "x.ld")]) == 2

    err = capsys.readouterr().err
    assert "--reindent needs a path" in err
    assert "indent unit must be a positive integer" in err


def test_adapter_close_stops_event_forwarding() -> None:
    adapter, mirrors, _, _, events = make_adapter("SECTIONS {\n*(.text)")
    adapter.manager.context.buffer.state.set_cursor(1, 0)
    adapter.close()

    adapter.handle_textual_key("TAB")

    assert events == []
    assert mirrors[-1].text == "SECTIONS {\n    *(.text)"


def test_reindent_command_drops_carriage_returns(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    script = tmp_path / "crlf.ld"
    script.write_bytes(b"x\r\n{\r\ny\r\n\r\n}\r\n")

    assert main(["--reindent", str(script)]) == 0

    out = capsys.readouterr().out
    assert "\r" not in out
    assert out == "x\n{\n    y\n\n}\n"


def test_reindent_command_reports_unreadable_path(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    missing = tmp_path / "missing.ld"

    assert main(["--reindent", str(missing)]) == 2

    err = capsys.readouterr().err
    assert err.startswith("ld-mode: cannot read")
    assert "missing.ld" in err
