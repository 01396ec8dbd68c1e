"""Textual app and command line entry point for editing linker scripts."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import VerticalScroll
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use ld_mode.adapters.textual.app"
    ) from exc

from rich.text import Text

from ld_mode.buffer import Buffer, BufferDocument, BufferMirror
from ld_mode.config import (
    ConfigError,
    IndentStyle,
    get_indent_style,
    set_indent_style,
    set_indent_unit,
)
from ld_mode.indent import reindent_lines
from ld_mode.ld_script import create_manager
from ld_mode.modes import ModeManager
from ld_mode.runtime import telemetry

from .controller import TextualLdAdapter, TextualUIHooks, normalize_key


class LdScriptApp(App[None]):
    """Single-buffer editor showing a highlighted linker script."""

    CSS = """
    Screen {
        layout: vertical;
    }

    #buffer-area {
        height: 1fr;
        border: round $accent;
        padding: 0 1;
    }

    #status-line {
        height: 1;
        background: $surface-darken-1;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("ctrl+s", "save", "Save"),
    ]

    def __init__(self, path: Optional[Path] = None) -> None:
        super().__init__()
        self.path = path
        self.manager: ModeManager | None = None
        self.adapter: TextualLdAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(id="buffer-area"):
            self._buffer_widget = Static("", id="buffer-view")
            yield self._buffer_widget
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        self.manager = create_manager(self._load_buffer())
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            handle_event=self._handle_event,
            log=self._log_line,
        )
        self.adapter = TextualLdAdapter(self.manager, hooks)
        if self.path is not None:
            self.title = self.path.name

    def on_key(self, event: events.Key) -> None:
        if not self.adapter or event.key in {"ctrl+q", "ctrl+s"}:
            return
        key, text, modifiers = normalize_key(event.key, event.character)
        result = self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        if result.consumed:
            event.stop()
            event.prevent_default()

    def on_unmount(self) -> None:
        if self.adapter is not None:
            self.adapter.close()

    def action_save(self) -> None:
        if self.manager is None or self.path is None:
            self._update_status("no file to save")
            return
        buffer = self.manager.context.buffer
        self.path.write_text(buffer.text, encoding="utf-8")
        buffer.document.dirty = False
        telemetry.record_event("buffer.saved", data={"path": str(self.path)})
        self._update_status(f"wrote {self.path}")

    def _load_buffer(self) -> Buffer:
        if self.path is None:
            return Buffer(name="*scratch*")
        text = self.path.read_text(encoding="utf-8") if self.path.exists() else ""
        return Buffer.from_text(text, name=self.path.name, path=str(self.path))

    def _update_buffer(self, rendered: Text, mirror: BufferMirror) -> None:
        del mirror
        if self._buffer_widget:
            self._buffer_widget.update(rendered)

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == "indent.region" and isinstance(payload, dict):
            first, last = payload["first"] + 1, payload["last"] + 1
            self.notify(f"re-indented lines {first}-{last}")

    def _log_line(self, line: str) -> None:
        self.log(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ld-mode", description="Edit or re-indent a GNU linker script."
    )
    parser.add_argument("path", nargs="?", type=Path, help="Linker script to open")
    parser.add_argument(
        "--indent-unit",
        type=int,
        default=None,
        help="Columns per brace level (default: $LD_MODE_INDENT_UNIT or 4)",
    )
    parser.add_argument(
        "--comment-aware",
        action="store_true",
        help="Ignore braces that sit inside comments",
    )
    parser.add_argument(
        "--reindent",
        action="store_true",
        help="Print the re-indented script to stdout instead of opening the editor",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        if args.indent_unit is not None:
            set_indent_unit(args.indent_unit)
        if args.comment_aware:
            set_indent_style(IndentStyle.COMMENT_AWARE)
    except ConfigError as exc:
        print(f"ld-mode: {exc}", file=sys.stderr)
        return 2

    if args.reindent:
        if args.path is None:
            print("ld-mode: --reindent needs a path", file=sys.stderr)
            return 2
        try:
            text = args.path.read_text(encoding="utf-8")
        except OSError as exc:
            reason = exc.strerror or exc
            print(f"ld-mode: cannot read {args.path}: {reason}", file=sys.stderr)
            return 2
        lines = BufferDocument.from_text(text).snapshot()
        sys.stdout.write("\n".join(reindent_lines(lines, style=get_indent_style())))
        return 0

    telemetry.configure(preset="quiet")
    LdScriptApp(args.path).run()
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry point
    sys.exit(main())
