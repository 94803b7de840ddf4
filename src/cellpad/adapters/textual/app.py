"""Executable Textual app that hosts the editor panel."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use cellpad.adapters.textual.app"
    ) from exc

from cellpad.buffer import Clipboard, EditorModel, TextBuffer
from cellpad.config import BORDER_STYLES, MODEL_KINDS, EditorConfig
from cellpad.render import StyledLine, to_rich_text
from cellpad.runtime import telemetry

from .controller import EditorController, PanelHooks
from .textarea_model import TextAreaModel

QUIT_KEYS = frozenset({"ctrl+q"})


class CellpadApp(App[None]):
    """Single bordered panel showing the buffer with its selection."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#panel {
		height: 1fr;
		padding: 0 1;
		content-align: left top;
		overflow: hidden;
	}

	#model {
		display: none;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, config: Optional[EditorConfig] = None) -> None:
        super().__init__()
        self.config = config or EditorConfig()
        self.controller: EditorController | None = None
        self.editor_clipboard = Clipboard(on_copy=self.copy_to_clipboard)
        self.logger = telemetry.get_logger("cellpad.app")
        self._panel: Static | None = None
        self._model_widget: TextArea | None = None

    def compose(self) -> ComposeResult:
        self._panel = Static("", id="panel")
        yield self._panel
        if self.config.model == "textarea":
            self._model_widget = TextArea(
                self.config.initial_text, id="model", soft_wrap=False
            )
            self._model_widget.can_focus = False
            yield self._model_widget

    def on_mount(self) -> None:
        panel = self._panel
        assert panel is not None
        panel.border_title = self.config.title
        panel.styles.border = (self.config.border, "white")
        hooks = PanelHooks(
            paint=self._paint,
            update_status=self._update_status,
            log=self.logger.debug,
        )
        self.controller = EditorController(self._build_model(), hooks)
        self._schedule_redraw()

    def _build_model(self) -> EditorModel:
        config = self.config
        if self._model_widget is not None:
            return TextAreaModel(
                self._model_widget,
                clipboard=self.editor_clipboard,
                tab_width=config.tab_width,
                page_lines=config.page_lines,
            )
        return TextBuffer.from_text(
            config.initial_text,
            clipboard=self.editor_clipboard,
            tab_width=config.tab_width,
            page_lines=config.page_lines,
        )

    async def on_key(self, event: events.Key) -> None:
        if event.key in QUIT_KEYS:
            self.exit()
            return
        if not self.controller:
            return
        self.controller.handle_textual_key(event.key, character=event.character)
        event.stop()
        event.prevent_default()
        self._schedule_redraw()

    def on_resize(self, event: events.Resize) -> None:
        if self.controller:
            self.controller.resize(event.size.width, event.size.height)
            self._schedule_redraw()

    def on_app_focus(self, event: events.AppFocus) -> None:
        del event
        if self.controller:
            self.controller.set_focus(True)

    def on_app_blur(self, event: events.AppBlur) -> None:
        del event
        if self.controller:
            self.controller.set_focus(False)

    def _schedule_redraw(self) -> None:
        if self.controller and self.controller.redraw_pending:
            self.call_after_refresh(self.controller.flush_redraw)

    def _paint(self, lines: Sequence[StyledLine]) -> None:
        if self._panel:
            self._panel.update(to_rich_text(lines))

    def _update_status(self, status: str) -> None:
        if self._panel:
            self._panel.border_subtitle = status


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the cellpad terminal editor.")
    parser.add_argument("--title", help="Panel title")
    parser.add_argument(
        "--border",
        choices=sorted(BORDER_STYLES),
        help="Panel border style (default: round)",
    )
    parser.add_argument(
        "--model",
        choices=sorted(MODEL_KINDS),
        help="Editor model backing the panel (default: buffer)",
    )
    parser.add_argument("--text", dest="initial_text", help="Initial buffer text")
    parser.add_argument("--tab-width", type=int, help="Spaces inserted per tab stop")
    parser.add_argument("--page-lines", type=int, help="Lines moved by page up/down")
    parser.add_argument(
        "--log-file",
        help="Write logs to this file (console logging is off while the app runs)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    base = telemetry.active_config()
    telemetry.configure(
        config=telemetry.TelemetryConfig(
            level=base.level,
            console=False,
            colored=base.colored,
            log_file=args.log_file or base.log_file,
        )
    )
    config = EditorConfig.from_env().replace(
        title=args.title,
        border=args.border,
        model=args.model,
        initial_text=args.initial_text,
        tab_width=args.tab_width,
        page_lines=args.page_lines,
    )
    telemetry.record_event("app.start", data={"model": config.model})
    CellpadApp(config).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
