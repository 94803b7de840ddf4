from __future__ import annotations

import asyncio

from cellpad.adapters.textual.app import CellpadApp
from cellpad.buffer import TextBuffer
from cellpad.config import EditorConfig


def make_app(text: str = "ab") -> CellpadApp:
    return CellpadApp(EditorConfig(initial_text=text))


def test_app_edits_buffer_through_key_presses() -> None:
    async def scenario() -> dict[str, str]:
        app = make_app()
        seen: dict[str, str] = {}
        async with app.run_test() as pilot:
            controller = app.controller
            assert controller is not None
            buffer = controller.model
            assert isinstance(buffer, TextBuffer)

            await pilot.press("tab")
            seen["after_tab"] = buffer.text
            await pilot.press("shift+left", "shift+left", "ctrl+c")
            seen["clip"] = app.editor_clipboard.text
            await pilot.press("end", "ctrl+v")
            seen["after_paste"] = buffer.text
            await pilot.press("space", "A")
            seen["after_space"] = buffer.text
        return seen

    seen = asyncio.run(scenario())

    assert seen == {
        "after_tab": "ab  ",
        "clip": "  ",
        "after_paste": "ab    ",
        "after_space": "ab     A",
    }


def test_app_uses_configured_title_and_border() -> None:
    async def scenario() -> tuple[str, str]:
        app = CellpadApp(EditorConfig(title="notes", border="double"))
        async with app.run_test():
            panel = app.query_one("#panel")
            return str(panel.border_title), panel.styles.border_top[0]

    title, border = asyncio.run(scenario())

    assert title == "notes"
    assert border == "double"
