from __future__ import annotations

import asyncio

from cellpad.adapters.textual.app import CellpadApp
from cellpad.adapters.textual.textarea_model import (
    TextAreaModel,
    index_to_location,
    location_to_index,
)
from cellpad.buffer import BufferMirror
from cellpad.config import EditorConfig
from cellpad.render import SelectionRange


def test_location_to_index() -> None:
    lines = ["ab", "", "cde"]

    assert location_to_index(lines, (0, 0)) == 0
    assert location_to_index(lines, (1, 0)) == 3
    assert location_to_index(lines, (2, 2)) == 6


def test_textarea_model_drives_hidden_widget() -> None:
    async def scenario() -> tuple[BufferMirror, list[str]]:
        app = CellpadApp(EditorConfig(model="textarea", initial_text="a😊"))
        async with app.run_test() as pilot:
            controller = app.controller
            assert controller is not None
            assert isinstance(controller.model, TextAreaModel)

            controller.handle_textual_key("ctrl+end")
            controller.handle_textual_key("c", character="c")
            controller.handle_textual_key("shift+left")
            controller.handle_textual_key("shift+left")
            controller.handle_textual_key("ctrl+c")
            await pilot.pause()
            return controller.model.mirror(), [app.editor_clipboard.text]

    mirror, copied = asyncio.run(scenario())

    assert mirror.text == "a😊c"
    assert mirror.selection == SelectionRange(4, 1)
    assert copied == ["😊c"]


def test_index_to_location() -> None:
    lines = ["ab", "", "cde"]

    assert index_to_location(lines, 0) == (0, 0)
    assert index_to_location(lines, 2) == (0, 2)
    assert index_to_location(lines, 3) == (1, 0)
    assert index_to_location(lines, 7) == (2, 3)


def test_textarea_model_moves_and_deletes_whole_clusters() -> None:
    family = "\U0001F468\u200d\U0001F469\u200d\U0001F467"

    async def scenario() -> dict[str, BufferMirror]:
        app = CellpadApp(EditorConfig(model="textarea", initial_text="x" + family))
        seen: dict[str, BufferMirror] = {}
        async with app.run_test():
            controller = app.controller
            assert controller is not None
            model = controller.model

            controller.handle_textual_key("ctrl+a")
            controller.handle_textual_key("ctrl+c")
            controller.handle_textual_key("ctrl+end")
            controller.handle_textual_key("left")
            seen["left"] = model.mirror()
            controller.handle_textual_key("right")
            seen["right"] = model.mirror()
            controller.handle_textual_key("left")
            controller.handle_textual_key("delete")
            seen["delete"] = model.mirror()
            controller.handle_textual_key("ctrl+v")
            controller.handle_textual_key("backspace")
            seen["backspace"] = model.mirror()
        return seen

    seen = asyncio.run(scenario())

    assert seen["left"].selection == SelectionRange(1, 1)
    assert seen["right"].selection == SelectionRange(3, 3)
    assert seen["delete"].text == "x"
    assert seen["delete"].selection == SelectionRange(1, 1)
    assert seen["backspace"].text == "xx"
    assert seen["backspace"].selection == SelectionRange(2, 2)
