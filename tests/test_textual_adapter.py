from __future__ import annotations

from typing import Sequence

from cellpad.adapters.textual import EditorController, PanelHooks, textual_key_events
from cellpad.adapters.textual.keys import key_identity
from cellpad.buffer import TextBuffer
from cellpad.keymaps import CommandKind, KeyEvent, NamedKey
from cellpad.render import StyledLine


class RecordingHooks:
    def __init__(self) -> None:
        self.paints: list[tuple[StyledLine, ...]] = []
        self.statuses: list[str] = []
        self.logs: list[str] = []

    def paint(self, lines: Sequence[StyledLine]) -> None:
        self.paints.append(tuple(lines))

    def as_hooks(self) -> PanelHooks:
        return PanelHooks(
            paint=self.paint,
            update_status=self.statuses.append,
            log=self.logs.append,
        )


def make_controller(text: str = "abc") -> tuple[EditorController, TextBuffer, RecordingHooks]:
    recorder = RecordingHooks()
    buffer = TextBuffer.from_text(text)
    controller = EditorController(buffer, recorder.as_hooks())
    return controller, buffer, recorder


def test_textual_key_expands_modifiers_around_key() -> None:
    events = textual_key_events("ctrl+shift+left")

    assert events == (
        KeyEvent.press(NamedKey.CTRL),
        KeyEvent.press(NamedKey.SHIFT),
        KeyEvent.press(NamedKey.LEFT),
        KeyEvent.release(NamedKey.LEFT),
        KeyEvent.release(NamedKey.SHIFT),
        KeyEvent.release(NamedKey.CTRL),
    )


def test_textual_key_uses_character_and_aliases() -> None:
    assert textual_key_events("a", "a") == (KeyEvent.press("a"), KeyEvent.release("a"))
    assert textual_key_events("exclamation_mark", "!")[0] == KeyEvent.press("!")
    assert textual_key_events("return")[0] == KeyEvent.press(NamedKey.ENTER)
    assert textual_key_events("f12")[0] == KeyEvent.press(NamedKey.F12)


def test_unknown_textual_key_produces_nothing() -> None:
    assert textual_key_events("ctrl+unknown_thing") == ()
    assert key_identity("unknown_thing", None) is None


def test_controller_starts_with_pending_redraw() -> None:
    controller, _, recorder = make_controller()

    assert controller.redraw_pending is True
    assert controller.flush_redraw() is True
    assert controller.flush_redraw() is False
    assert len(recorder.paints) == 1
    assert recorder.statuses == ["3:3"]


def test_typing_through_controller_edits_and_repaints() -> None:
    controller, buffer, recorder = make_controller("ab")
    controller.flush_redraw()

    commands = controller.handle_textual_key("c", character="c")

    assert [command.kind for command in commands] == [CommandKind.INSERT_CHAR]
    assert buffer.text == "abc"
    assert controller.flush_redraw() is True
    (line,) = recorder.paints[-1]
    assert line.plain == "abc "
    assert [run.text for run in line.reversed_runs] == [" "]


def test_redraw_requests_coalesce() -> None:
    controller, _, recorder = make_controller("hello")
    controller.flush_redraw()

    controller.handle_textual_key("left")
    controller.handle_textual_key("shift+left")
    controller.resize(80, 24)
    controller.flush_redraw()

    assert len(recorder.paints) == 2
    assert recorder.statuses[-1] == "4:3"
    assert controller.size == (80, 24)


def test_modifiers_do_not_stick_between_textual_keys() -> None:
    controller, buffer, _ = make_controller("hello")

    controller.handle_textual_key("ctrl+a")
    assert buffer.selected_text == "hello"

    controller.handle_textual_key("x", character="x")
    assert buffer.text == "x"
    assert controller.translator.modifiers.any is False


def test_unchanged_model_requests_no_redraw() -> None:
    controller, _, _ = make_controller("abc")
    controller.flush_redraw()

    controller.handle_textual_key("right")

    assert controller.redraw_pending is False


def test_controller_logs_keys_and_focus() -> None:
    controller, _, recorder = make_controller()

    controller.handle_textual_key("ctrl+left")
    controller.set_focus(False)

    assert recorder.logs[0].startswith("key -> ")
    assert "key='ctrl+left'" in recorder.logs[0]
    assert any(line.startswith("command -> ") for line in recorder.logs)
    assert recorder.logs[-1].startswith("focus -> ")
    assert controller.focused is False


def test_raw_key_events_are_dispatched() -> None:
    controller, buffer, _ = make_controller("ab")

    commands = controller.handle_key_events(
        [
            KeyEvent.press(NamedKey.SHIFT),
            KeyEvent.press(NamedKey.HOME),
            KeyEvent.release(NamedKey.HOME),
            KeyEvent.release(NamedKey.SHIFT),
            KeyEvent.press(NamedKey.DELETE),
        ]
    )

    assert len(commands) == 2
    assert buffer.text == ""
