"""Hand-rolled editor model: a flat string with a cursor and an anchor."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from cellpad.keymaps import CommandKind, Direction, EditingCommand
from cellpad.render import SelectionRange
from cellpad.render.width import cell_offset, grapheme_boundaries
from cellpad.runtime import telemetry

from . import navigation
from .clipboard import Clipboard
from .state import BufferState, Span
from .sync import BufferMirror
from .validation import ensure_index

VERTICAL_STEPS: Dict[Direction, int] = {Direction.UP: -1, Direction.DOWN: 1}
PAGE_DIRECTIONS: Dict[Direction, int] = {Direction.PAGE_UP: -1, Direction.PAGE_DOWN: 1}


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


@dataclass(slots=True)
class BufferDelta:
    version: int
    text: str
    cursor: int
    label: str


class TextBuffer:
    """Editor model applying :class:`EditingCommand` values to plain text."""

    def __init__(
        self,
        text: str = "",
        *,
        name: str = "default",
        clipboard: Optional[Clipboard] = None,
        state: Optional[BufferState] = None,
        tab_width: int = 4,
        page_lines: int = 10,
    ) -> None:
        if tab_width <= 0 or page_lines <= 0:
            raise ValueError("tab_width and page_lines must be positive")
        self.name = name
        self.text = normalize_newlines(text)
        self.state = state or BufferState()
        self.clipboard = clipboard or Clipboard()
        self.tab_width = tab_width
        self.page_lines = page_lines
        self.version = 0
        self.logger = telemetry.get_logger("cellpad.buffer")
        self._handlers: Dict[CommandKind, Callable[[EditingCommand], bool]] = {
            CommandKind.MOVE_CURSOR: self._move,
            CommandKind.INSERT_CHAR: self._insert_char,
            CommandKind.BACKSPACE: self._backspace,
            CommandKind.DELETE: self._delete,
            CommandKind.ENTER: lambda _command: self._type("\n"),
            CommandKind.TAB: self._tab,
            CommandKind.ESCAPE: self._escape,
            CommandKind.CUT: lambda _command: self.cut(),
            CommandKind.COPY: lambda _command: self.copy(),
            CommandKind.PASTE: lambda _command: self.paste(),
            CommandKind.FUNCTION: _ignore,
            CommandKind.NOOP: _ignore,
        }
        self._shortcuts: Dict[str, Callable[[], bool]] = {
            "a": self.select_all,
            "c": self.copy,
            "x": self.cut,
            "v": self.paste,
        }

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        name: str = "default",
        clipboard: Optional[Clipboard] = None,
        tab_width: int = 4,
        page_lines: int = 10,
    ) -> "TextBuffer":
        buffer = cls(
            text,
            name=name,
            clipboard=clipboard,
            tab_width=tab_width,
            page_lines=page_lines,
        )
        buffer.state.set_cursor(len(buffer.text))
        return buffer

    @property
    def cursor(self) -> int:
        return self.state.cursor

    @property
    def selected_text(self) -> str:
        span = self.state.selected_span()
        if span is None:
            return ""
        return self.text[span[0] : span[1]]

    def mirror(self) -> BufferMirror:
        anchor = self.state.anchor
        cursor_cells = cell_offset(self.text, self.state.cursor)
        anchor_cells = (
            cursor_cells if anchor is None else cell_offset(self.text, anchor)
        )
        return BufferMirror(
            text=self.text,
            selection=SelectionRange(anchor_cells, cursor_cells),
            attributes={"buffer": self.name, "version": str(self.version)},
        )

    def set_selection(self, anchor: int, cursor: int) -> None:
        self.state.set_selection(
            ensure_index(self.text, anchor), ensure_index(self.text, cursor)
        )
        self.state.goal_column = None

    def set_cursor(self, index: int) -> None:
        self.state.set_cursor(ensure_index(self.text, index))
        self.state.goal_column = None

    def apply(self, command: EditingCommand) -> bool:
        with telemetry.span(
            "buffer::apply",
            component="buffer",
            metadata={"buffer": self.name, "command": command.label},
        ) as handle:
            changed = self._handlers[command.kind](command)
            handle.add_metadata("changed", changed)
        return changed

    # --- text edits ---------------------------------------------------------
    def replace_range(self, start: int, end: int, text: str, *, label: str) -> BufferDelta:
        start = ensure_index(self.text, start)
        end = ensure_index(self.text, end)
        if start > end:
            start, end = end, start
        with telemetry.span(
            f"buffer::{label}",
            component="buffer",
            metadata={"buffer": self.name, "start": start, "end": end},
        ):
            self.text = self.text[:start] + text + self.text[end:]
            self.version += 1
            self.state.set_cursor(self._snap(start + len(text)))
            self.state.goal_column = None
        return BufferDelta(
            version=self.version, text=self.text, cursor=self.state.cursor, label=label
        )

    def insert_text(self, text: str) -> BufferDelta:
        start, end = self._edit_span()
        return self.replace_range(start, end, normalize_newlines(text), label="insert_text")

    def delete_range(self, start: int, end: int) -> BufferDelta:
        return self.replace_range(start, end, "", label="delete_range")

    def select_all(self) -> bool:
        before = (self.state.anchor, self.state.cursor)
        self.state.set_selection(0, len(self.text))
        self.state.goal_column = None
        return before != (0, len(self.text)) and bool(self.text)

    def copy(self) -> bool:
        selected = self.selected_text
        if selected:
            self.clipboard.copy(selected)
        return False

    def cut(self) -> bool:
        span = self.state.selected_span()
        if span is None:
            return False
        self.clipboard.copy(self.text[span[0] : span[1]])
        self.delete_range(*span)
        return True

    def paste(self) -> bool:
        return self._type(self.clipboard.paste())

    # --- command handlers ---------------------------------------------------
    def _move(self, command: EditingCommand) -> bool:
        state = self.state
        before = (state.anchor, state.cursor)
        direction = command.direction
        extend = command.modifiers.shift
        assert direction is not None

        if direction in VERTICAL_STEPS or direction in PAGE_DIRECTIONS:
            if state.goal_column is None:
                state.goal_column = navigation.column_cells(self.text, state.cursor)
            delta = VERTICAL_STEPS.get(direction) or (
                PAGE_DIRECTIONS[direction] * self.page_lines
            )
            target = navigation.vertical(
                self.text, state.cursor, delta, state.goal_column
            )
            state.set_cursor(target, extend=extend)
            return before != (state.anchor, state.cursor)

        state.goal_column = None
        span = state.selected_span()
        if span is not None and not extend and direction in (
            Direction.LEFT,
            Direction.RIGHT,
        ):
            target = span[0] if direction is Direction.LEFT else span[1]
        else:
            target = self._horizontal_target(direction, command.modifiers.ctrl)
        state.set_cursor(target, extend=extend)
        return before != (state.anchor, state.cursor)

    def _horizontal_target(self, direction: Direction, by_word: bool) -> int:
        text, cursor = self.text, self.state.cursor
        if direction is Direction.LEFT:
            if by_word:
                return navigation.word_left(text, cursor)
            return navigation.previous_boundary(text, cursor)
        if direction is Direction.RIGHT:
            if by_word:
                return navigation.word_right(text, cursor)
            return navigation.next_boundary(text, cursor)
        if direction is Direction.HOME:
            return 0 if by_word else navigation.line_start(text, cursor)
        return len(text) if by_word else navigation.line_end(text, cursor)

    def _insert_char(self, command: EditingCommand) -> bool:
        assert command.char is not None
        if command.modifiers.ctrl:
            shortcut = self._shortcuts.get(command.char.lower())
            return shortcut() if shortcut else False
        return self._type(command.char)

    def _backspace(self, command: EditingCommand) -> bool:
        span = self.state.selected_span()
        if span is not None:
            self.delete_range(*span)
            return True
        cursor = self.state.cursor
        if cursor == 0:
            return False
        if command.modifiers.ctrl:
            start = navigation.word_left(self.text, cursor)
        else:
            start = navigation.previous_boundary(self.text, cursor)
        self.delete_range(start, cursor)
        return True

    def _delete(self, command: EditingCommand) -> bool:
        span = self.state.selected_span()
        if span is not None:
            self.delete_range(*span)
            return True
        cursor = self.state.cursor
        if cursor == len(self.text):
            return False
        if command.modifiers.ctrl:
            end = navigation.word_right(self.text, cursor)
        else:
            end = navigation.next_boundary(self.text, cursor)
        self.delete_range(cursor, end)
        return True

    def _tab(self, command: EditingCommand) -> bool:
        del command
        start, _ = self._edit_span()
        column = navigation.column_cells(self.text, start)
        return self._type(" " * (self.tab_width - column % self.tab_width))

    def _escape(self, command: EditingCommand) -> bool:
        del command
        had_selection = self.state.has_selection
        self.state.clear_selection()
        return had_selection

    def _type(self, text: str) -> bool:
        if not text:
            return False
        self.insert_text(text)
        return True

    def _edit_span(self) -> Span:
        span = self.state.selected_span()
        if span is None:
            return (self.state.cursor, self.state.cursor)
        return span

    def _snap(self, index: int) -> int:
        bounds = grapheme_boundaries(self.text)
        return bounds[min(bisect_left(bounds, index), len(bounds) - 1)]


def _ignore(command: EditingCommand) -> bool:
    del command
    return False


__all__ = ["TextBuffer", "BufferDelta", "normalize_newlines"]
