"""Editor model delegating storage and cursor logic to Textual's ``TextArea``.

``TextArea`` steps one code point at a time, so horizontal movement and
single-character deletes are computed on grapheme boundaries here and
only the resulting locations are handed to the widget.
"""

from __future__ import annotations

from bisect import bisect_left
from typing import Callable, Dict, Optional, Sequence, Tuple

from textual.widgets import TextArea
from textual.widgets.text_area import Selection

from cellpad.buffer import BufferMirror, Clipboard, navigation
from cellpad.keymaps import CommandKind, Direction, EditingCommand
from cellpad.render import SelectionRange
from cellpad.render.width import cell_offset, grapheme_boundaries, text_cells

Location = Tuple[int, int]  # (row, column)


def location_to_index(lines: Sequence[str], location: Location) -> int:
    row, col = location
    return sum(len(line) + 1 for line in lines[:row]) + col


def index_to_location(lines: Sequence[str], index: int) -> Location:
    for row, line in enumerate(lines):
        if index <= len(line):
            return (row, index)
        index -= len(line) + 1
    last = len(lines) - 1
    return (last, len(lines[last]))


class TextAreaModel:
    """Applies editing commands to a (usually hidden) ``TextArea`` widget."""

    def __init__(
        self,
        widget: TextArea,
        *,
        clipboard: Optional[Clipboard] = None,
        tab_width: int = 4,
        page_lines: int = 10,
    ) -> None:
        self.widget = widget
        self.clipboard = clipboard or Clipboard()
        self.tab_width = tab_width
        self.page_lines = page_lines
        self._handlers: Dict[CommandKind, Callable[[EditingCommand], None]] = {
            CommandKind.MOVE_CURSOR: self._move,
            CommandKind.INSERT_CHAR: self._insert_char,
            CommandKind.BACKSPACE: self._backspace,
            CommandKind.DELETE: self._delete,
            CommandKind.ENTER: lambda _command: self._type("\n"),
            CommandKind.TAB: self._tab,
            CommandKind.ESCAPE: lambda _command: self._collapse(),
            CommandKind.CUT: lambda _command: self._cut(),
            CommandKind.COPY: lambda _command: self._copy(),
            CommandKind.PASTE: lambda _command: self._type(self.clipboard.paste()),
            CommandKind.FUNCTION: lambda _command: None,
            CommandKind.NOOP: lambda _command: None,
        }
        self._shortcuts: Dict[str, Callable[[], None]] = {
            "a": self._select_all,
            "c": self._copy,
            "x": self._cut,
            "v": lambda: self._type(self.clipboard.paste()),
        }

    @property
    def lines(self) -> list[str]:
        return list(self.widget.document.lines)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def mirror(self) -> BufferMirror:
        lines = self.lines
        text = "\n".join(lines)
        start, end = self.widget.selection
        return BufferMirror(
            text=text,
            selection=SelectionRange(
                cell_offset(text, location_to_index(lines, start)),
                cell_offset(text, location_to_index(lines, end)),
            ),
            attributes={"model": "textarea"},
        )

    def apply(self, command: EditingCommand) -> bool:
        before = (self.widget.text, self.widget.selection)
        self._handlers[command.kind](command)
        return (self.widget.text, self.widget.selection) != before

    def _ordered_selection(self) -> Tuple[Location, Location]:
        start, end = self.widget.selection
        return (start, end) if start <= end else (end, start)

    def _move(self, command: EditingCommand) -> None:
        area = self.widget
        select = command.modifiers.shift
        ctrl = command.modifiers.ctrl
        direction = command.direction

        if direction in (Direction.LEFT, Direction.RIGHT) and not select:
            start, end = self._ordered_selection()
            if start != end:
                area.move_cursor(start if direction is Direction.LEFT else end)
                return

        if direction is Direction.LEFT:
            step = navigation.word_left if ctrl else navigation.previous_boundary
            self._move_to(step(self.text, self._cursor_index()), select)
        elif direction is Direction.RIGHT:
            step = navigation.word_right if ctrl else navigation.next_boundary
            self._move_to(step(self.text, self._cursor_index()), select)
        elif direction is Direction.UP:
            area.action_cursor_up(select)
            self._snap_cursor(select)
        elif direction is Direction.DOWN:
            area.action_cursor_down(select)
            self._snap_cursor(select)
        elif direction is Direction.HOME:
            if ctrl:
                area.move_cursor((0, 0), select=select)
            else:
                area.action_cursor_line_start(select)
        elif direction is Direction.END:
            if ctrl:
                area.move_cursor(area.document.end, select=select)
            else:
                area.action_cursor_line_end(select)
        elif direction is Direction.PAGE_UP:
            for _ in range(self.page_lines):
                area.action_cursor_up(select)
            self._snap_cursor(select)
        elif direction is Direction.PAGE_DOWN:
            for _ in range(self.page_lines):
                area.action_cursor_down(select)
            self._snap_cursor(select)

    def _cursor_index(self) -> int:
        return location_to_index(self.lines, self.widget.selection.end)

    def _move_to(self, index: int, select: bool) -> None:
        self.widget.move_cursor(index_to_location(self.lines, index), select=select)

    def _snap_cursor(self, select: bool) -> None:
        """Pull a cursor left inside a grapheme cluster back to its start."""

        index = self._cursor_index()
        bounds = grapheme_boundaries(self.text)
        if index in bounds:
            return
        start = bounds[bisect_left(bounds, index) - 1]
        location = index_to_location(self.lines, start)
        if select:
            self.widget.selection = Selection(self.widget.selection.start, location)
        else:
            self.widget.selection = Selection.cursor(location)

    def _insert_char(self, command: EditingCommand) -> None:
        assert command.char is not None
        if command.modifiers.ctrl:
            shortcut = self._shortcuts.get(command.char.lower())
            if shortcut is not None:
                shortcut()
            return
        self._type(command.char)

    def _backspace(self, command: EditingCommand) -> None:
        if self._delete_selection():
            return
        cursor = self._cursor_index()
        if cursor == 0:
            return
        ctrl = command.modifiers.ctrl
        step = navigation.word_left if ctrl else navigation.previous_boundary
        self._delete_indices(step(self.text, cursor), cursor)

    def _delete(self, command: EditingCommand) -> None:
        if self._delete_selection():
            return
        text = self.text
        cursor = self._cursor_index()
        if cursor == len(text):
            return
        ctrl = command.modifiers.ctrl
        step = navigation.word_right if ctrl else navigation.next_boundary
        self._delete_indices(cursor, step(text, cursor))

    def _delete_indices(self, start: int, end: int) -> None:
        lines = self.lines
        self.widget.delete(
            index_to_location(lines, start),
            index_to_location(lines, end),
            maintain_selection_offset=False,
        )

    def _tab(self, command: EditingCommand) -> None:
        del command
        (row, col), _ = self._ordered_selection()
        column = text_cells(self.lines[row][:col])
        self._type(" " * (self.tab_width - column % self.tab_width))

    def _type(self, text: str) -> None:
        if not text:
            return
        start, end = self._ordered_selection()
        self.widget.replace(text, start, end, maintain_selection_offset=False)

    def _delete_selection(self) -> bool:
        start, end = self._ordered_selection()
        if start == end:
            return False
        self.widget.delete(start, end, maintain_selection_offset=False)
        return True

    def _collapse(self) -> None:
        self.widget.selection = Selection.cursor(self.widget.cursor_location)

    def _select_all(self) -> None:
        self.widget.selection = Selection((0, 0), self.widget.document.end)

    def _copy(self) -> None:
        selected = self.widget.selected_text
        if selected:
            self.clipboard.copy(selected)

    def _cut(self) -> None:
        selected = self.widget.selected_text
        if selected:
            self.clipboard.copy(selected)
            self._delete_selection()


__all__ = ["TextAreaModel", "index_to_location", "location_to_index"]
