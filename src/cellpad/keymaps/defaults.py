"""Built-in named-key bindings used by the input translator."""

from __future__ import annotations

from typing import Iterable

from .models import CommandKind, Direction, EditingCommand, NamedKey
from .table import KeyBinding, KeyTable

FUNCTION_KEY_COUNT = 35


def _move(key: NamedKey, direction: Direction, description: str) -> KeyBinding:
    return KeyBinding(key, EditingCommand.move(direction), description)


def _verb(key: NamedKey, kind: CommandKind, description: str) -> KeyBinding:
    return KeyBinding(key, EditingCommand(kind), description)


def _function_keys() -> tuple[KeyBinding, ...]:
    return tuple(
        KeyBinding(
            NamedKey(f"f{number}"),
            EditingCommand(CommandKind.FUNCTION, number=number),
            f"Function key F{number}",
        )
        for number in range(1, FUNCTION_KEY_COUNT + 1)
    )


DEFAULT_BINDINGS: tuple[KeyBinding, ...] = (
    _move(NamedKey.LEFT, Direction.LEFT, "Move cursor left"),
    _move(NamedKey.RIGHT, Direction.RIGHT, "Move cursor right"),
    _move(NamedKey.UP, Direction.UP, "Move cursor up"),
    _move(NamedKey.DOWN, Direction.DOWN, "Move cursor down"),
    _move(NamedKey.HOME, Direction.HOME, "Move to line start"),
    _move(NamedKey.END, Direction.END, "Move to line end"),
    _move(NamedKey.PAGE_UP, Direction.PAGE_UP, "Move one page up"),
    _move(NamedKey.PAGE_DOWN, Direction.PAGE_DOWN, "Move one page down"),
    _verb(NamedKey.BACKSPACE, CommandKind.BACKSPACE, "Delete before cursor"),
    _verb(NamedKey.DELETE, CommandKind.DELETE, "Delete after cursor"),
    _verb(NamedKey.ENTER, CommandKind.ENTER, "Insert a line break"),
    _verb(NamedKey.TAB, CommandKind.TAB, "Insert indentation"),
    _verb(NamedKey.ESCAPE, CommandKind.ESCAPE, "Clear the selection"),
    _verb(NamedKey.CUT, CommandKind.CUT, "Cut the selection"),
    _verb(NamedKey.COPY, CommandKind.COPY, "Copy the selection"),
    _verb(NamedKey.PASTE, CommandKind.PASTE, "Paste the clipboard"),
    KeyBinding(NamedKey.SPACE, EditingCommand.insert(" "), "Insert a space"),
) + _function_keys()


def load_default_table(
    *,
    overrides: Iterable[KeyBinding] | None = None,
    logger_name: str | None = None,
) -> KeyTable:
    """Build the default table, optionally replacing some of its entries."""

    table = KeyTable(DEFAULT_BINDINGS, logger_name=logger_name)
    if overrides:
        table = table.with_overrides(overrides)
    return table


__all__ = ["DEFAULT_BINDINGS", "FUNCTION_KEY_COUNT", "load_default_table"]
