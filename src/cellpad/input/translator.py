"""Translate platform key transitions into editing commands."""

from __future__ import annotations

from typing import Iterable, Optional

from cellpad.keymaps import (
    EditingCommand,
    KeyEvent,
    KeyTable,
    Modifiers,
    ModifierState,
    NamedKey,
    load_default_table,
)
from cellpad.runtime import telemetry


class InputTranslator:
    """Tracks held modifiers and emits at most one command per key event.

    Modifier keys only update :class:`ModifierState`. Every other key fires
    on press; releases are ignored. Named keys resolve through a
    :class:`KeyTable`, printable text becomes ``INSERT_CHAR``, and anything
    else is dropped without touching state.
    """

    def __init__(
        self,
        table: Optional[KeyTable] = None,
        *,
        state: Optional[ModifierState] = None,
        logger_name: str = "cellpad.input",
    ) -> None:
        self.table = table or load_default_table()
        self._state = state or ModifierState()
        self.logger = telemetry.get_logger(logger_name)

    @property
    def modifiers(self) -> Modifiers:
        return self._state.snapshot()

    def feed(self, event: KeyEvent) -> Optional[EditingCommand]:
        key = event.key
        if event.is_modifier:
            assert isinstance(key, NamedKey)
            self._state.update(key, event.pressed)
            self.logger.debug(
                "modifier %s %s", key.value, "down" if event.pressed else "up"
            )
            return None

        if not event.pressed:
            return None

        if isinstance(key, NamedKey):
            command = self.table.command_for(key, self._state.snapshot())
        else:
            command = self._character_command(key)

        if command is None:
            self.logger.debug("ignored key %r", key)
            return None
        self.logger.debug("key %r -> %s", key, command.label)
        return command

    def feed_all(self, events: Iterable[KeyEvent]) -> list[EditingCommand]:
        commands: list[EditingCommand] = []
        for event in events:
            command = self.feed(event)
            if command is not None:
                commands.append(command)
        return commands

    def _character_command(self, text: str) -> Optional[EditingCommand]:
        if not text:
            return None
        char = text[0]
        if not char.isprintable():
            return None
        return EditingCommand.insert(char, self._state.snapshot())


__all__ = ["InputTranslator"]
