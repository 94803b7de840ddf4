"""Static lookup table from named keys to editing command templates."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional

from cellpad.runtime.telemetry import span

from .models import MODIFIER_KEYS, EditingCommand, Modifiers, NamedKey


@dataclass(frozen=True, slots=True)
class KeyBinding:
    """Associates a named key with the command it produces on press."""

    key: NamedKey
    command: EditingCommand
    description: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.key, NamedKey):
            raise TypeError("KeyBinding key must be a NamedKey")
        if self.command.modifiers != Modifiers():
            raise ValueError("command templates must not carry modifiers")


class KeymapConflictError(RuntimeError):
    """Raised when a table declaration binds a key it cannot bind."""

    def __init__(self, key: NamedKey, reason: str) -> None:
        super().__init__(f"Key '{key.value}' {reason}")
        self.key = key
        self.reason = reason


class KeyTable:
    """Immutable named-key table; lookups never fall through to other logic."""

    def __init__(
        self, bindings: Iterable[KeyBinding], *, logger_name: str | None = None
    ) -> None:
        self._logger_name = logger_name
        entries: Dict[NamedKey, KeyBinding] = {}
        with span(
            "keymaps::build_table",
            logger_name=logger_name,
            component="keymaps",
        ) as handle:
            for binding in bindings:
                _check_binding(binding, entries)
                entries[binding.key] = binding
            handle.add_metadata("binding_count", len(entries))
        self._entries: Mapping[NamedKey, KeyBinding] = MappingProxyType(entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[NamedKey]:
        return iter(self._entries)

    def lookup(self, key: NamedKey) -> Optional[KeyBinding]:
        return self._entries.get(key)

    def command_for(
        self, key: NamedKey, modifiers: Modifiers
    ) -> Optional[EditingCommand]:
        binding = self._entries.get(key)
        if binding is None:
            return None
        return binding.command.with_modifiers(modifiers)

    def with_overrides(self, overrides: Iterable[KeyBinding]) -> "KeyTable":
        """Return a new table where ``overrides`` replace existing entries."""

        replaced: Dict[NamedKey, KeyBinding] = {}
        for binding in overrides:
            _check_binding(binding, replaced)
            replaced[binding.key] = binding
        merged = {**self._entries, **replaced}
        return KeyTable(merged.values(), logger_name=self._logger_name)


def _check_binding(binding: KeyBinding, seen: Mapping[NamedKey, KeyBinding]) -> None:
    if binding.key in MODIFIER_KEYS:
        raise KeymapConflictError(binding.key, "is a tracked modifier")
    if binding.key in seen:
        raise KeymapConflictError(binding.key, "is bound more than once")


__all__ = ["KeyBinding", "KeyTable", "KeymapConflictError"]
