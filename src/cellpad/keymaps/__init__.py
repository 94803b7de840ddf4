"""Key event models and the declarative named-key table."""

from .models import (
    MODIFIER_KEYS,
    CommandKind,
    Direction,
    EditingCommand,
    KeyEvent,
    KeyIdentity,
    Modifiers,
    ModifierState,
    NamedKey,
)
from .table import KeyBinding, KeymapConflictError, KeyTable
from .defaults import DEFAULT_BINDINGS, load_default_table

__all__ = [
    "MODIFIER_KEYS",
    "CommandKind",
    "Direction",
    "EditingCommand",
    "KeyEvent",
    "KeyIdentity",
    "Modifiers",
    "ModifierState",
    "NamedKey",
    "KeyBinding",
    "KeyTable",
    "KeymapConflictError",
    "DEFAULT_BINDINGS",
    "load_default_table",
]
