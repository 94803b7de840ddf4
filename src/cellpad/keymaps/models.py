"""Dataclasses describing key events, modifier state and editing commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class NamedKey(str, Enum):
    """Non-character key identities a platform may report."""

    CTRL = "ctrl"
    ALT = "alt"
    SHIFT = "shift"

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    PAGE_UP = "pageup"
    PAGE_DOWN = "pagedown"

    BACKSPACE = "backspace"
    DELETE = "delete"
    ENTER = "enter"
    TAB = "tab"
    ESCAPE = "escape"
    SPACE = "space"
    COPY = "copy"
    CUT = "cut"
    PASTE = "paste"

    F1 = "f1"
    F2 = "f2"
    F3 = "f3"
    F4 = "f4"
    F5 = "f5"
    F6 = "f6"
    F7 = "f7"
    F8 = "f8"
    F9 = "f9"
    F10 = "f10"
    F11 = "f11"
    F12 = "f12"
    F13 = "f13"
    F14 = "f14"
    F15 = "f15"
    F16 = "f16"
    F17 = "f17"
    F18 = "f18"
    F19 = "f19"
    F20 = "f20"
    F21 = "f21"
    F22 = "f22"
    F23 = "f23"
    F24 = "f24"
    F25 = "f25"
    F26 = "f26"
    F27 = "f27"
    F28 = "f28"
    F29 = "f29"
    F30 = "f30"
    F31 = "f31"
    F32 = "f32"
    F33 = "f33"
    F34 = "f34"
    F35 = "f35"

    # Reported by platforms but carrying no editing meaning.
    INSERT = "insert"
    CAPS_LOCK = "capslock"
    NUM_LOCK = "numlock"
    SCROLL_LOCK = "scrolllock"
    PRINT_SCREEN = "printscreen"
    PAUSE = "pause"
    SUPER = "super"
    MENU = "menu"
    MEDIA_PLAY_PAUSE = "mediaplaypause"
    MEDIA_STOP = "mediastop"
    MEDIA_NEXT = "medianext"
    MEDIA_PREVIOUS = "mediaprevious"
    VOLUME_UP = "volumeup"
    VOLUME_DOWN = "volumedown"
    VOLUME_MUTE = "volumemute"

    @classmethod
    def lookup(cls, name: str) -> Optional["NamedKey"]:
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None


MODIFIER_KEYS: frozenset[NamedKey] = frozenset(
    {NamedKey.CTRL, NamedKey.ALT, NamedKey.SHIFT}
)

KeyIdentity = Union[NamedKey, str]


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """A single key transition delivered by the platform layer.

    ``key`` is either a :class:`NamedKey` or the text the key produced.
    """

    key: KeyIdentity
    pressed: bool = True

    @classmethod
    def press(cls, key: KeyIdentity) -> "KeyEvent":
        return cls(key, True)

    @classmethod
    def release(cls, key: KeyIdentity) -> "KeyEvent":
        return cls(key, False)

    @property
    def is_modifier(self) -> bool:
        return isinstance(self.key, NamedKey) and self.key in MODIFIER_KEYS


@dataclass(frozen=True, slots=True)
class Modifiers:
    """Immutable ctrl/alt/shift snapshot attached to a command."""

    ctrl: bool = False
    alt: bool = False
    shift: bool = False

    @property
    def any(self) -> bool:
        return self.ctrl or self.alt or self.shift

    @property
    def names(self) -> tuple[str, ...]:
        flags = (("ctrl", self.ctrl), ("alt", self.alt), ("shift", self.shift))
        return tuple(name for name, held in flags if held)


@dataclass(slots=True)
class ModifierState:
    """Held state of the three tracked modifier keys."""

    ctrl: bool = False
    alt: bool = False
    shift: bool = False

    def update(self, key: NamedKey, pressed: bool) -> None:
        if key is NamedKey.CTRL:
            self.ctrl = pressed
        elif key is NamedKey.ALT:
            self.alt = pressed
        elif key is NamedKey.SHIFT:
            self.shift = pressed
        else:
            raise ValueError(f"'{key.value}' is not a tracked modifier")

    def snapshot(self) -> Modifiers:
        return Modifiers(ctrl=self.ctrl, alt=self.alt, shift=self.shift)


class CommandKind(str, Enum):
    MOVE_CURSOR = "move_cursor"
    INSERT_CHAR = "insert_char"
    BACKSPACE = "backspace"
    DELETE = "delete"
    ENTER = "enter"
    TAB = "tab"
    ESCAPE = "escape"
    CUT = "cut"
    COPY = "copy"
    PASTE = "paste"
    FUNCTION = "function"
    NOOP = "noop"


class Direction(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"


@dataclass(frozen=True, slots=True)
class EditingCommand:
    """Abstract editing verb handed to an editor model."""

    kind: CommandKind
    modifiers: Modifiers = Modifiers()
    direction: Optional[Direction] = None
    char: Optional[str] = None
    number: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind is CommandKind.MOVE_CURSOR and self.direction is None:
            raise ValueError("MOVE_CURSOR requires a direction")
        if self.kind is CommandKind.INSERT_CHAR and not self.char:
            raise ValueError("INSERT_CHAR requires a character")
        if self.kind is CommandKind.FUNCTION and not self.number:
            raise ValueError("FUNCTION requires a key number")

    @classmethod
    def move(
        cls, direction: Direction, modifiers: Modifiers = Modifiers()
    ) -> "EditingCommand":
        return cls(CommandKind.MOVE_CURSOR, modifiers, direction=direction)

    @classmethod
    def insert(cls, char: str, modifiers: Modifiers = Modifiers()) -> "EditingCommand":
        return cls(CommandKind.INSERT_CHAR, modifiers, char=char)

    def with_modifiers(self, modifiers: Modifiers) -> "EditingCommand":
        return EditingCommand(
            self.kind,
            modifiers,
            direction=self.direction,
            char=self.char,
            number=self.number,
        )

    @property
    def label(self) -> str:
        if self.direction is not None:
            detail = self.direction.value
        elif self.char is not None:
            detail = repr(self.char)
        elif self.number is not None:
            detail = str(self.number)
        else:
            detail = ""
        mods = "+".join(self.modifiers.names)
        parts = [self.kind.value] + [part for part in (detail, mods) if part]
        return ":".join(parts)


__all__ = [
    "NamedKey",
    "MODIFIER_KEYS",
    "KeyIdentity",
    "KeyEvent",
    "Modifiers",
    "ModifierState",
    "CommandKind",
    "Direction",
    "EditingCommand",
]
