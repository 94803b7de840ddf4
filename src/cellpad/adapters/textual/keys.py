"""Normalize Textual key names into press/release event sequences.

Terminals report a key press with its modifiers folded into the name
(``"ctrl+shift+left"``) and never report releases, so every Textual key
expands into: modifier presses, key press, key release, modifier releases.
"""

from __future__ import annotations

from typing import Dict, Optional

from cellpad.keymaps import KeyEvent, KeyIdentity, NamedKey

MODIFIER_NAMES: Dict[str, NamedKey] = {
    "ctrl": NamedKey.CTRL,
    "control": NamedKey.CTRL,
    "alt": NamedKey.ALT,
    "meta": NamedKey.ALT,
    "option": NamedKey.ALT,
    "shift": NamedKey.SHIFT,
}

KEY_ALIASES: Dict[str, str] = {
    "return": "enter",
    "esc": "escape",
    "page_up": "pageup",
    "page_down": "pagedown",
    "del": "delete",
    "print_screen": "printscreen",
    "caps_lock": "capslock",
}


def key_identity(base: str, character: Optional[str]) -> Optional[KeyIdentity]:
    """Resolve the identity of a single (modifier-free) Textual key."""

    named = NamedKey.lookup(KEY_ALIASES.get(base, base))
    if named is not None:
        return named
    if character and character.isprintable():
        return character
    if len(base) == 1 and base.isprintable():
        return base
    return None


def textual_key_events(key: str, character: Optional[str] = None) -> tuple[KeyEvent, ...]:
    """Expand one Textual key into the transitions a keyboard would produce."""

    *modifier_names, base = key.split("+")
    modifiers: list[NamedKey] = []
    for name in modifier_names:
        modifier = MODIFIER_NAMES.get(name.lower())
        if modifier is not None and modifier not in modifiers:
            modifiers.append(modifier)

    identity = key_identity(base, character)
    if identity is None:
        return ()

    return (
        tuple(KeyEvent.press(modifier) for modifier in modifiers)
        + (KeyEvent.press(identity), KeyEvent.release(identity))
        + tuple(KeyEvent.release(modifier) for modifier in reversed(modifiers))
    )


__all__ = ["KEY_ALIASES", "MODIFIER_NAMES", "key_identity", "textual_key_events"]
