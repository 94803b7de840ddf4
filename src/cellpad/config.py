"""Editor configuration resolved from defaults, environment and CLI flags."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Mapping, Optional

ENV_PREFIX = "CELLPAD_"

BORDER_STYLES: frozenset[str] = frozenset(
    {
        "ascii",
        "blank",
        "dashed",
        "double",
        "heavy",
        "hidden",
        "hkey",
        "inner",
        "none",
        "outer",
        "panel",
        "round",
        "solid",
        "tall",
        "thick",
        "vkey",
        "wide",
    }
)
MODEL_KINDS: frozenset[str] = frozenset({"buffer", "textarea"})

DEFAULT_TEXT = """This is a simple text editor drawn inside a terminal panel.

It even supports emojis! 😊🦀🐁
Select with shift + arrows, copy with ctrl+c and paste with ctrl+v."""


class ConfigError(ValueError):
    """Raised when a configuration value cannot be used."""

    def __init__(self, field_name: str, value: object, reason: str) -> None:
        super().__init__(f"Invalid {field_name}={value!r}: {reason}")
        self.field_name = field_name
        self.value = value


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Static settings for the editor panel."""

    title: str = "Textual Text Editor"
    border: str = "round"
    model: str = "buffer"
    initial_text: str = DEFAULT_TEXT
    tab_width: int = 4
    page_lines: int = 10

    def __post_init__(self) -> None:
        if self.border not in BORDER_STYLES:
            raise ConfigError("border", self.border, "unknown border style")
        if self.model not in MODEL_KINDS:
            raise ConfigError("model", self.model, "expected 'buffer' or 'textarea'")
        if self.tab_width <= 0:
            raise ConfigError("tab_width", self.tab_width, "must be positive")
        if self.page_lines <= 0:
            raise ConfigError("page_lines", self.page_lines, "must be positive")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            title=env.get(f"{ENV_PREFIX}TITLE", defaults.title),
            border=env.get(f"{ENV_PREFIX}BORDER", defaults.border).lower(),
            model=env.get(f"{ENV_PREFIX}MODEL", defaults.model).lower(),
            initial_text=defaults.initial_text,
            tab_width=_env_int(env, "TAB_WIDTH", defaults.tab_width),
            page_lines=_env_int(env, "PAGE_LINES", defaults.page_lines),
        )

    def replace(self, **changes: object) -> "EditorConfig":
        """Return a copy with the non-``None`` entries of ``changes`` applied."""

        known = {item.name for item in fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise TypeError(f"Unknown config fields: {sorted(unknown)}")
        applied = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **applied)


def _env_int(env: Mapping[str, str], key: str, fallback: int) -> int:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


__all__ = [
    "BORDER_STYLES",
    "DEFAULT_TEXT",
    "MODEL_KINDS",
    "ConfigError",
    "EditorConfig",
]
