"""In-process clipboard shared by the editor models."""

from __future__ import annotations

from typing import Callable, Optional


class Clipboard:
    """Holds the most recently copied text.

    Hosts that can reach a system clipboard pass ``on_copy`` to mirror
    every copy there as well.
    """

    def __init__(self, *, on_copy: Optional[Callable[[str], None]] = None) -> None:
        self._text = ""
        self._on_copy = on_copy

    @property
    def text(self) -> str:
        return self._text

    def copy(self, text: str) -> None:
        self._text = text
        if self._on_copy is not None:
            self._on_copy(text)

    def paste(self) -> str:
        return self._text


__all__ = ["Clipboard"]
