"""Cursor and selection state for the text buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

Span = Tuple[int, int]  # (start, end) string indices


@dataclass(slots=True)
class BufferState:
    """Cursor index plus an optional selection anchor.

    ``goal_column`` remembers the display column across consecutive
    vertical moves so short lines do not pull the cursor left for good.
    """

    cursor: int = 0
    anchor: Optional[int] = None
    goal_column: Optional[int] = None

    @property
    def has_selection(self) -> bool:
        return self.anchor is not None and self.anchor != self.cursor

    def selected_span(self) -> Optional[Span]:
        if not self.has_selection:
            return None
        assert self.anchor is not None
        return (min(self.anchor, self.cursor), max(self.anchor, self.cursor))

    def set_cursor(self, index: int, *, extend: bool = False) -> None:
        if extend:
            if self.anchor is None:
                self.anchor = self.cursor
        else:
            self.anchor = None
        self.cursor = index

    def clear_selection(self) -> None:
        self.anchor = None

    def set_selection(self, anchor: int, cursor: int) -> None:
        self.anchor = anchor
        self.cursor = cursor


__all__ = ["BufferState", "Span"]
