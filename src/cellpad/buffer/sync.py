"""Boundary types shared by every editor model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from cellpad.keymaps import EditingCommand
from cellpad.render import SelectionRange


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot describing what the renderer should draw."""

    text: str
    selection: SelectionRange
    attributes: dict[str, str] = field(default_factory=dict)


class EditorModel(Protocol):
    """Capability surface the controller needs from an editor model."""

    def mirror(self) -> BufferMirror:
        """Return the current text and the (anchor, cursor) cell selection."""
        ...

    def apply(self, command: EditingCommand) -> bool:
        """Apply ``command``; return whether text or selection changed."""
        ...


class BufferValidationError(RuntimeError):
    """Raised when a caller hands the buffer an unusable position."""

    def __init__(self, message: str, *, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index


__all__ = ["BufferMirror", "EditorModel", "BufferValidationError"]
