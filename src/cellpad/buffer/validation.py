"""Validation helpers shared across buffer services."""

from __future__ import annotations

from cellpad.render.width import grapheme_boundaries

from .sync import BufferValidationError


def ensure_index(text: str, index: int) -> int:
    if index < 0 or index > len(text):
        raise BufferValidationError("Index out of range", index=index)
    if index not in grapheme_boundaries(text):
        raise BufferValidationError("Index splits a grapheme cluster", index=index)
    return index


__all__ = ["ensure_index"]
