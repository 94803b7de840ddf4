"""Editor models, clipboard and cursor navigation."""

from .buffer import BufferDelta, TextBuffer, normalize_newlines
from .clipboard import Clipboard
from .state import BufferState
from .sync import BufferMirror, BufferValidationError, EditorModel
from .validation import ensure_index

__all__ = [
    "BufferDelta",
    "TextBuffer",
    "normalize_newlines",
    "Clipboard",
    "BufferState",
    "BufferMirror",
    "BufferValidationError",
    "EditorModel",
    "ensure_index",
]
