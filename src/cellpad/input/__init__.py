"""Keyboard input translation."""

from .translator import InputTranslator

__all__ = ["InputTranslator"]
