"""Textual host: key normalisation, controller and application."""

from .controller import EditorController, PanelHooks
from .keys import textual_key_events

__all__ = ["EditorController", "PanelHooks", "textual_key_events"]
