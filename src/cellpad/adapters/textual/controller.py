"""Host-agnostic controller wiring key events, the editor model and repaints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Sequence

from cellpad.buffer import EditorModel
from cellpad.input import InputTranslator
from cellpad.keymaps import EditingCommand, KeyEvent
from cellpad.render import StyledLine, render_lines

from .keys import textual_key_events


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class PanelHooks:
    """Callbacks invoked by the controller to update the host UI."""

    paint: Callable[[Sequence[StyledLine]], None]
    update_status: Callable[[str], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class EditorController:
    """Owns the translator and editor model for one editing session.

    Redraws are requested and later flushed; any number of requests made
    before a flush produce a single paint of the latest state.
    """

    def __init__(
        self,
        model: EditorModel,
        hooks: PanelHooks,
        *,
        translator: Optional[InputTranslator] = None,
    ) -> None:
        self.model = model
        self.hooks = hooks
        self.translator = translator or InputTranslator()
        self.size: tuple[int, int] = (0, 0)
        self.focused = True
        self.paint_count = 0
        self._redraw_pending = False
        self.request_redraw()

    @property
    def redraw_pending(self) -> bool:
        return self._redraw_pending

    def handle_key_event(self, event: KeyEvent) -> Optional[EditingCommand]:
        command = self.translator.feed(event)
        if command is None:
            return None
        changed = self.model.apply(command)
        self._log_state("command ->", command=command.label, changed=changed)
        if changed:
            self.request_redraw()
        return command

    def handle_key_events(self, events: Iterable[KeyEvent]) -> list[EditingCommand]:
        commands: list[EditingCommand] = []
        for event in events:
            command = self.handle_key_event(event)
            if command is not None:
                commands.append(command)
        return commands

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> list[EditingCommand]:
        """Translate a Textual key name into key events and dispatch them."""

        events = textual_key_events(key, character)
        self._log_state("key ->", key=key, events=len(events))
        return self.handle_key_events(events)

    def resize(self, width: int, height: int) -> None:
        self.size = (width, height)
        self._log_state("resize ->", width=width, height=height)
        self.request_redraw()

    def set_focus(self, focused: bool) -> None:
        self.focused = focused
        self._log_state("focus ->", focused=focused)

    def request_redraw(self) -> None:
        self._redraw_pending = True

    def flush_redraw(self) -> bool:
        """Paint if a redraw was requested; return whether a paint happened."""

        if not self._redraw_pending:
            return False
        self._redraw_pending = False
        self.redraw()
        return True

    def redraw(self) -> tuple[StyledLine, ...]:
        mirror = self.model.mirror()
        lines = render_lines(mirror.text, mirror.selection)
        self.paint_count += 1
        self.hooks.paint(lines)
        selection = mirror.selection
        self.hooks.update_status(f"{selection.start}:{selection.end}")
        return lines

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        modifiers = self.translator.modifiers
        return {
            "mods": "+".join(modifiers.names),
            "size": self.size,
        }


__all__ = ["EditorController", "PanelHooks"]
