"""Adapt styled lines to rich renderables."""

from __future__ import annotations

from typing import Iterable, Optional

from rich.style import Style
from rich.text import Text

from .lines import StyledLine

REVERSED = Style(reverse=True)


def line_to_rich(
    line: StyledLine,
    *,
    style: Optional[Style] = None,
    reverse_style: Style = REVERSED,
) -> Text:
    text = Text(no_wrap=True, end="")
    for run in line.runs:
        text.append(run.text, style=reverse_style if run.reversed else style)
    return text


def to_rich_text(
    lines: Iterable[StyledLine],
    *,
    style: Optional[Style] = None,
    reverse_style: Style = REVERSED,
) -> Text:
    """Join styled lines into one ``Text`` with reverse-video selection."""

    rendered = Text(no_wrap=True, end="")
    for index, line in enumerate(lines):
        if index:
            rendered.append("\n")
        rendered.append_text(
            line_to_rich(line, style=style, reverse_style=reverse_style)
        )
    return rendered


__all__ = ["REVERSED", "line_to_rich", "to_rich_text"]
