"""Selection-aware conversion of text into styled lines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Union

from .width import LINE_BREAK, cell_width, graphemes

TRAILING_CELL = " "

TextContent = Union[str, Sequence[str]]


@dataclass(frozen=True, slots=True)
class SelectionRange:
    """Half-open cell range; ``start`` may exceed ``end``."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < 0:
            raise ValueError("selection offsets must be non-negative")

    def highlight_bounds(self) -> tuple[int, int]:
        """Ordered bounds, widening a caret to exactly one cell."""

        lo = min(self.start, self.end)
        hi = max(self.start, self.end)
        if lo == hi:
            hi = lo + 1
        return lo, hi


@dataclass(frozen=True, slots=True)
class StyledRun:
    text: str
    reversed: bool = False

    @property
    def cells(self) -> int:
        return sum(cell_width(cluster) for cluster in graphemes(self.text))


@dataclass(frozen=True, slots=True)
class StyledLine:
    runs: tuple[StyledRun, ...]

    @property
    def plain(self) -> str:
        return "".join(run.text for run in self.runs)

    @property
    def cells(self) -> int:
        return sum(run.cells for run in self.runs)

    @property
    def reversed_runs(self) -> tuple[StyledRun, ...]:
        return tuple(run for run in self.runs if run.reversed)


def split_lines(content: TextContent) -> list[str]:
    if isinstance(content, str):
        return content.split(LINE_BREAK)
    return list(content)


def render_lines(
    content: TextContent,
    selection: SelectionRange | tuple[int, int],
) -> tuple[StyledLine, ...]:
    """Build one :class:`StyledLine` per line of ``content``.

    A single cell counter runs across the whole text so that ``selection``
    can be expressed in whole-text coordinates. Every line is followed by
    one synthetic trailing cell, which is where a caret at end of line (or
    on an empty line) becomes visible.
    """

    if not isinstance(selection, SelectionRange):
        selection = SelectionRange(*selection)
    lo, hi = selection.highlight_bounds()

    counter = 0
    rendered: list[StyledLine] = []
    for line in split_lines(content):
        runs: list[StyledRun] = []
        pending: list[str] = []
        inside = False
        for cluster in _cells_of(line):
            member = lo <= counter < hi
            if member != inside and pending:
                runs.append(StyledRun("".join(pending), reversed=inside))
                pending = []
            inside = member
            pending.append(cluster)
            counter += cell_width(cluster)
        runs.append(StyledRun("".join(pending), reversed=inside))
        rendered.append(StyledLine(tuple(runs)))
    return tuple(rendered)


def _cells_of(line: str) -> Iterable[str]:
    yield from graphemes(line)
    yield TRAILING_CELL


__all__ = [
    "SelectionRange",
    "StyledRun",
    "StyledLine",
    "TextContent",
    "TRAILING_CELL",
    "render_lines",
    "split_lines",
]
