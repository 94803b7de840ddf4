"""Cursor movement helpers over a flat text string.

Positions are string indices sitting on grapheme boundaries.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right

from cellpad.render.width import LINE_BREAK, grapheme_boundaries, index_at_cell, text_cells


def _is_word(cluster: str) -> bool:
    return cluster[0].isalnum() or cluster[0] == "_"


def line_start(text: str, index: int) -> int:
    return text.rfind(LINE_BREAK, 0, index) + 1


def line_end(text: str, index: int) -> int:
    end = text.find(LINE_BREAK, index)
    return len(text) if end == -1 else end


def line_number(text: str, index: int) -> int:
    return text.count(LINE_BREAK, 0, index)


def column_cells(text: str, index: int) -> int:
    """Display column of ``index`` within its own line."""

    return text_cells(text[line_start(text, index) : index])


def previous_boundary(text: str, index: int) -> int:
    bounds = grapheme_boundaries(text)
    pos = bisect_left(bounds, index)
    return bounds[max(pos - 1, 0)]


def next_boundary(text: str, index: int) -> int:
    bounds = grapheme_boundaries(text)
    pos = bisect_right(bounds, index)
    return bounds[pos] if pos < len(bounds) else len(text)


def word_left(text: str, index: int) -> int:
    bounds = grapheme_boundaries(text)
    pos = bisect_left(bounds, index)
    while pos > 0 and not _is_word(text[bounds[pos - 1] : bounds[pos]]):
        pos -= 1
    while pos > 0 and _is_word(text[bounds[pos - 1] : bounds[pos]]):
        pos -= 1
    return bounds[pos]


def word_right(text: str, index: int) -> int:
    bounds = grapheme_boundaries(text)
    last = len(bounds) - 1
    pos = bisect_left(bounds, index)
    while pos < last and not _is_word(text[bounds[pos] : bounds[pos + 1]]):
        pos += 1
    while pos < last and _is_word(text[bounds[pos] : bounds[pos + 1]]):
        pos += 1
    return bounds[pos]


def vertical(text: str, index: int, delta: int, goal_column: int) -> int:
    """Move ``delta`` lines, landing as close to ``goal_column`` as possible.

    Moving above the first line lands at the start of the text; moving
    below the last line lands at its end.
    """

    lines = text.split(LINE_BREAK)
    row = line_number(text, index)
    target = row + delta
    if target < 0:
        return 0
    if target >= len(lines):
        return len(text)
    start = sum(len(line) + 1 for line in lines[:target])
    return start + index_at_cell(lines[target], goal_column)


__all__ = [
    "line_start",
    "line_end",
    "line_number",
    "column_cells",
    "previous_boundary",
    "next_boundary",
    "word_left",
    "word_right",
    "vertical",
]
