"""Grapheme segmentation and display-cell measurement.

A *cell* is one monospaced terminal column. Selection coordinates count
cells from the start of the whole text, where every cluster occupies at
least one cell and each line break occupies exactly one.
"""

from __future__ import annotations

import unicodedata
from functools import lru_cache

import grapheme
import wcwidth as _wcwidth

LINE_BREAK = "\n"


def graphemes(text: str) -> list[str]:
    """Split ``text`` into extended grapheme clusters."""

    return list(grapheme.graphemes(text))


_EMOJI_SYMBOLS = frozenset({0x00A9, 0x00AE, 0x203C, 0x2049, 0x3030, 0x303D, 0x3297, 0x3299})


def _is_emoji_base(cp: int) -> bool:
    # Pictographic planes plus the BMP symbol blocks that take VS16.
    return cp >= 0x1F000 or 0x2100 <= cp <= 0x2BFF or cp in _EMOJI_SYMBOLS


@lru_cache(maxsize=512)
def cluster_width(cluster: str) -> int:
    """Return the terminal display width of a single grapheme cluster.

    Rules:
    1. Control and zero-width clusters (combining marks, format chars) -> 0
    2. Emoji sequences (VS16, ZWJ, skin tones, regional indicators) -> 2,
       only when the cluster starts with an emoji-capable codepoint
    3. Otherwise delegate to wcwidth for the first meaningful codepoint.
    """
    if not cluster:
        return 0

    if len(cluster) == 1:
        cp = ord(cluster)
        if cp < 0x20 or 0x7F <= cp <= 0x9F:
            return 0
        return max(_wcwidth.wcwidth(cluster), 0)

    first = cluster[0]
    if _is_emoji_base(ord(first)):
        if ord(first) >= 0x1F000:
            return 2
        for ch in cluster[1:]:
            cp = ord(ch)
            if cp in (0xFE0F, 0x200D) or 0x1F3FB <= cp <= 0x1F3FF:
                return 2

    category = unicodedata.category(first)
    if category.startswith("M") or category == "Cf":
        return 0
    return max(_wcwidth.wcwidth(first), 0)


def cell_width(cluster: str) -> int:
    """Cells a cluster advances the cursor by; never less than one."""

    return max(1, cluster_width(cluster))


def text_cells(text: str) -> int:
    return sum(cell_width(cluster) for cluster in graphemes(text))


def cell_offset(text: str, index: int) -> int:
    """Cell coordinate of the string position ``index`` within ``text``.

    ``index`` is expected to sit on a grapheme boundary.
    """

    if index <= 0:
        return 0
    return text_cells(text[:index])


def grapheme_boundaries(text: str) -> list[int]:
    """String indices where clusters start, plus ``len(text)``."""

    bounds = [0]
    for cluster in grapheme.graphemes(text):
        bounds.append(bounds[-1] + len(cluster))
    return bounds


def index_at_cell(line: str, column: int) -> int:
    """String index of the last cluster start in ``line`` at or before ``column``."""

    cells = 0
    index = 0
    for cluster in grapheme.graphemes(line):
        width = cell_width(cluster)
        if cells + width > column:
            break
        cells += width
        index += len(cluster)
    return index


__all__ = [
    "LINE_BREAK",
    "graphemes",
    "cluster_width",
    "cell_width",
    "text_cells",
    "cell_offset",
    "grapheme_boundaries",
    "index_at_cell",
]
