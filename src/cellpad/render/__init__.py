"""Selection-aware line rendering."""

from .lines import (
    TRAILING_CELL,
    SelectionRange,
    StyledLine,
    StyledRun,
    TextContent,
    render_lines,
    split_lines,
)
from .rich_text import line_to_rich, to_rich_text
from .width import cell_offset, cell_width, cluster_width, graphemes, text_cells

__all__ = [
    "TRAILING_CELL",
    "SelectionRange",
    "StyledLine",
    "StyledRun",
    "TextContent",
    "render_lines",
    "split_lines",
    "line_to_rich",
    "to_rich_text",
    "cell_offset",
    "cell_width",
    "cluster_width",
    "graphemes",
    "text_cells",
]
