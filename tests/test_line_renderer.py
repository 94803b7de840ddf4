from __future__ import annotations

import pytest

from cellpad.render import (
    SelectionRange,
    StyledLine,
    StyledRun,
    cell_width,
    graphemes,
    render_lines,
    to_rich_text,
)

SAMPLES = (
    "abc",
    "",
    "It even supports emojis! 😊🦀🐁",
    "e\u0301cole",
    "日本語",
    "👨‍👩‍👧 family",
)


def runs(line: StyledLine) -> list[tuple[str, bool]]:
    return [(run.text, run.reversed) for run in line.runs]


def line_cells(text: str) -> int:
    return sum(cell_width(cluster) for cluster in graphemes(text))


def cluster_starts(text: str) -> list[int]:
    starts = []
    cells = 0
    for cluster in graphemes(text) + [" "]:
        starts.append(cells)
        cells += cell_width(cluster)
    return starts


def test_caret_inside_line() -> None:
    (line,) = render_lines("abc", (1, 1))

    assert runs(line) == [("a", False), ("b", True), ("c ", False)]


def test_selection_spans_lines_through_shared_counter() -> None:
    first, second = render_lines("ab\ncd", (2, 4))

    assert runs(first) == [("ab", False), (" ", True)]
    assert runs(second) == [("c", True), ("d ", False)]


def test_inverted_selection_is_normalized() -> None:
    assert render_lines("hello", (4, 1)) == render_lines("hello", (1, 4))
    (line,) = render_lines("hello", SelectionRange(4, 1))

    assert runs(line) == [("h", False), ("ell", True), ("o ", False)]


def test_caret_at_end_of_line_highlights_trailing_cell() -> None:
    (line,) = render_lines("abc", (3, 3))

    assert runs(line) == [("abc", False), (" ", True)]


def test_empty_line_produces_one_run() -> None:
    (line,) = render_lines("", (5, 9))

    assert runs(line) == [(" ", False)]


def test_empty_line_with_caret() -> None:
    first, second, third = render_lines("a\n\nb", (2, 2))

    assert runs(first) == [("a ", False)]
    assert runs(second) == [(" ", True)]
    assert runs(third) == [("b ", False)]


def test_fully_selected_line() -> None:
    (line,) = render_lines("abc", (0, 4))

    assert runs(line) == [("abc ", True)]


def test_selection_beyond_text_never_matches() -> None:
    lines = render_lines("ab\ncd", (40, 50))

    assert all(not line.reversed_runs for line in lines)


def test_wide_glyph_occupies_two_cells() -> None:
    (line,) = render_lines("a😊b", (1, 3))

    assert runs(line) == [("a", False), ("😊", True), ("b ", False)]


def test_caret_inside_wide_glyph_highlights_nothing() -> None:
    (line,) = render_lines("a\U0001F60Ab", (2, 2))

    assert runs(line) == [("a\U0001F60Ab ", False)]


def test_combining_mark_stays_in_its_cluster() -> None:
    (line,) = render_lines("e\u0301x", (0, 0))

    assert runs(line) == [("e\u0301", True), ("x ", False)]


def test_accepts_sequence_of_lines() -> None:
    assert render_lines(["ab", "cd"], (2, 4)) == render_lines("ab\ncd", (2, 4))


@pytest.mark.parametrize("text", SAMPLES)
def test_caret_highlights_exactly_one_cluster(text: str) -> None:
    for k in cluster_starts(text):
        (line,) = render_lines(text, (k, k))
        reversed_runs = line.reversed_runs

        assert len(reversed_runs) == 1
        assert len(graphemes(reversed_runs[0].text)) == 1


@pytest.mark.parametrize("text", SAMPLES)
def test_width_accounting(text: str) -> None:
    (line,) = render_lines(text, (1, 3))

    assert line.cells == line_cells(text) + 1
    assert line.plain == text + " "


def test_rendering_is_idempotent() -> None:
    text = "\n".join(SAMPLES)

    assert render_lines(text, (3, 17)) == render_lines(text, (3, 17))


def test_runs_never_empty() -> None:
    for line in render_lines("\n".join(SAMPLES), (0, 200)):
        assert all(run.text for run in line.runs)


def test_negative_offsets_rejected() -> None:
    with pytest.raises(ValueError):
        SelectionRange(-1, 2)


def test_rich_text_marks_reversed_runs() -> None:
    text = to_rich_text(render_lines("ab\ncd", (2, 4)))

    assert text.plain == "ab \ncd "
    reversed_spans = [
        text.plain[span.start : span.end]
        for span in text.spans
        if getattr(span.style, "reverse", False)
    ]
    assert reversed_spans == [" ", "c"]


def test_styled_run_cells_use_floor_of_one() -> None:
    assert StyledRun("\u0301").cells == 1
    assert StyledRun("😊a").cells == 3
