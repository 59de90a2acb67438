"""Unit tests for layout primitives (word wrapping and column arithmetic)."""

import pytest
from reportlab.pdfbase.pdfmetrics import stringWidth

from resumely.contexts.rendering.layout import (
    Region,
    equal_columns,
    split_items,
    split_region,
    split_width,
    wrap_and_draw,
    wrap_text,
)

FONT = "Helvetica"
SIZE = 10

SAMPLE_TEXT = (
    "Designed and shipped a multi-tenant ingestion service that processes "
    "billions of events per day with strict ordering guarantees and replay support"
)


@pytest.mark.unit
def test_wrap_text_empty_input():
    """Empty and whitespace-only text produce no lines."""
    assert wrap_text("", 100, FONT, SIZE) == []
    assert wrap_text("   \n\t ", 100, FONT, SIZE) == []


@pytest.mark.unit
def test_wrap_text_fits_on_one_line():
    assert wrap_text("Hello world", 500, FONT, SIZE) == ["Hello world"]


@pytest.mark.unit
def test_wrap_text_lines_respect_width():
    """Every multi-word line stays within the maximum width."""
    max_width = 150
    lines = wrap_text(SAMPLE_TEXT, max_width, FONT, SIZE)

    assert len(lines) > 1
    for line in lines:
        if " " in line:
            assert stringWidth(line, FONT, SIZE) <= max_width


@pytest.mark.unit
def test_wrap_text_preserves_words_in_order():
    lines = wrap_text(SAMPLE_TEXT, 120, FONT, SIZE)
    assert " ".join(lines).split() == SAMPLE_TEXT.split()


@pytest.mark.unit
def test_wrap_text_collapses_whitespace():
    assert wrap_text("  spaced \n out\ttext ", 500, FONT, SIZE) == ["spaced out text"]


@pytest.mark.unit
def test_wrap_text_line_count_never_grows_with_width():
    """Wrapping at a wider width never produces more lines."""
    widths = [30, 60, 90, 120, 180, 250, 400, 1000]
    counts = [len(wrap_text(SAMPLE_TEXT, width, FONT, SIZE)) for width in widths]

    for narrower, wider in zip(counts, counts[1:]):
        assert wider <= narrower


@pytest.mark.unit
def test_wrap_text_overlong_word_on_its_own_line():
    """A word wider than max_width is placed alone and never split."""
    long_word = "Supercalifragilisticexpialidocious"
    max_width = stringWidth(long_word, FONT, SIZE) / 2

    lines = wrap_text(f"a {long_word} b", max_width, FONT, SIZE)

    assert lines == ["a", long_word, "b"]


@pytest.mark.unit
def test_wrap_text_overlong_first_word():
    long_word = "Antidisestablishmentarianism"
    lines = wrap_text(long_word, 10, FONT, SIZE)
    assert lines == [long_word]


@pytest.mark.unit
def test_wrap_and_draw_empty_text_is_noop(recording_canvas):
    next_y = wrap_and_draw(recording_canvas, "", 50, 700, 200, SIZE, FONT)

    assert next_y == 700
    assert recording_canvas.strings == []


@pytest.mark.unit
def test_wrap_and_draw_advances_cursor_per_line(recording_canvas):
    """Each drawn line moves the cursor down by font size plus line gap."""
    expected_lines = wrap_text(SAMPLE_TEXT, 150, FONT, SIZE)

    next_y = wrap_and_draw(recording_canvas, SAMPLE_TEXT, 50, 700, 150, SIZE, FONT, line_gap=4)

    assert recording_canvas.texts() == expected_lines
    assert next_y == 700 - len(expected_lines) * (SIZE + 4)
    ys = [y for _, y, _ in recording_canvas.strings]
    assert ys == [700 - i * (SIZE + 4) for i in range(len(expected_lines))]
    assert all(x == 50 for x, _, _ in recording_canvas.strings)


@pytest.mark.unit
def test_wrap_and_draw_default_line_gap(recording_canvas):
    next_y = wrap_and_draw(recording_canvas, "one line", 50, 700, 500, SIZE, FONT)
    assert next_y == 700 - (SIZE + 2)


@pytest.mark.unit
def test_split_items_first_half_takes_ceiling():
    assert split_items(["a", "b", "c", "d", "e"]) == [["a", "b", "c"], ["d", "e"]]
    assert split_items(["a", "b", "c", "d"]) == [["a", "b"], ["c", "d"]]
    assert split_items(["a"]) == [["a"], []]
    assert split_items([]) == [[], []]


@pytest.mark.unit
def test_split_width_and_region():
    first, second = split_width(500, 0.4, gutter=20)
    assert first == pytest.approx(192)
    assert second == pytest.approx(288)

    left, right = split_region(Region(50, 500), 0.4, gutter=20)
    assert left == Region(50, pytest.approx(192))
    assert right.x == pytest.approx(50 + 192 + 20)
    assert right.x + right.width == pytest.approx(550)


@pytest.mark.unit
def test_equal_columns():
    columns = equal_columns(Region(0, 210), 2, gutter=10)

    assert [column.width for column in columns] == [100, 100]
    assert [column.x for column in columns] == [0, 110]


@pytest.mark.unit
def test_region_indent():
    assert Region(50, 400).indent(20) == Region(70, 380)
