import pytest

from code_blocks import LineKind
from line_renderer import (
    CODE_BLOCK_INDENT,
    FormattingRunState,
    header_prefix,
    layout_line,
    suppressed_width,
)


def _visible(layout):
    return "".join(c.char for c in layout.cells)


def test_bold_scenario():
    text = "Bold **text** end"
    layout = layout_line(text)
    assert _visible(layout) == "Bold text end"
    bold = "".join(c.char for c in layout.cells if c.style.bold)
    assert bold == "text"
    assert suppressed_width(text, 18) == 4
    assert layout.visual_col(18) == 14
    assert layout.visual_col(len(text)) == 13


def test_suppression_is_prefix_count_of_markers():
    layout = layout_line("a **b** *c*")
    assert [layout.suppressed_width(c) for c in range(len(layout.text) + 1)] == [
        0, 0, 0, 1, 2, 2, 3, 4, 4, 5, 5, 6,
    ]


@pytest.mark.parametrize(
    "text",
    [
        "plain text",
        "**bold** and *it*",
        "# Header *x*",
        "esc \\* \\\\ \\` done",
        "`code **not bold**` after",
        "*** mixed ***",
    ],
)
def test_visual_col_is_monotonic(text):
    layout = layout_line(text)
    cols = [layout.visual_col(c) for c in range(len(text) + 1)]
    assert all(b >= a for a, b in zip(cols, cols[1:]))
    for c in range(len(text)):
        assert layout.suppressed_width(c + 1) - layout.suppressed_width(c) in (0, 1)


def test_escapes_hide_backslash_only():
    layout = layout_line("a\\*b\\\\c\\`d")
    assert _visible(layout) == "a*b\\c`d"
    assert all(not c.style.italic for c in layout.cells)


def test_backslash_before_other_char_is_literal():
    layout = layout_line("a\\nb")
    assert _visible(layout) == "a\\nb"


@pytest.mark.parametrize(
    "line, expected",
    [
        ("# Title", (1, 2)),
        ("### Three", (3, 4)),
        ("######", (6, 6)),
        ("####### seven", (0, 0)),
        ("#nospace", (0, 0)),
        ("plain", (0, 0)),
    ],
)
def test_header_prefix(line, expected):
    assert header_prefix(line) == expected


def test_header_prefix_is_hidden_and_styled():
    layout = layout_line("## Hi **there**")
    assert _visible(layout) == "Hi there"
    assert all(c.style.header_level == 2 for c in layout.cells)
    assert layout.suppressed_width(3) == 3


def test_inline_code_ignores_emphasis_markers():
    layout = layout_line("`a*b` c")
    assert _visible(layout) == "a*b c"
    code = "".join(c.char for c in layout.cells if c.style.code)
    assert code == "a*b"


def test_escaped_backtick_stays_inside_code_span():
    text = "`a\\`b`"
    layout = layout_line(text)
    assert _visible(layout) == "a`b"
    assert all(c.style.code for c in layout.cells)
    assert [layout.suppressed_width(c) for c in range(len(text) + 1)] == [0, 1, 1, 2, 2, 2, 3]
    assert not layout_line(text + " after").cells[-1].style.code


def test_lone_star_inside_bold_toggles_italic():
    layout = layout_line("**a *b* c**")
    styles = {c.char: c.style for c in layout.cells if c.char != " "}
    assert styles["a"].bold and not styles["a"].italic
    assert styles["b"].bold and styles["b"].italic
    assert styles["c"].bold and not styles["c"].italic


def test_state_does_not_leak_between_lines():
    first = layout_line("**unclosed")
    assert first.cells[-1].style.bold
    second = layout_line("next")
    assert not any(c.style.bold for c in second.cells)


def test_code_block_lines_suppress_nothing_and_indent():
    layout = layout_line("x = **1**", LineKind.FENCED_BODY)
    assert _visible(layout) == "x = **1**"
    assert layout.suppressed_width(9) == 0
    assert layout.indent == CODE_BLOCK_INDENT
    assert all(c.style.code_block for c in layout.cells)


def test_fence_delimiter_renders_as_band():
    layout = layout_line("```python", LineKind.FENCE_DELIMITER)
    assert layout.is_band
    assert list(layout.place(0, 80)) == []


def test_place_respects_scroll_and_width():
    layout = layout_line("**ab**cdef")
    placed = [(x, c.char) for x, c in layout.place(0, 3)]
    assert placed == [(0, "a"), (1, "b"), (2, "c")]
    scrolled = [(x, c.char) for x, c in layout_line("abcd**ef**").place(2, 10)]
    assert scrolled == [(0, "c"), (1, "d"), (2, "e"), (3, "f")]


def test_formatting_run_state_starts_clear():
    style = FormattingRunState().style()
    assert not (style.bold or style.italic or style.code or style.header_level)
