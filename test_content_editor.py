import curses

import pytest

from content_editor import ContentEditor
from document_buffer import Document
from viewport import Viewport


def _editor(lines, row=0, col=0):
    ed = ContentEditor(Document(lines), viewport=Viewport(10, 20))
    ed.cursor.move_to(row, col)
    ed.after_edit()
    return ed


def _type(ed, text):
    for ch in text:
        ed.handle_key(ord(ch))


def test_numbered_list_expands_on_space():
    ed = _editor(["1."], 0, 2)
    ed.handle_key(ord(" "))
    assert ed.document.line(0) == "    1. "
    assert ed.cursor.col == 7


def test_multi_digit_numbered_list():
    ed = _editor(["12."], 0, 3)
    ed.handle_key(ord(" "))
    assert ed.document.line(0) == "    12. "
    assert ed.cursor.col == 8


def test_dash_list_expands_on_space():
    ed = _editor(["-"], 0, 1)
    ed.handle_key(ord(" "))
    assert ed.document.line(0) == "    - "
    assert ed.cursor.col == 6


@pytest.mark.parametrize("line", ["a.", "x 1.", "word-"])
def test_space_without_list_marker_is_plain(line):
    ed = _editor([line], 0, len(line))
    ed.handle_key(ord(" "))
    assert ed.document.line(0) == line + " "


def test_typing_printable_chars():
    ed = _editor([""])
    _type(ed, "hi!")
    assert ed.document.lines == ["hi!"]
    assert ed.cursor.col == 3
    assert ed.dirty


def test_bold_inserts_marker_pair_then_steps_over():
    ed = _editor(["ab"], 0, 1)
    ed.handle_key(2)  # Ctrl+B
    assert ed.document.line(0) == "a****b"
    assert ed.cursor.col == 3
    _type(ed, "x")
    ed.handle_key(2)
    assert ed.document.line(0) == "a**x**b"
    assert ed.cursor.col == 6


def test_italic_inserts_single_marker_pair():
    ed = _editor([""])
    ed.handle_key(9)  # Ctrl+I
    assert ed.document.line(0) == "**"
    assert ed.cursor.col == 1
    ed.handle_key(9)
    assert ed.cursor.col == 2


def test_enter_splits_and_backspace_joins():
    ed = _editor(["hello world"], 0, 5)
    ed.handle_key(10)
    assert ed.document.lines == ["hello", " world"]
    assert (ed.cursor.row, ed.cursor.col) == (1, 0)
    ed.handle_key(curses.KEY_BACKSPACE)
    assert ed.document.lines == ["hello world"]
    assert (ed.cursor.row, ed.cursor.col) == (0, 5)


def test_delete_at_end_of_line_joins_next():
    ed = _editor(["ab", "cd"], 0, 2)
    ed.handle_key(curses.KEY_DC)
    assert ed.document.lines == ["abcd"]


def test_backspace_at_document_start_is_noop():
    ed = _editor(["ab"])
    ed.handle_key(127)
    assert ed.document.lines == ["ab"]
    assert not ed.dirty


def test_delete_word_removes_previous_word_and_spaces():
    ed = _editor(["foo bar  "], 0, 9)
    ed.handle_key(8)
    assert ed.document.line(0) == "foo "
    assert ed.cursor.col == 4


def test_word_skips():
    ed = _editor(["one two three"], 0, 0)
    ed.handle_key(28)  # Ctrl+\
    assert ed.cursor.col == 4
    ed.handle_key(28)
    assert ed.cursor.col == 8
    ed.handle_key(29)  # Ctrl+]
    assert ed.cursor.col == 4


def test_left_right_wrap_across_lines():
    ed = _editor(["ab", "cd"], 1, 0)
    ed.handle_key(curses.KEY_LEFT)
    assert (ed.cursor.row, ed.cursor.col) == (0, 2)
    ed.handle_key(curses.KEY_RIGHT)
    assert (ed.cursor.row, ed.cursor.col) == (1, 0)


def test_vertical_move_clamps_column():
    ed = _editor(["long line here", "ab"], 0, 10)
    ed.handle_key(curses.KEY_DOWN)
    assert (ed.cursor.row, ed.cursor.col) == (1, 2)


def test_page_keys_jump_to_document_edges():
    ed = _editor(["a", "b", "last"], 1, 1)
    ed.handle_key(curses.KEY_NPAGE)
    assert (ed.cursor.row, ed.cursor.col) == (2, 4)
    ed.handle_key(curses.KEY_PPAGE)
    assert (ed.cursor.row, ed.cursor.col) == (0, 0)


def test_shift_tab_inserts_indentation():
    ed = _editor(["x"], 0, 0)
    ed.handle_key(curses.KEY_BTAB)
    assert ed.document.line(0) == "    x"


def test_unknown_key_reports_unhandled():
    ed = _editor(["x"])
    assert ed.handle_key(curses.KEY_F5) is False


def test_viewport_follows_cursor():
    ed = _editor([str(i) for i in range(30)])
    ed.handle_key(curses.KEY_NPAGE)
    assert ed.viewport.contains(ed.cursor.row, ed.cursor.col)


def test_load_resets_cursor_and_dirty_flag():
    ed = _editor(["abc"], 0, 3)
    _type(ed, "d")
    ed.load(["new"])
    assert (ed.cursor.row, ed.cursor.col) == (0, 0)
    assert not ed.dirty
