import curses

import colors
from code_blocks import classify_lines
from cursor_resolver import PANE_PADDING, resolve_cursor
from line_renderer import layout_line


class ContentPane:
    """Draws the open note with markdown markers hidden."""

    def __init__(self, padding=PANE_PADDING):
        self.padding = padding
        self.cursor_pos = (padding, padding)

    def draw(self, win, editor, title="", status="", active=False):
        win.erase()
        h, w = win.getmaxyx()
        try:
            win.box()
        except curses.error:
            pass

        doc = editor.document
        view = editor.viewport
        kinds = classify_lines(doc.lines)
        text_w = view.visible_cols

        cursor_layout = None
        for screen_i, line_index in enumerate(view.visible_line_range(doc.line_count)):
            y = self.padding + screen_i
            if y >= h - 1:
                break
            layout = layout_line(doc.line(line_index), kinds[line_index])
            if line_index == editor.cursor.row:
                cursor_layout = layout
            self._draw_line(win, y, layout, view.scroll_col, text_w)

        if title:
            self._addnstr(win, 0, 2, f" {title} ", max(0, w - 4), curses.A_BOLD)
        if status:
            self._addnstr(win, h - 1, 2, f" {status} ", max(0, w - 4))

        self.cursor_pos = resolve_cursor(
            doc, kinds, editor.cursor, view, self.padding, layout=cursor_layout
        )
        if active:
            y, x = self.cursor_pos
            try:
                win.move(min(y, h - 1), min(x, w - 1))
            except curses.error:
                pass
        win.refresh()

    def _draw_line(self, win, y, layout, scroll_col, text_w):
        if layout.kind.is_code:
            # code lines paint a band across the whole text area
            self._addnstr(win, y, self.padding, " " * text_w, text_w, colors.code_attr())
        for x, cell in layout.place(scroll_col, text_w):
            self._addnstr(win, y, self.padding + x, cell.char, 1, colors.style_attr(cell.style))

    @staticmethod
    def _addnstr(win, y, x, text, n, attr=0):
        if n <= 0:
            return
        try:
            win.addnstr(y, x, text, n, attr)
        except curses.error:
            pass
