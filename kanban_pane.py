import curses

import colors
from kanban import COLUMN_COUNT, COLUMN_NAMES

HEADER_Y = 2
FIRST_TASK_Y = 4


class KanbanPane:
    """Three fixed columns of task titles."""

    def draw(self, win, store, selection, active=False):
        win.erase()
        h, w = win.getmaxyx()
        try:
            win.box()
        except curses.error:
            pass

        inner_w = max(0, w - 4)
        col_w = max(1, inner_w // COLUMN_COUNT)
        highlight = colors.highlight_attr()
        max_rows = max(0, h - FIRST_TASK_Y - 1)

        for c, name in enumerate(COLUMN_NAMES):
            x = 2 + c * col_w
            tasks = store.column(c)
            self._addnstr(win, HEADER_Y, x, f"{name} ({len(tasks)})", col_w - 1, curses.A_BOLD)
            self._addnstr(win, HEADER_Y + 1, x, "-" * (col_w - 1), col_w - 1)

            offset = 0
            if active and selection.column == c and selection.row >= max_rows > 0:
                offset = selection.row - max_rows + 1
            for r, task in enumerate(tasks[offset : offset + max_rows]):
                row = r + offset
                selected = active and selection.column == c and selection.row == row
                attr = highlight if selected else 0
                self._addnstr(win, FIRST_TASK_Y + r, x, task.title, col_w - 1, attr)

        win.refresh()

    @staticmethod
    def _addnstr(win, y, x, text, n, attr=0):
        if n <= 0:
            return
        try:
            win.addnstr(y, x, text, n, attr)
        except curses.error:
            pass
