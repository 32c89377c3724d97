import curses

import colors

TASKS_LABEL = "My Tasks"
CALENDAR_LABEL = "Calendar"
TASKS_Y = 2
CALENDAR_Y = 3
SEPARATOR_Y = 5
FILES_Y = 7


class SidebarPane:
    """Kanban and calendar entries on top, then the note list."""

    def __init__(self):
        self.file_offset = 0

    def row_y(self, index, file_count):
        """Screen row of a sidebar selection index (notes, then kanban, calendar)."""
        if index == file_count:
            return TASKS_Y
        if index == file_count + 1:
            return CALENDAR_Y
        return FILES_Y + index - self.file_offset

    def draw(self, win, files, selected_index, active=False, current=None):
        win.erase()
        h, w = win.getmaxyx()
        try:
            win.box()
        except curses.error:
            pass

        label_w = max(0, w - 4)
        n = len(files)
        highlight = colors.highlight_attr()

        visible_files = max(1, h - FILES_Y - 1)
        if selected_index < n:
            if selected_index < self.file_offset:
                self.file_offset = selected_index
            elif selected_index >= self.file_offset + visible_files:
                self.file_offset = selected_index - visible_files + 1
        self.file_offset = max(0, min(self.file_offset, max(0, n - visible_files)))

        def attr_for(index):
            return highlight if (active and index == selected_index) else 0

        self._addnstr(win, TASKS_Y, 2, TASKS_LABEL, label_w, attr_for(n))
        self._addnstr(win, CALENDAR_Y, 2, CALENDAR_LABEL, label_w, attr_for(n + 1))
        hline = getattr(curses, "ACS_HLINE", ord("-"))
        try:
            win.hline(SEPARATOR_Y, 1, hline, max(0, w - 2))
        except curses.error:
            pass

        for i in range(self.file_offset, min(n, self.file_offset + visible_files)):
            attr = attr_for(i)
            if files[i] == current and not attr:
                attr = curses.A_BOLD
            self._addnstr(win, self.row_y(i, n), 2, files[i], label_w, attr)

        win.refresh()

    @staticmethod
    def _addnstr(win, y, x, text, n, attr=0):
        if n <= 0:
            return
        try:
            win.addnstr(y, x, text, n, attr)
        except curses.error:
            pass
