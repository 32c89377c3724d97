import curses

from cursor_resolver import PANE_PADDING


def sidebar_width_for(total_cols: int, ratio: float) -> int:
    return max(1, int(total_cols * ratio))


class ScreenLayout:
    def __init__(self, stdscr, sidebar_ratio=0.25):
        self.stdscr = stdscr
        self.sidebar_ratio = sidebar_ratio
        self.H, self.W = stdscr.getmaxyx()

        # layout: sidebar (left), content (right), both full height
        self.sidebar_w = min(sidebar_width_for(self.W, sidebar_ratio), max(1, self.W - 1))
        self.content_w = max(1, self.W - self.sidebar_w)

        self.sidebar_win = curses.newwin(self.H, self.sidebar_w, 0, 0)
        # sidebar must never own cursor
        self.sidebar_win.leaveok(True)
        self.content_win = curses.newwin(self.H, self.content_w, 0, self.sidebar_w)
        self.content_win.keypad(True)

    @property
    def visible_rows(self) -> int:
        return max(1, self.H - 2 * PANE_PADDING)

    @property
    def visible_cols(self) -> int:
        return max(1, self.content_w - 2 * PANE_PADDING)

    def size_changed(self) -> bool:
        return self.stdscr.getmaxyx() != (self.H, self.W)
