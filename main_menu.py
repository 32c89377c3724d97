import curses

import colors

BANNER = r"""
    _   __           _   __      __
   / | / /__  ____  / | / /___  / /____
  /  |/ / _ \/ __ \/  |/ / __ \/ __/ _ \
 / /|  /  __/ /_/ / /|  / /_/ / /_/  __/
/_/ |_/\___/\____/_/ |_/\____/\__/\___/
"""

OPTIONS = ("my notes", "exit")
OPEN = "open"
EXIT = "exit"


class MainMenu:
    """Start screen. ``handle_key`` returns OPEN or EXIT once Enter is pressed."""

    def __init__(self):
        self.selected = 0
        self.banner = BANNER.strip("\n").splitlines()

    def handle_key(self, ch):
        if ch in (curses.KEY_UP, ord("k")):
            self.selected = (self.selected - 1) % len(OPTIONS)
        elif ch in (curses.KEY_DOWN, ord("j")):
            self.selected = (self.selected + 1) % len(OPTIONS)
        elif ch in (10, 13, curses.KEY_ENTER):
            return OPEN if self.selected == 0 else EXIT
        return None

    def draw(self, stdscr):
        stdscr.erase()
        h, w = stdscr.getmaxyx()
        banner_w = max(len(line) for line in self.banner)
        top = max(0, (h - 11) // 2 - len(self.banner))
        left = max(0, (w - banner_w) // 2)

        # one header color per banner row
        for i, line in enumerate(self.banner):
            attr = colors.header_attr(min(i + 1, len(colors.HEADER_COLORS)))
            self._addnstr(stdscr, top + i, left, line, w - left, attr)

        row = max(0, (h - 2) // 2)
        highlight = colors.highlight_attr()
        for i, label in enumerate(OPTIONS):
            attr = highlight if i == self.selected else 0
            x = max(0, (w - len(label)) // 2)
            self._addnstr(stdscr, row + i, x, label, w - x, attr)

        stdscr.refresh()

    @staticmethod
    def _addnstr(win, y, x, text, n, attr=0):
        if n <= 0:
            return
        try:
            win.addnstr(y, x, text, n, attr)
        except curses.error:
            pass
