import curses
from typing import Callable, List, Optional

from keybindings import KeyMap

EMPTY_SUFFIX = " (Field cannot be empty)"
INPUT_LABEL = "Input: "


class TextPrompt:
    """Centered modal that collects one or more single-line answers."""

    def __init__(self, set_status_cb: Optional[Callable[[str, int], None]] = None, keys=None):
        self._set_status = set_status_cb or (lambda *_: None)
        self.keys = keys or KeyMap()
        self.active = False
        self.fields: List[str] = []
        self.values: List[str] = []
        self.allow_empty = False
        self.on_complete: Optional[Callable[[List[str]], None]] = None
        self.title = ""
        self.buffer = ""
        self.cursor = 0
        self.hscroll = 0

    # ---------- public API ----------
    def start(self, fields, on_complete, allow_empty=False):
        if isinstance(fields, str):
            fields = [fields]
        self.fields = list(fields)
        self.values = []
        self.on_complete = on_complete
        self.allow_empty = allow_empty
        self.active = bool(self.fields)
        self._begin_field()

    def cancel(self):
        self._reset()
        self._set_status("Canceled", 2)

    def handle_key(self, ch):
        if not self.active:
            return

        if ch in (10, 13, curses.KEY_ENTER):
            self._handle_enter()
            return

        if self.keys.matches("cancel", ch):
            self.cancel()
            return

        if ch in (curses.KEY_BACKSPACE, 127, 8):
            if self.cursor > 0:
                self.buffer = self.buffer[: self.cursor - 1] + self.buffer[self.cursor :]
                self.cursor -= 1
            return

        if ch == curses.KEY_LEFT:
            self.cursor = max(0, self.cursor - 1)
            return

        if ch == curses.KEY_RIGHT:
            self.cursor = min(len(self.buffer), self.cursor + 1)
            return

        if ch == curses.KEY_HOME:
            self.cursor = 0
            return

        if ch == curses.KEY_END:
            self.cursor = len(self.buffer)
            return

        if 32 <= ch <= 126:
            self.buffer = self.buffer[: self.cursor] + chr(ch) + self.buffer[self.cursor :]
            self.cursor += 1

    # ---------- internals ----------
    def _begin_field(self):
        self.title = self.fields[len(self.values)] if self.active else ""
        self.buffer = ""
        self.cursor = 0
        self.hscroll = 0

    def _handle_enter(self):
        value = self.buffer.strip()
        if not value and not self.allow_empty:
            field = self.fields[len(self.values)]
            self.title = field + EMPTY_SUFFIX
            return
        self.values.append(value)
        if len(self.values) < len(self.fields):
            self._begin_field()
            return
        callback, values = self.on_complete, list(self.values)
        self._reset()
        if callback is not None:
            callback(values)

    def _reset(self):
        self.active = False
        self.fields = []
        self.values = []
        self.on_complete = None
        self.title = ""
        self.buffer = ""
        self.cursor = 0
        self.hscroll = 0

    # ---------- rendering ----------
    def draw(self, stdscr):
        if not self.active:
            return
        H, W = stdscr.getmaxyx()
        height = 4
        width = max(len(INPUT_LABEL) + 6, W // 2)
        width = min(width, W)
        y = max(0, (H - height) // 2)
        x = max(0, (W - width) // 2)
        try:
            win = curses.newwin(height, width, y, x)
        except curses.error:
            return

        text_w = max(1, width - len(INPUT_LABEL) - 5)
        if self.cursor < self.hscroll:
            self.hscroll = self.cursor
        elif self.cursor > self.hscroll + text_w:
            self.hscroll = self.cursor - text_w
        visible = self.buffer[self.hscroll : self.hscroll + text_w]

        try:
            win.erase()
            win.box()
            win.addnstr(1, 2, self.title, max(1, width - 4))
            win.addnstr(2, 2, INPUT_LABEL, len(INPUT_LABEL))
            win.addnstr(2, 2 + len(INPUT_LABEL), visible, text_w)
            win.move(2, 2 + len(INPUT_LABEL) + (self.cursor - self.hscroll))
        except curses.error:
            pass
        win.refresh()
