import curses
import datetime

import colors
from calendar_events import DAY_WIDTH, WEEKDAY_HEADER, month_cells

TITLE_Y = 2
WEEKDAYS_Y = 3
GRID_Y = 4
EVENTS_GAP = 2


class CalendarPane:
    """Current month grid with today highlighted, then the event list."""

    def __init__(self, today_fn=None):
        self.today_fn = today_fn or datetime.date.today

    def draw(self, win, store, selected_index=-1):
        win.erase()
        h, w = win.getmaxyx()
        try:
            win.box()
        except curses.error:
            pass

        today = self.today_fn()
        self._addnstr(win, TITLE_Y, 2, f"{today.month:02d}/{today.year}", w - 4, curses.A_BOLD)
        self._addnstr(win, WEEKDAYS_Y, 2, WEEKDAY_HEADER, w - 4)

        weeks = 0
        for day, week, weekday in month_cells(today.year, today.month):
            attr = curses.A_REVERSE if day == today.day else 0
            self._addnstr(win, GRID_Y + week, 2 + weekday * DAY_WIDTH, f"{day:2d}", 2, attr)
            weeks = max(weeks, week + 1)

        y = GRID_Y + weeks + EVENTS_GAP
        self._addnstr(win, y, 2, f"Events ({len(store)})", w - 4, curses.A_BOLD)
        y += 1
        highlight = colors.highlight_attr()
        events = store.events
        room = max(0, h - 1 - y)
        offset = 0
        if selected_index >= room > 0:
            offset = selected_index - room + 1
        for i, event in enumerate(events[offset : offset + room]):
            idx = i + offset
            attr = highlight if idx == selected_index else 0
            text = event.summary()
            if event.description:
                text += f" - {event.description}"
            self._addnstr(win, y + i, 2, text, w - 4, attr)

        win.refresh()

    @staticmethod
    def _addnstr(win, y, x, text, n, attr=0):
        if n <= 0:
            return
        try:
            win.addnstr(y, x, text, n, attr)
        except curses.error:
            pass
