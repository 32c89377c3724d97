import curses
import logging
import time

import colors
from calendar_pane import CalendarPane
from content_pane import ContentPane
from input_router import InputRouter
from kanban_pane import KanbanPane
from main_menu import EXIT, OPEN, MainMenu
from panel_focus import Focus, PanelFocus
from screen_layout import ScreenLayout
from sidebar_pane import SidebarPane
from status_bar import render_status
from text_prompt import TextPrompt

log = logging.getLogger(__name__)


class Orchestrator:
    def __init__(self, stdscr, app_state, sidebar_ratio=0.25):
        self.stdscr = stdscr
        curses.curs_set(1)
        curses.raw()
        self.stdscr.nodelay(False)
        self.stdscr.timeout(100)
        self.stdscr.keypad(True)
        colors.init_colors()

        self.state = app_state
        self.sidebar_ratio = sidebar_ratio
        self.layout = None
        self._relayout()

        self.menu = MainMenu()
        self.in_menu = True

        self.content = ContentPane()
        self.sidebar = SidebarPane()
        self.kanban = KanbanPane()
        self.calendar = CalendarPane()

        # ---- status ----
        self.status_msg = None
        self.status_msg_until = 0

        self.prompt = TextPrompt(self._set_status, app_state.keys)
        self.panels = PanelFocus(app_state)
        self.router = InputRouter(app_state, self.panels, self.prompt, self._set_status)
        self.exit_requested = False

    # ---------------- helpers ----------------

    def _set_status(self, msg, seconds=3):
        self.status_msg = msg
        self.status_msg_until = time.time() + seconds

    def _relayout(self):
        self.layout = ScreenLayout(self.stdscr, self.sidebar_ratio)
        editor = self.state.editor
        editor.viewport.resize(self.layout.visible_rows, self.layout.visible_cols)
        editor.after_edit()

    def _check_resize(self):
        if self.layout.size_changed():
            log.debug("Terminal resized to %s", self.stdscr.getmaxyx())
            try:
                curses.update_lines_cols()
            except (AttributeError, curses.error):
                pass
            self.stdscr.clear()
            self._relayout()
            return True
        return False

    def _status_text(self, width):
        cursor = self.state.editor.cursor
        return render_status(
            {
                "status_msg": self.status_msg,
                "status_until": self.status_msg_until,
                "panel": self.panels.focus.value,
                "note": self.state.current_note,
                "row": cursor.row,
                "col": cursor.col,
                "dirty": self.state.editor.dirty,
            },
            width,
        ).strip()

    def _return_to_menu(self):
        self.state.save_current()
        self.in_menu = True
        log.info("Returned to main menu")

    def _quit(self):
        self.state.save_current()
        self.exit_requested = True

    # ---------------- UI ----------------

    def redraw(self):
        if self.in_menu:
            self._set_cursor(0)
            self.menu.draw(self.stdscr)
            return

        panels = self.panels
        if self.prompt.active:
            self._set_cursor(1)
        else:
            self._set_cursor(1 if panels.cursor_visible else 0)

        self.stdscr.noutrefresh()
        self.sidebar.draw(
            self.layout.sidebar_win,
            self.state.notes.files,
            panels.sidebar_index,
            active=(panels.focus is Focus.SIDEBAR),
            current=self.state.current_note,
        )

        win = self.layout.content_win
        status = self._status_text(max(0, self.layout.content_w - 6))
        if panels.main_view is Focus.KANBAN:
            self.kanban.draw(
                win,
                self.state.tasks,
                panels.kanban,
                active=(panels.focus is Focus.KANBAN),
            )
            self._draw_footer(win, status)
        elif panels.main_view is Focus.CALENDAR:
            self.calendar.draw(win, self.state.events, panels.calendar_index)
            self._draw_footer(win, status)
        else:
            self.content.draw(
                win,
                self.state.editor,
                title=self.state.current_note or "",
                status=status,
                active=(panels.focus is Focus.CONTENT and not self.prompt.active),
            )

        if self.prompt.active:
            self.prompt.draw(self.stdscr)

    def _set_cursor(self, visibility):
        try:
            curses.curs_set(visibility)
        except curses.error:
            pass

    @staticmethod
    def _draw_footer(win, text):
        h, w = win.getmaxyx()
        if not text or w <= 4:
            return
        try:
            win.addnstr(h - 1, 2, f" {text} ", w - 4)
        except curses.error:
            pass
        win.refresh()

    # ---------------- input ----------------

    def handle_key(self, ch):
        if self.prompt.active:
            self.prompt.handle_key(ch)
            return

        if self.in_menu:
            choice = self.menu.handle_key(ch)
            if choice == OPEN:
                self.in_menu = False
                self.stdscr.clear()
            elif choice == EXIT:
                self._quit()
            return

        if self.state.keys.matches("menu", ch):
            self._return_to_menu()
            return

        self.router.handle_key(ch)

    # ---------------- main loop ----------------

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()
        self.redraw()

        while True:
            ch = self.stdscr.getch()
            self._check_resize()

            if ch in (-1, curses.KEY_RESIZE):
                self.redraw()
                continue

            if ch in (3, 24):  # Ctrl+C / Ctrl+X
                self._quit()
                break

            self.handle_key(ch)
            if self.exit_requested:
                break
            self.redraw()

        log.info("Exiting")
