import logging
from enum import Enum

from kanban import KanbanSelection

log = logging.getLogger(__name__)


class Focus(Enum):
    CONTENT = "content"
    SIDEBAR = "sidebar"
    KANBAN = "kanban"
    CALENDAR = "calendar"


UNSELECTED_EVENT = -1


class PanelFocus:
    """Which panel owns the keyboard, plus the per-panel selections.

    Only the transition methods here change ``focus``. Each transition runs
    its side effects (save on leaving the editor, load on entering it,
    selection resets); a transition that is not legal from the current
    state does nothing and returns False.
    """

    def __init__(self, state):
        self.state = state
        self.focus = Focus.CONTENT
        # panel drawn in the main area; the sidebar never takes it over
        self.main_view = Focus.CONTENT
        self.sidebar_index = 0
        self.kanban = KanbanSelection()
        self.calendar_index = UNSELECTED_EVENT
        self.cursor_visible = True

    # ---------- sidebar rows ----------
    @property
    def file_count(self) -> int:
        return len(self.state.notes.files)

    @property
    def kanban_row(self) -> int:
        return self.file_count

    @property
    def calendar_row(self) -> int:
        return self.file_count + 1

    @property
    def sidebar_size(self) -> int:
        return self.file_count + 2

    def selected_note(self):
        if 0 <= self.sidebar_index < self.file_count:
            return self.state.notes.files[self.sidebar_index]
        return None

    def clamp_sidebar(self):
        self.sidebar_index = max(0, min(self.sidebar_index, self.sidebar_size - 1))

    # ---------- transitions ----------
    def _enter(self, target: Focus):
        log.debug("Focus %s -> %s", self.focus.value, target.value)
        self.focus = target
        if target is not Focus.SIDEBAR:
            self.main_view = target
        self.cursor_visible = target is Focus.CONTENT

    def switch_panel(self) -> bool:
        if self.focus is Focus.CONTENT:
            self.state.save_current()
            self._enter(Focus.SIDEBAR)
            return True

        if self.focus is Focus.SIDEBAR:
            if self.selected_note() is not None:
                return self._open_selected_note()
            if self.sidebar_index == self.kanban_row:
                self.kanban.reset()
                self.kanban.clamp(self.state.tasks.column_sizes())
                self._enter(Focus.KANBAN)
                return True
            if self.sidebar_index == self.calendar_row:
                self.calendar_index = 0
                self._enter(Focus.CALENDAR)
                return True
            return False

        if self.focus is Focus.KANBAN:
            self.kanban.clear()
            self._enter(Focus.SIDEBAR)
            return True

        if self.focus is Focus.CALENDAR:
            self.calendar_index = UNSELECTED_EVENT
            self._enter(Focus.SIDEBAR)
            return True

        return False

    def _open_selected_note(self) -> bool:
        name = self.selected_note()
        if name is None:
            return False
        self.state.save_current()
        self.state.open_note(name)
        self._enter(Focus.CONTENT)
        return True

    def confirm(self):
        """Sidebar Enter: show the selected row in the main area, keep focus."""
        if self.focus is not Focus.SIDEBAR:
            return
        name = self.selected_note()
        if name is not None:
            self.state.save_current()
            self.state.open_note(name)
            self.main_view = Focus.CONTENT
        elif self.sidebar_index == self.kanban_row:
            self.main_view = Focus.KANBAN
        else:
            self.calendar_index = UNSELECTED_EVENT
            self.main_view = Focus.CALENDAR

    # ---------- in-panel selection ----------
    def sidebar_up(self):
        self.sidebar_index = (self.sidebar_index - 1) % self.sidebar_size

    def sidebar_down(self):
        self.sidebar_index = (self.sidebar_index + 1) % self.sidebar_size

    def kanban_up(self):
        self.kanban.move_up(self.state.tasks.column_sizes())

    def kanban_down(self):
        self.kanban.move_down(self.state.tasks.column_sizes())

    def kanban_left(self):
        self.kanban.move_left(self.state.tasks.column_sizes())

    def kanban_right(self):
        self.kanban.move_right(self.state.tasks.column_sizes())

    def calendar_up(self):
        self.calendar_index = max(0, self.calendar_index - 1)

    def calendar_down(self):
        last = max(0, len(self.state.events) - 1)
        self.calendar_index = min(last, self.calendar_index + 1)

    def clamp_calendar(self):
        if self.calendar_index != UNSELECTED_EVENT:
            last = max(0, len(self.state.events) - 1)
            self.calendar_index = max(0, min(self.calendar_index, last))
