import logging

from kanban import COLUMN_NAMES
from panel_focus import Focus, PanelFocus

log = logging.getLogger(__name__)
key_log = logging.getLogger("neonote.keys")

CONFIRM_DELETE = "Delete permanently? (Y/N)"
MOVE_TASK_TITLE = "Move to: " + ", ".join(
    f"{i + 1}={name}" for i, name in enumerate(COLUMN_NAMES)
)


def _confirmed(answer: str) -> bool:
    return answer.strip() in ("Y", "y")


def parse_column(answer: str):
    """Accept a 1-based column number or a column name prefix."""
    text = answer.strip().lower()
    if text.isdigit():
        idx = int(text) - 1
        return idx if 0 <= idx < len(COLUMN_NAMES) else None
    if not text:
        return None
    for idx, name in enumerate(COLUMN_NAMES):
        if name.lower().startswith(text):
            return idx
    return None


class InputRouter:
    """Sends each key to the panel that currently owns the keyboard."""

    def __init__(self, state, panels: PanelFocus, prompt, set_status_cb):
        self.state = state
        self.panels = panels
        self.prompt = prompt
        self.keys = state.keys
        self._set_status = set_status_cb
        self._handlers = {
            Focus.CONTENT: self._handle_content,
            Focus.SIDEBAR: self._handle_sidebar,
            Focus.KANBAN: self._handle_kanban,
            Focus.CALENDAR: self._handle_calendar,
        }

    def handle_key(self, ch):
        key_log.debug("key %d focus=%s", ch, self.panels.focus.value)
        if self.prompt.active:
            self.prompt.handle_key(ch)
            return
        self._handlers[self.panels.focus](ch)

    # ---------- shared commands ----------
    def _save(self):
        if self.state.save_current():
            self._set_status(f"Saved {self.state.current_note}", 3)
        else:
            self._set_status("Save failed", 4)

    def _new_note(self):
        name = self.state.notes.new_note()
        self._set_status(f"Created {name}", 3)

    # ---------- content ----------
    def _handle_content(self, ch):
        keys = self.keys
        if keys.matches("switch_panel", ch):
            self.panels.switch_panel()
        elif keys.matches("save_file", ch):
            self._save()
        elif keys.matches("new_file", ch):
            self._new_note()
        else:
            self.state.editor.handle_key(ch)

    # ---------- sidebar ----------
    def _handle_sidebar(self, ch):
        keys = self.keys
        panels = self.panels
        if keys.matches("switch_panel", ch):
            panels.switch_panel()
        elif keys.matches("cursor_up", ch):
            panels.sidebar_up()
        elif keys.matches("cursor_down", ch):
            panels.sidebar_down()
        elif keys.matches("new_file", ch):
            self._new_note()
        elif keys.matches("rename_file", ch):
            self._start_rename()
        elif keys.matches("delete_file", ch):
            self._start_delete_note()
        elif keys.matches("confirm", ch):
            panels.confirm()

    def _start_rename(self):
        name = self.panels.selected_note()
        if name is None:
            return
        self.state.save_current()
        self.state.open_note(name)
        self.panels.main_view = Focus.CONTENT

        def done(values):
            new_name = values[0]
            if self.state.rename_current(name, new_name):
                self._set_status(f"Renamed to {new_name}", 3)
            else:
                self._set_status(f"Cannot rename to {new_name}", 4)

        self.prompt.start(["Rename note"], done)

    def _start_delete_note(self):
        name = self.panels.selected_note()
        if name is None or self.panels.file_count <= 1:
            return

        def done(values):
            if not _confirmed(values[0]):
                return
            if not self.state.notes.delete(name):
                self._set_status(f"Could not delete {name}", 4)
                return
            self.panels.sidebar_index = max(self.panels.sidebar_index - 1, 0)
            self.panels.clamp_sidebar()
            fallback = self.panels.selected_note() or self.state.notes.files[0]
            if self.state.current_note == name:
                self.state.current_note = None
            else:
                self.state.save_current()
            self.state.open_note(fallback)
            self._set_status(f"Deleted {name}", 3)

        self.prompt.start([CONFIRM_DELETE], done, allow_empty=True)

    # ---------- kanban ----------
    def _handle_kanban(self, ch):
        keys = self.keys
        panels = self.panels
        if keys.matches("switch_panel", ch):
            panels.switch_panel()
        elif keys.matches("new_file", ch):
            self.prompt.start(["Enter new task:"], self._add_task)
        elif keys.matches("cursor_up", ch):
            panels.kanban_up()
        elif keys.matches("cursor_down", ch):
            panels.kanban_down()
        elif keys.matches("cursor_left", ch):
            panels.kanban_left()
        elif keys.matches("cursor_right", ch):
            panels.kanban_right()
        elif keys.matches("confirm", ch):
            self._start_move_task()
        elif keys.matches("delete_file", ch):
            self._start_delete_task()

    def _add_task(self, values):
        task = self.state.tasks.add(values[0], 0)
        self._set_status(f"Added task {task.title}", 3)

    def _start_move_task(self):
        task = self.panels.kanban.selected_task(self.state.tasks)
        if task is None:
            return

        def done(values):
            column = parse_column(values[0])
            if column is None:
                self._set_status(f"Unknown column: {values[0]}", 4)
                return
            self.state.tasks.move(task.id, column)
            self.panels.kanban.clamp(self.state.tasks.column_sizes())
            self._set_status(f"Moved to {COLUMN_NAMES[column]}", 3)

        self.prompt.start([MOVE_TASK_TITLE], done)

    def _start_delete_task(self):
        task = self.panels.kanban.selected_task(self.state.tasks)
        if task is None:
            return

        def done(values):
            if _confirmed(values[0]):
                self.state.tasks.remove(task.id)
                self.panels.kanban.clamp(self.state.tasks.column_sizes())

        self.prompt.start([CONFIRM_DELETE], done, allow_empty=True)

    # ---------- calendar ----------
    def _handle_calendar(self, ch):
        keys = self.keys
        panels = self.panels
        if keys.matches("switch_panel", ch):
            panels.switch_panel()
        elif keys.matches("new_file", ch):
            self.prompt.start(
                ["Event Name", "Event Description", "Event Date"], self._add_event
            )
        elif keys.matches("cursor_up", ch):
            panels.calendar_up()
        elif keys.matches("cursor_down", ch):
            panels.calendar_down()
        elif keys.matches("delete_file", ch):
            self._start_delete_event()

    def _add_event(self, values):
        title, description, date = values
        self.state.events.add(title, date, description)
        self._set_status(f"Added event {title}", 3)

    def _start_delete_event(self):
        event = self.state.events.at(self.panels.calendar_index)
        if event is None:
            return

        def done(values):
            if _confirmed(values[0]):
                self.state.events.remove(event.id)
                self.panels.clamp_calendar()

        self.prompt.start([CONFIRM_DELETE], done, allow_empty=True)
