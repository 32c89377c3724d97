import logging

import config_paths
from calendar_events import EventStore
from content_editor import ContentEditor
from kanban import TaskStore
from keybindings import KeyMap
from note_files import NoteStore

log = logging.getLogger(__name__)


class AppState:
    """Everything the panels share: the three stores and the open note."""

    def __init__(self, notes, tasks, events, keys=None, editor=None):
        self.notes = notes
        self.tasks = tasks
        self.events = events
        self.keys = keys or KeyMap()
        self.editor = editor or ContentEditor(keys=self.keys)
        self.current_note: str | None = None

        if self.notes.files:
            self.open_note(self.notes.files[0])

    @classmethod
    def from_config(cls, cfg):
        data_dir = cfg.get("NOTES_DIR") or config_paths.DATA_DIR
        return cls(
            NoteStore(data_dir),
            TaskStore(config_paths.tasks_dir(data_dir)),
            EventStore(config_paths.events_dir(data_dir)),
            keys=KeyMap.from_config(cfg),
        )

    @property
    def document(self):
        return self.editor.document

    def save_current(self) -> bool:
        if not self.current_note:
            return False
        ok = self.notes.save(self.current_note, self.document.lines)
        if ok:
            self.editor.dirty = False
        return ok

    def open_note(self, name: str):
        self.current_note = name
        self.editor.load(self.notes.load(name))
        log.debug("Opened note %s", name)

    def rename_current(self, old: str, new: str) -> bool:
        if not self.notes.rename(old, new):
            return False
        if self.current_note == old:
            self.current_note = new.strip()
        return True
