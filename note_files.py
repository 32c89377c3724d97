import logging
import os
from typing import List

log = logging.getLogger(__name__)

NOTE_EXT = ".md"
DEFAULT_NOTE = "Welcome"
WELCOME_LINES = [
    "# Welcome to neonote",
    "",
    "Notes are plain **markdown** files. Formatting markers hide as you type:",
    "",
    "- **bold** with Ctrl+B, *italic* with Ctrl+I, `code` with backticks",
    "- headers start with `#` up to `######`",
    "",
    "## Panels",
    "",
    "Ctrl+O switches between this editor and the sidebar. In the sidebar,",
    "Up/Down picks a note, *My Tasks* or *Calendar*; Ctrl+O opens it.",
    "",
    "```",
    "Ctrl+S  save        Ctrl+N  new note/task/event",
    "Ctrl+R  rename      Delete  remove selected item",
    "Ctrl+Q  main menu",
    "```",
]


class NoteStore:
    """Flat directory of ``<name>.md`` notes, one line per document line."""

    def __init__(self, notes_dir: str):
        self.notes_dir = notes_dir
        self.files: List[str] = []
        self._init_dir()
        self.scan()
        self._create_default_if_needed()

    def _init_dir(self):
        try:
            os.makedirs(self.notes_dir, exist_ok=True)
        except OSError as exc:
            log.warning("Could not create notes dir %s: %s", self.notes_dir, exc)

    def path_for(self, name: str) -> str:
        return os.path.join(self.notes_dir, name + NOTE_EXT)

    def scan(self) -> List[str]:
        names = []
        try:
            entries = os.listdir(self.notes_dir)
        except OSError as exc:
            log.warning("Could not list %s: %s", self.notes_dir, exc)
            entries = []
        for entry in entries:
            stem, ext = os.path.splitext(entry)
            if ext != NOTE_EXT:
                continue
            if os.path.isfile(os.path.join(self.notes_dir, entry)):
                names.append(stem)
        self.files = sorted(names, key=str.lower)
        return self.files

    def _create_default_if_needed(self):
        if self.files:
            return
        self.save(DEFAULT_NOTE, WELCOME_LINES)
        self.files.append(DEFAULT_NOTE)

    def exists(self, name: str) -> bool:
        return os.path.exists(self.path_for(name))

    def load(self, name: str) -> List[str]:
        path = self.path_for(name)
        try:
            with open(path, "r", encoding="utf-8") as f:
                lines = [l.rstrip("\r\n") for l in f]
        except (OSError, UnicodeDecodeError) as exc:
            log.warning("Could not load note %s: %s", path, exc)
            return [""]
        return lines or [""]

    def save(self, name: str, lines: List[str]) -> bool:
        if not name:
            return False
        path = self.path_for(name)
        try:
            with open(path, "w", encoding="utf-8") as f:
                for line in lines:
                    f.write(line + "\n")
        except OSError as exc:
            log.warning("Could not save note %s: %s", path, exc)
            return False
        log.debug("Saved note %s (%d lines)", name, len(lines))
        return True

    def new_note(self) -> str:
        n = 0
        while True:
            n += 1
            name = f"Untitled{n}"
            if not self.exists(name) and name not in self.files:
                break
        self.save(name, [""])
        self.files.append(name)
        return name

    def rename(self, old: str, new: str) -> bool:
        new = new.strip()
        if not new or os.sep in new or new == old:
            return False
        if self.exists(new) or new in self.files:
            return False
        try:
            os.rename(self.path_for(old), self.path_for(new))
        except OSError as exc:
            log.warning("Could not rename %s to %s: %s", old, new, exc)
            return False
        self.files = [new if f == old else f for f in self.files]
        log.info("Renamed note %s -> %s", old, new)
        return True

    def delete(self, name: str) -> bool:
        path = self.path_for(name)
        if not os.path.exists(path):
            return False
        try:
            os.remove(path)
        except OSError as exc:
            log.warning("Could not delete %s: %s", path, exc)
            return False
        self.files = [f for f in self.files if f != name]
        log.info("Deleted note %s", name)
        return True
