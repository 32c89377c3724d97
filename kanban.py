import logging
import os
from dataclasses import dataclass
from typing import Dict, List, Optional

log = logging.getLogger(__name__)

COLUMN_NAMES = ("To Do", "In Progress", "Done")
COLUMN_COUNT = len(COLUMN_NAMES)


@dataclass
class Task:
    id: int
    title: str
    column: int = 0


class TaskStore:
    """One file per task: ``<id>`` holding the title and the column index."""

    def __init__(self, tasks_dir: str):
        self.tasks_dir = tasks_dir
        self.tasks: Dict[int, Task] = {}
        try:
            os.makedirs(self.tasks_dir, exist_ok=True)
        except OSError as exc:
            log.warning("Could not create tasks dir %s: %s", self.tasks_dir, exc)
        self.load()

    def _path(self, task_id: int) -> str:
        return os.path.join(self.tasks_dir, str(task_id))

    def load(self) -> None:
        self.tasks = {}
        try:
            entries = os.listdir(self.tasks_dir)
        except OSError as exc:
            log.warning("Could not list %s: %s", self.tasks_dir, exc)
            return
        for entry in entries:
            if not entry.isdigit():
                continue
            task = self._read(int(entry))
            if task is not None:
                self.tasks[task.id] = task

    def _read(self, task_id: int) -> Optional[Task]:
        path = self._path(task_id)
        try:
            with open(path, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
            column = int(lines[1].strip())
        except (OSError, UnicodeDecodeError, IndexError, ValueError) as exc:
            log.warning("Skipping malformed task file %s: %s", path, exc)
            return None
        column = max(0, min(column, COLUMN_COUNT - 1))
        return Task(task_id, lines[0], column)

    def _write(self, task: Task) -> None:
        path = self._path(task.id)
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(f"{task.title}\n{task.column}\n")
        except OSError as exc:
            log.warning("Could not write task %s: %s", path, exc)

    @property
    def next_free_id(self) -> int:
        task_id = 0
        while task_id in self.tasks or os.path.exists(self._path(task_id)):
            task_id += 1
        return task_id

    def add(self, title: str, column: int = 0) -> Task:
        task = Task(self.next_free_id, title, max(0, min(column, COLUMN_COUNT - 1)))
        self.tasks[task.id] = task
        self._write(task)
        log.debug("Added task %d %r", task.id, title)
        return task

    def move(self, task_id: int, column: int) -> bool:
        task = self.tasks.get(task_id)
        if task is None or not 0 <= column < COLUMN_COUNT:
            return False
        task.column = column
        self._write(task)
        return True

    def remove(self, task_id: int) -> bool:
        if self.tasks.pop(task_id, None) is None:
            return False
        try:
            os.remove(self._path(task_id))
        except OSError as exc:
            log.warning("Could not delete task file %d: %s", task_id, exc)
        return True

    def column(self, column: int) -> List[Task]:
        return sorted(
            (t for t in self.tasks.values() if t.column == column), key=lambda t: t.id
        )

    def column_sizes(self) -> List[int]:
        return [len(self.column(c)) for c in range(COLUMN_COUNT)]


class KanbanSelection:
    UNSELECTED = (-1, -1)

    def __init__(self):
        self.column, self.row = self.UNSELECTED

    @property
    def active(self) -> bool:
        return (self.column, self.row) != self.UNSELECTED

    def reset(self):
        self.column, self.row = 0, 0

    def clear(self):
        self.column, self.row = self.UNSELECTED

    def move_up(self, sizes: List[int]):
        size = sizes[self.column]
        if size:
            self.row = (self.row - 1) % size

    def move_down(self, sizes: List[int]):
        size = sizes[self.column]
        if size:
            self.row = (self.row + 1) % size

    def move_left(self, sizes: List[int]):
        self._move_column(-1, sizes)

    def move_right(self, sizes: List[int]):
        self._move_column(1, sizes)

    def _move_column(self, delta: int, sizes: List[int]):
        self.column = (self.column + delta) % COLUMN_COUNT
        self.row = max(0, min(self.row, sizes[self.column] - 1))

    def selected_task(self, store: TaskStore) -> Optional[Task]:
        if not self.active:
            return None
        tasks = store.column(self.column)
        if 0 <= self.row < len(tasks):
            return tasks[self.row]
        return None

    def clamp(self, sizes: List[int]):
        if self.active:
            self.row = max(0, min(self.row, sizes[self.column] - 1))
