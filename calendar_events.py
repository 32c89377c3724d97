import calendar
import logging
import os
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

log = logging.getLogger(__name__)

WEEKDAY_HEADER = "S  M  T  W  T  F  S"
DAY_WIDTH = 3


@dataclass
class Event:
    id: int
    title: str
    date: str
    description: str = ""

    def summary(self) -> str:
        return f"{self.date}  {self.title}"


class EventStore:
    """One file per event: ``<id>`` holding title, date and description."""

    def __init__(self, events_dir: str):
        self.events_dir = events_dir
        self._events: Dict[int, Event] = {}
        try:
            os.makedirs(self.events_dir, exist_ok=True)
        except OSError as exc:
            log.warning("Could not create events dir %s: %s", self.events_dir, exc)
        self.load()

    def _path(self, event_id: int) -> str:
        return os.path.join(self.events_dir, str(event_id))

    def load(self) -> None:
        self._events = {}
        try:
            entries = os.listdir(self.events_dir)
        except OSError as exc:
            log.warning("Could not list %s: %s", self.events_dir, exc)
            return
        for entry in entries:
            if not entry.isdigit():
                continue
            path = self._path(int(entry))
            try:
                with open(path, "r", encoding="utf-8") as f:
                    lines = f.read().splitlines()
            except (OSError, UnicodeDecodeError) as exc:
                log.warning("Skipping unreadable event %s: %s", path, exc)
                continue
            if not lines:
                continue
            lines += [""] * (3 - len(lines))
            self._events[int(entry)] = Event(int(entry), lines[0], lines[1], lines[2])

    @property
    def events(self) -> List[Event]:
        return [self._events[k] for k in sorted(self._events)]

    def __len__(self):
        return len(self._events)

    @property
    def next_free_id(self) -> int:
        event_id = 0
        while event_id in self._events or os.path.exists(self._path(event_id)):
            event_id += 1
        return event_id

    def add(self, title: str, date: str, description: str = "") -> Event:
        event = Event(self.next_free_id, title, date, description)
        self._events[event.id] = event
        path = self._path(event.id)
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(f"{event.title}\n{event.date}\n{event.description}\n")
        except OSError as exc:
            log.warning("Could not write event %s: %s", path, exc)
        return event

    def remove(self, event_id: int) -> bool:
        if self._events.pop(event_id, None) is None:
            return False
        try:
            os.remove(self._path(event_id))
        except OSError as exc:
            log.warning("Could not delete event file %d: %s", event_id, exc)
        return True

    def at(self, index: int) -> Optional[Event]:
        events = self.events
        if 0 <= index < len(events):
            return events[index]
        return None


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def first_weekday(year: int, month: int) -> int:
    """Weekday of the 1st with Sunday == 0."""
    return (calendar.weekday(year, month, 1) + 1) % 7


def month_cells(year: int, month: int) -> List[Tuple[int, int, int]]:
    """(day, week_row, weekday) slots of a Sunday-first month grid."""
    first = first_weekday(year, month)
    cells = []
    for day in range(1, days_in_month(year, month) + 1):
        slot = first + day - 1
        cells.append((day, slot // 7, slot % 7))
    return cells
