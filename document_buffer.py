from dataclasses import dataclass
from typing import Iterable, List, Optional


class Document:
    """Ordered, mutable lines of one note. Never empty."""

    def __init__(self, lines: Optional[Iterable[str]] = None):
        self._lines: List[str] = []
        self.replace_lines(lines)

    # ---------- access ----------
    @property
    def lines(self) -> List[str]:
        return self._lines

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line(self, row: int) -> str:
        return self._lines[row]

    def set_line(self, row: int, text: str) -> None:
        self._lines[row] = text

    def replace_lines(self, lines: Optional[Iterable[str]]) -> None:
        self._lines = [str(l) for l in (lines or [])]
        self._ensure_non_empty()

    def _ensure_non_empty(self):
        if not self._lines:
            self._lines.append("")

    # ---------- structural edits ----------
    def insert(self, row: int, col: int, text: str) -> None:
        line = self._lines[row]
        self._lines[row] = line[:col] + text + line[col:]

    def delete_range(self, row: int, col: int, length: int) -> None:
        if length <= 0:
            return
        line = self._lines[row]
        self._lines[row] = line[:col] + line[col + length :]

    def split_line(self, row: int, col: int) -> None:
        line = self._lines[row]
        self._lines[row] = line[:col]
        self._lines.insert(row + 1, line[col:])

    def join_with_next(self, row: int) -> None:
        if row + 1 >= len(self._lines):
            return
        self._lines[row] += self._lines.pop(row + 1)
        self._ensure_non_empty()


@dataclass
class Cursor:
    row: int = 0
    col: int = 0

    def clamp(self, document: Document) -> None:
        # keep row/col addressable after any edit or file switch
        self.row = max(0, min(self.row, document.line_count - 1))
        self.col = max(0, min(self.col, len(document.line(self.row))))

    def move_to(self, row: int, col: int) -> None:
        self.row = row
        self.col = col
