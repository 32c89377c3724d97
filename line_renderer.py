from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from code_blocks import LineKind

CODE_BLOCK_INDENT = 2
MAX_HEADER_LEVEL = 6
ESCAPABLE = ("*", "\\", "`")


@dataclass
class FormattingRunState:
    """Toggle state for one scan of one line. Created fresh per line."""

    bold: bool = False
    italic: bool = False
    inline_code: bool = False
    header_level: int = 0

    def style(self) -> "Style":
        return Style(
            bold=self.bold,
            italic=self.italic,
            code=self.inline_code,
            header_level=self.header_level,
        )


@dataclass(frozen=True)
class Style:
    bold: bool = False
    italic: bool = False
    code: bool = False
    header_level: int = 0
    code_block: bool = False


CODE_BLOCK_STYLE = Style(code_block=True)


@dataclass(frozen=True)
class Cell:
    col: int  # logical column of the glyph
    char: str
    style: Style


@dataclass
class LineLayout:
    text: str
    kind: LineKind
    cells: List[Cell] = field(default_factory=list)
    # suppressed[c] == marker bytes consumed in text[0:c]
    suppressed: List[int] = field(default_factory=list)

    @property
    def indent(self) -> int:
        return CODE_BLOCK_INDENT if self.kind.is_code else 0

    @property
    def is_band(self) -> bool:
        return self.kind is LineKind.FENCE_DELIMITER

    def suppressed_width(self, col: int) -> int:
        col = max(0, min(col, len(self.text)))
        return self.suppressed[col]

    def visual_col(self, col: int) -> int:
        return max(0, col) - self.suppressed_width(col)

    def place(self, scroll_col: int, width: int) -> Iterator[Tuple[int, Cell]]:
        """Yield (x, cell) for the glyphs that fall inside [0, width).

        x is the offset from the pane's text origin and uses the same
        suppression table as the cursor so glyph and cursor never drift.
        """
        if self.is_band:
            return
        for cell in self.cells:
            if cell.col < scroll_col:
                continue
            x = self.indent + cell.col - scroll_col - self.suppressed[cell.col]
            if x < self.indent:
                continue
            if x >= width:
                break
            yield x, cell


def header_prefix(line: str) -> Tuple[int, int]:
    """Return (level, prefix_length) of a leading '#' header, or (0, 0)."""
    level = 0
    while level < len(line) and line[level] == "#":
        level += 1
    if level == 0 or level > MAX_HEADER_LEVEL:
        return 0, 0
    if level == len(line):
        return level, level
    if line[level] == " ":
        return level, level + 1
    return 0, 0


def _scan_markdown(text: str) -> Tuple[List[Cell], List[int]]:
    state = FormattingRunState()
    cells: List[Cell] = []
    suppressed = [0] * (len(text) + 1)
    hidden = [False] * len(text)

    level, prefix_len = header_prefix(text)
    if level:
        state.header_level = level
        for i in range(prefix_len):
            hidden[i] = True

    pos = prefix_len
    n = len(text)
    while pos < n:
        ch = text[pos]

        if state.inline_code:
            if ch == "\\" and pos + 1 < n and text[pos + 1] == "`":
                hidden[pos] = True
                cells.append(Cell(pos + 1, "`", state.style()))
                pos += 2
                continue
            if ch == "`":
                state.inline_code = False
                hidden[pos] = True
            else:
                cells.append(Cell(pos, ch, state.style()))
            pos += 1
            continue

        if ch == "\\" and pos + 1 < n and text[pos + 1] in ESCAPABLE:
            hidden[pos] = True
            cells.append(Cell(pos + 1, text[pos + 1], state.style()))
            pos += 2
            continue

        if ch == "*" and pos + 1 < n and text[pos + 1] == "*":
            state.bold = not state.bold
            hidden[pos] = hidden[pos + 1] = True
            pos += 2
            continue

        if ch == "*":
            state.italic = not state.italic
            hidden[pos] = True
            pos += 1
            continue

        if ch == "`":
            state.inline_code = True
            hidden[pos] = True
            pos += 1
            continue

        cells.append(Cell(pos, ch, state.style()))
        pos += 1

    for i, is_hidden in enumerate(hidden):
        suppressed[i + 1] = suppressed[i] + (1 if is_hidden else 0)
    return cells, suppressed


def layout_line(text: str, kind: LineKind = LineKind.PLAIN) -> LineLayout:
    """Scan one line into drawable cells plus its suppression table."""
    if kind.is_code:
        cells = []
        if kind is not LineKind.FENCE_DELIMITER:
            cells = [Cell(i, ch, CODE_BLOCK_STYLE) for i, ch in enumerate(text)]
        return LineLayout(text, kind, cells, [0] * (len(text) + 1))

    cells, suppressed = _scan_markdown(text)
    return LineLayout(text, kind, cells, suppressed)


def suppressed_width(text: str, col: int, kind: LineKind = LineKind.PLAIN) -> int:
    return layout_line(text, kind).suppressed_width(col)
