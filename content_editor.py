from code_blocks import classify_lines
from document_buffer import Cursor, Document
from keybindings import INDENTATION, KeyMap
from line_renderer import CODE_BLOCK_INDENT
from viewport import Viewport


class ContentEditor:
    """Key handling for the note editor panel.

    Owns the document, the raw cursor and the scroll viewport. Every handled
    key ends with a clamp and a viewport adjust so rendering never sees an
    out-of-range cursor.
    """

    def __init__(self, document=None, keys=None, viewport=None):
        self.document = document if document is not None else Document()
        self.cursor = Cursor()
        self.keys = keys or KeyMap()
        self.viewport = viewport or Viewport()
        self.dirty = False

    # ---------- state helpers ----------
    def load(self, lines):
        self.document.replace_lines(lines)
        self.cursor.move_to(0, 0)
        self.viewport.reset()
        self.dirty = False
        self.after_edit()

    def after_edit(self):
        self.cursor.clamp(self.document)
        self.viewport.adjust(self.cursor.row, self.cursor.col, self.cursor_indent())

    def cursor_indent(self) -> int:
        """Extra screen offset of the cursor line; code lines sit further right."""
        kind = classify_lines(self.document.lines)[self.cursor.row]
        return CODE_BLOCK_INDENT if kind.is_code else 0

    @property
    def current_line(self) -> str:
        return self.document.line(self.cursor.row)

    # ---------- motions ----------
    def move_up(self):
        if self.cursor.row > 0:
            self.cursor.row -= 1

    def move_down(self):
        if self.cursor.row < self.document.line_count - 1:
            self.cursor.row += 1

    def move_left(self):
        if self.cursor.col > 0:
            self.cursor.col -= 1
        elif self.cursor.row > 0:
            self.cursor.row -= 1
            self.cursor.col = len(self.current_line)

    def move_right(self):
        if self.cursor.col < len(self.current_line):
            self.cursor.col += 1
        elif self.cursor.row < self.document.line_count - 1:
            self.cursor.row += 1
            self.cursor.col = 0

    def skip_left(self):
        line = self.current_line
        col = self.cursor.col
        while col > 0 and line[col - 1] == " ":
            col -= 1
        while col > 0 and line[col - 1] != " ":
            col -= 1
        self.cursor.col = col

    def skip_right(self):
        line = self.current_line
        col = self.cursor.col
        n = len(line)
        while col < n and line[col] != " ":
            col += 1
        while col < n and line[col] == " ":
            col += 1
        self.cursor.col = col

    def goto_start(self):
        self.cursor.move_to(0, 0)

    def goto_end(self):
        row = self.document.line_count - 1
        self.cursor.move_to(row, len(self.document.line(row)))

    # ---------- edits ----------
    def insert_text(self, text: str):
        self.document.insert(self.cursor.row, self.cursor.col, text)
        self.cursor.col += len(text)
        self.dirty = True

    def delete_left(self):
        row, col = self.cursor.row, self.cursor.col
        if col > 0:
            self.document.delete_range(row, col - 1, 1)
            self.cursor.col -= 1
        elif row > 0:
            self.cursor.move_to(row - 1, len(self.document.line(row - 1)))
            self.document.join_with_next(row - 1)
        else:
            return
        self.dirty = True

    def delete_right(self):
        row, col = self.cursor.row, self.cursor.col
        if col < len(self.current_line):
            self.document.delete_range(row, col, 1)
        elif row < self.document.line_count - 1:
            self.document.join_with_next(row)
        else:
            return
        self.dirty = True

    def delete_word(self):
        col = self.cursor.col
        if col == 0:
            return
        line = self.current_line
        start = col - 1
        while start >= 0 and line[start] == " ":
            start -= 1
        while start >= 0 and line[start] != " ":
            start -= 1
        start += 1
        self.document.delete_range(self.cursor.row, start, col - start)
        self.cursor.col = start
        self.dirty = True

    def new_line(self):
        self.document.split_line(self.cursor.row, self.cursor.col)
        self.cursor.move_to(self.cursor.row + 1, 0)
        self.dirty = True

    def toggle_bold(self):
        line, col = self.current_line, self.cursor.col
        if line[col : col + 2] == "**":
            self.cursor.col += 2
            return
        self.document.insert(self.cursor.row, col, "****")
        self.cursor.col += 2
        self.dirty = True

    def toggle_italic(self):
        line, col = self.current_line, self.cursor.col
        if line[col : col + 1] == "*":
            self.cursor.col += 1
            return
        self.document.insert(self.cursor.row, col, "**")
        self.cursor.col += 1
        self.dirty = True

    def insert_space(self):
        """Type a space, expanding a fresh ``N.`` or ``-`` into an indented list item."""
        line, col = self.current_line, self.cursor.col
        row = self.cursor.row

        if col > 0 and line[col - 1] == ".":
            start = col - 1
            while start > 0 and line[start - 1].isdigit():
                start -= 1
            if start < col - 1 and line[:start].strip(" ") == "":
                marker = line[start:col]
                self.document.set_line(row, line[:start] + INDENTATION + marker + " " + line[col:])
                self.cursor.col = start + len(INDENTATION) + len(marker) + 1
                self.dirty = True
                return
        elif col > 0 and line[col - 1] == "-" and line[: col - 1].strip(" ") == "":
            self.document.set_line(row, line[: col - 1] + INDENTATION + "- " + line[col:])
            self.cursor.col = col - 1 + len(INDENTATION) + 2
            self.dirty = True
            return

        self.insert_text(" ")

    # ---------- input handling ----------
    def handle_key(self, ch) -> bool:
        """Apply one key to the document. Returns False for keys it ignores."""
        keys = self.keys
        handled = True

        if keys.matches("cursor_up", ch):
            self.move_up()
        elif keys.matches("cursor_down", ch):
            self.move_down()
        elif keys.matches("cursor_left", ch):
            self.move_left()
        elif keys.matches("cursor_right", ch):
            self.move_right()
        elif keys.matches("skip_left", ch):
            self.skip_left()
        elif keys.matches("skip_right", ch):
            self.skip_right()
        elif keys.matches("goto_start", ch):
            self.goto_start()
        elif keys.matches("goto_end", ch):
            self.goto_end()
        elif keys.matches("delete_left", ch):
            self.delete_left()
        elif keys.matches("delete_right", ch):
            self.delete_right()
        elif keys.matches("delete_word", ch):
            self.delete_word()
        elif keys.matches("new_line", ch):
            self.new_line()
        elif keys.matches("indent", ch):
            self.insert_text(INDENTATION)
        elif keys.matches("bold", ch):
            self.toggle_bold()
        elif keys.matches("italic", ch):
            self.toggle_italic()
        elif ch == ord(" "):
            self.insert_space()
        elif 32 <= ch <= 126:
            self.insert_text(chr(ch))
        else:
            handled = False

        self.after_edit()
        return handled
