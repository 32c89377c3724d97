class Viewport:
    """Top-left logical coordinate of the visible editor window."""

    def __init__(self, visible_rows: int = 1, visible_cols: int = 1):
        self.scroll_row = 0
        self.scroll_col = 0
        self.visible_rows = 1
        self.visible_cols = 1
        self.resize(visible_rows, visible_cols)

    def resize(self, visible_rows: int, visible_cols: int) -> None:
        # tiny terminals still get a 1x1 window
        self.visible_rows = max(1, int(visible_rows))
        self.visible_cols = max(1, int(visible_cols))

    def reset(self) -> None:
        self.scroll_row = 0
        self.scroll_col = 0

    def text_cols(self, indent: int = 0) -> int:
        """Columns left for text on a line drawn ``indent`` cells to the right."""
        return max(1, self.visible_cols - indent)

    def adjust(self, cursor_row: int, cursor_col: int, indent: int = 0) -> None:
        cols = self.text_cols(indent)
        if cursor_row < self.scroll_row:
            self.scroll_row = cursor_row
        elif cursor_row >= self.scroll_row + self.visible_rows:
            self.scroll_row = cursor_row - self.visible_rows + 1

        if cursor_col < self.scroll_col:
            self.scroll_col = cursor_col
        elif cursor_col >= self.scroll_col + cols:
            self.scroll_col = cursor_col - cols + 1

    def contains(self, row: int, col: int) -> bool:
        return (
            self.scroll_row <= row < self.scroll_row + self.visible_rows
            and self.scroll_col <= col < self.scroll_col + self.visible_cols
        )

    def visible_line_range(self, line_count: int) -> range:
        return range(self.scroll_row, min(line_count, self.scroll_row + self.visible_rows))
