from typing import Optional, Sequence, Tuple

from code_blocks import LineKind, classify_lines
from document_buffer import Cursor, Document
from line_renderer import LineLayout, layout_line
from viewport import Viewport

PANE_PADDING = 2


def resolve_cursor(
    document: Document,
    kinds: Optional[Sequence[LineKind]],
    cursor: Cursor,
    viewport: Viewport,
    padding: int = PANE_PADDING,
    layout: Optional[LineLayout] = None,
) -> Tuple[int, int]:
    """Map the logical cursor to the terminal (row, col) inside the pane.

    visual_col = col - scroll_col + padding - suppressed_width(col) [+ indent]
    visual_row = row - scroll_row + padding
    """
    if kinds is None:
        kinds = classify_lines(document.lines)
    row = max(0, min(cursor.row, document.line_count - 1))
    if layout is None:
        layout = layout_line(document.line(row), kinds[row])

    screen_row = row - viewport.scroll_row + padding
    screen_col = (
        cursor.col
        - viewport.scroll_col
        + padding
        - layout.suppressed_width(cursor.col)
        + layout.indent
    )
    # markers left of the scroll origin can pull the column into the border
    screen_col = max(padding, screen_col)
    return screen_row, screen_col
