from enum import Enum
from typing import List, Sequence

FENCE = "```"
INDENT_WIDTH = 4


class LineKind(Enum):
    PLAIN = "plain"
    FENCE_DELIMITER = "fence_delimiter"
    FENCED_BODY = "fenced_body"
    INDENTED_BODY = "indented_body"

    @property
    def is_code(self) -> bool:
        return self is not LineKind.PLAIN


def is_fence(line: str) -> bool:
    return line[:3] == FENCE


def starts_indented(line: str) -> bool:
    """True when the first four characters are one whitespace char repeated."""
    head = line[:INDENT_WIDTH]
    if len(head) < INDENT_WIDTH or not head[0].isspace():
        return False
    return head == head[0] * INDENT_WIDTH


def _is_blank(line: str) -> bool:
    return line.strip() == ""


def classify_lines(lines: Sequence[str]) -> List[LineKind]:
    """Tag every line of a document with its code-block membership.

    Fenced state is a running parity from the top of the document, so this
    always scans the whole document. Indented code only looks at the line
    right above.
    """
    kinds: List[LineKind] = []
    fenced = False
    for i, line in enumerate(lines):
        kind = LineKind.FENCED_BODY if fenced else LineKind.PLAIN

        if is_fence(line):
            fenced = not fenced
            kind = LineKind.FENCE_DELIMITER
        elif not fenced and starts_indented(line):
            prev = lines[i - 1] if i > 0 else None
            if prev is None or _is_blank(prev) or starts_indented(prev):
                kind = LineKind.INDENTED_BODY

        kinds.append(kind)
    return kinds
