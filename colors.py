import curses

PAIR_HIGHLIGHT = 1
PAIR_HEADER_BASE = 2  # H1..H6 -> pairs 2..7
PAIR_CODE = 9

# grey code background, then a purple gradient for header levels 1..6
CUSTOM_COLORS = (
    ("COLOR_BLACK", (150, 150, 150)),
    ("COLOR_RED", (555, 110, 1000)),
    ("COLOR_GREEN", (580, 200, 965)),
    ("COLOR_YELLOW", (615, 285, 925)),
    ("COLOR_BLUE", (635, 375, 880)),
    ("COLOR_MAGENTA", (670, 470, 845)),
    ("COLOR_CYAN", (700, 565, 800)),
)
HEADER_COLORS = (
    "COLOR_RED",
    "COLOR_GREEN",
    "COLOR_YELLOW",
    "COLOR_BLUE",
    "COLOR_MAGENTA",
    "COLOR_CYAN",
)


def init_colors() -> bool:
    try:
        curses.start_color()
        curses.use_default_colors()
    except curses.error:
        return False

    if curses.can_change_color():
        for name, (r, g, b) in CUSTOM_COLORS:
            try:
                curses.init_color(getattr(curses, name), r, g, b)
            except curses.error:
                pass

    try:
        curses.init_pair(PAIR_HIGHLIGHT, curses.COLOR_BLACK, curses.COLOR_WHITE)
        for level, name in enumerate(HEADER_COLORS, start=1):
            curses.init_pair(PAIR_HEADER_BASE + level - 1, getattr(curses, name), -1)
        curses.init_pair(PAIR_CODE, curses.COLOR_WHITE, curses.COLOR_BLACK)
    except curses.error:
        return False
    return True


def color_attr(pair: int) -> int:
    try:
        return curses.color_pair(pair)
    except curses.error:
        return 0


def highlight_attr() -> int:
    attr = color_attr(PAIR_HIGHLIGHT)
    return attr if attr else curses.A_REVERSE


def header_attr(level: int) -> int:
    if not 1 <= level <= len(HEADER_COLORS):
        return 0
    return color_attr(PAIR_HEADER_BASE + level - 1) | curses.A_BOLD


def code_attr() -> int:
    attr = color_attr(PAIR_CODE)
    return attr if attr else curses.A_DIM


def style_attr(style) -> int:
    if style.code_block:
        return code_attr()
    attr = 0
    if style.header_level:
        attr |= header_attr(style.header_level)
    if style.code:
        attr |= code_attr()
    if style.bold:
        attr |= curses.A_BOLD
    if style.italic:
        attr |= getattr(curses, "A_ITALIC", curses.A_UNDERLINE)
    return attr
