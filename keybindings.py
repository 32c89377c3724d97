import curses
import logging
from typing import Dict, Iterable, Tuple

log = logging.getLogger(__name__)

INDENTATION = "    "

# command name -> key codes; overridable from config.json "keybindings"
DEFAULT_BINDINGS: Dict[str, Tuple[int, ...]] = {
    "menu": (17,),  # Ctrl+Q
    "cursor_up": (curses.KEY_UP,),
    "cursor_down": (curses.KEY_DOWN,),
    "cursor_left": (curses.KEY_LEFT,),
    "cursor_right": (curses.KEY_RIGHT,),
    "skip_left": (29,),  # Ctrl+]
    "skip_right": (28,),  # Ctrl+\
    "goto_start": (curses.KEY_PPAGE,),
    "goto_end": (curses.KEY_NPAGE,),
    "delete_left": (curses.KEY_BACKSPACE, 127),
    "delete_right": (curses.KEY_DC,),
    "delete_word": (8,),  # Ctrl+Backspace / Ctrl+H
    "new_line": (10, 13),
    "indent": (curses.KEY_BTAB, curses.KEY_CTAB),
    "italic": (9,),  # Ctrl+I
    "bold": (2,),  # Ctrl+B
    "new_file": (14,),  # Ctrl+N
    "save_file": (19,),  # Ctrl+S
    "rename_file": (18,),  # Ctrl+R
    "delete_file": (curses.KEY_DC,),
    "switch_panel": (15, 4),  # Ctrl+O, Ctrl+D
    "confirm": (10, 13, curses.KEY_ENTER),
    "cancel": (27,),
}


class KeyMap:
    def __init__(self, bindings: Dict[str, Iterable[int]] | None = None):
        self.bindings: Dict[str, Tuple[int, ...]] = dict(DEFAULT_BINDINGS)
        for name, codes in (bindings or {}).items():
            self.bind(name, codes)

    @classmethod
    def from_config(cls, cfg) -> "KeyMap":
        return cls((cfg or {}).get("KEYBINDINGS") or {})

    def bind(self, name: str, codes: Iterable[int]) -> bool:
        if name not in DEFAULT_BINDINGS:
            log.warning("Ignoring unknown keybinding %r", name)
            return False
        cleaned = tuple(c for c in codes if isinstance(c, int) and not isinstance(c, bool))
        if not cleaned:
            log.warning("Ignoring empty keybinding for %r", name)
            return False
        self.bindings[name] = cleaned
        return True

    def matches(self, name: str, ch: int) -> bool:
        return ch in self.bindings.get(name, ())
