import sys
import os
import curses
import logging

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")

import config_paths
from log_setup import setup_logging
from orchestrator import Orchestrator
from app_state import AppState

try:
    from _version import __version__
except ImportError:
    __version__ = "0.0.0"

log = logging.getLogger(__name__)

USAGE = (
    "neonote - terminal notes, kanban and calendar\n\n"
    "Usage:\n  neonote\n  neonote --notes-dir PATH\n  neonote -v\n  neonote -h\n"
)


def parse_notes_dir(args):
    """Value of ``--notes-dir PATH`` or ``--notes-dir=PATH``; None if absent."""
    for i, arg in enumerate(args):
        if arg == "--notes-dir":
            if i + 1 >= len(args):
                raise ValueError("--notes-dir needs a path")
            return os.path.expanduser(args[i + 1])
        if arg.startswith("--notes-dir="):
            value = arg.split("=", 1)[1]
            if not value:
                raise ValueError("--notes-dir needs a path")
            return os.path.expanduser(value)
    return None


def main():
    args = sys.argv[1:]

    if "-v" in args or "-V" in args:
        print(__version__)
        return

    if "-h" in args or "--help" in args:
        print(USAGE)
        return

    try:
        notes_dir = parse_notes_dir(args)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        print(USAGE, file=sys.stderr)
        sys.exit(2)

    cfg = config_paths.load_config()
    if notes_dir:
        cfg["NOTES_DIR"] = notes_dir

    setup_logging(cfg)
    try:
        config_paths.ensure_config_dirs(cfg["NOTES_DIR"])
    except OSError as e:
        print(f"Cannot create {cfg['NOTES_DIR']}: {e}", file=sys.stderr)
        sys.exit(1)
    log.info("Starting neonote %s with notes in %s", __version__, cfg["NOTES_DIR"])

    state = AppState.from_config(cfg)

    def curses_main(stdscr):
        Orchestrator(stdscr, state, cfg["SIDEBAR_WIDTH_RATIO"]).run()

    curses.wrapper(curses_main)


if __name__ == "__main__":
    main()
