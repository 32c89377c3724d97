import logging
import logging.handlers
import os
import sys
import tempfile

import config_paths

KEYTRACE_ENV = "NEONOTE_KEYTRACE"


def setup_logging(cfg=None, log_path=None):
    """Route all logging to a rotating file; curses owns the terminal.

    Setting NEONOTE_KEYTRACE=1 also records every key code under the
    ``neonote.keys`` logger.
    """
    cfg = cfg or {}
    level_name = str(cfg.get("LOG_LEVEL", config_paths.LOG_LEVEL_DEFAULT)).upper()
    level = getattr(logging, level_name, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    log_path = log_path or config_paths.LOG_PATH
    log_dir = os.path.dirname(log_path)
    if log_dir and not os.path.exists(log_dir):
        try:
            os.makedirs(log_dir)
        except OSError as e:
            print(f"Error creating log directory '{log_dir}': {e}", file=sys.stderr)
            log_path = os.path.join(tempfile.gettempdir(), "neonote.log")

    formatter = logging.Formatter(
        "%(asctime)s - %(levelname)-8s - %(name)-15s - %(message)s"
    )
    root = logging.getLogger()
    root.handlers = []
    try:
        handler = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8"
        )
    except OSError as e:
        print(f"Error setting up log file '{log_path}': {e}", file=sys.stderr)
        handler = logging.NullHandler()
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(level)

    keys = logging.getLogger("neonote.keys")
    keys.setLevel(logging.DEBUG)
    keys.disabled = os.environ.get(KEYTRACE_ENV, "").lower() not in {"1", "true", "yes"}
    return log_path
