import json
import logging
import os

log = logging.getLogger(__name__)

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
XDG_DATA_HOME = os.environ.get("XDG_DATA_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
DATA_HOME = XDG_DATA_HOME if XDG_DATA_HOME else os.path.join(HOME, ".local", "share")
CONFIG_DIR = os.path.join(CONFIG_HOME, "neonote")
DATA_DIR = os.path.join(DATA_HOME, "neonote")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "neonote.log")

# default settings
SIDEBAR_WIDTH_RATIO_DEFAULT = 0.25
LOG_LEVEL_DEFAULT = "INFO"


def tasks_dir(data_dir=None):
    return os.path.join(data_dir or DATA_DIR, "tasks")


def events_dir(data_dir=None):
    return os.path.join(data_dir or DATA_DIR, "events")


def ensure_config_dirs(data_dir=None):
    os.makedirs(CONFIG_DIR, exist_ok=True)
    os.makedirs(data_dir or DATA_DIR, exist_ok=True)


def load_config():
    cfg = {
        "SIDEBAR_WIDTH_RATIO": SIDEBAR_WIDTH_RATIO_DEFAULT,
        "NOTES_DIR": DATA_DIR,
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
        "KEYBINDINGS": {},
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        log.warning("Could not read %s: %s", CONFIG_JSON, exc)
        return cfg

    if not isinstance(data, dict):
        return cfg

    ratio = data.get("sidebar_width_ratio")
    if isinstance(ratio, (int, float)) and not isinstance(ratio, bool) and 0 < ratio < 1:
        cfg["SIDEBAR_WIDTH_RATIO"] = float(ratio)

    notes_dir = data.get("notes_dir")
    if isinstance(notes_dir, str) and notes_dir.strip():
        cfg["NOTES_DIR"] = os.path.expanduser(notes_dir.strip())

    level = data.get("log_level")
    if isinstance(level, str) and level.strip():
        cfg["LOG_LEVEL"] = level.strip().upper()

    bindings = data.get("keybindings")
    if isinstance(bindings, dict):
        for name, codes in bindings.items():
            if not isinstance(name, str):
                continue
            if isinstance(codes, int) and not isinstance(codes, bool):
                codes = [codes]
            if not (isinstance(codes, list) and all(isinstance(c, int) for c in codes)):
                continue
            cfg["KEYBINDINGS"][name] = list(codes)

    return cfg
