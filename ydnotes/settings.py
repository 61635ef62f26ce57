from __future__ import annotations
from pathlib import Path

APP_NAME = "ydnotes"
DATA_DIR = Path.home() / f".{APP_NAME}"
LOG_DIR = DATA_DIR / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"
RECOVERY_DIR = DATA_DIR / "recovery"
NOTES_FILENAME = "notes.json"

INDENT_WIDTH = 4
# Headings past h6 are not markdown; the editor clamps to this.
MAX_HEADING_LEVEL = 6
