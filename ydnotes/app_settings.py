from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PySide6.QtCore import QSettings

from ydnotes.settings import DATA_DIR, INDENT_WIDTH, MAX_HEADING_LEVEL, NOTES_FILENAME


@dataclass(frozen=True)
class SettingsKeys:
    NOTES_FILE: str = "notebook/path"
    INDENT_WIDTH: str = "editor/indent_width"
    MAX_HEADING_LEVEL: str = "editor/max_heading_level"


KEYS = SettingsKeys()


def get_str(settings: QSettings, key: str, default: str) -> str:
    val = settings.value(key, default)
    return str(val) if val is not None else default


def get_int(settings: QSettings, key: str, default: int) -> int:
    try:
        return int(settings.value(key, default))
    except (TypeError, ValueError):
        return default


def notes_path(settings: QSettings) -> Path:
    raw = get_str(settings, KEYS.NOTES_FILE, "").strip()
    return Path(raw).expanduser() if raw else DATA_DIR / NOTES_FILENAME


def editor_options(settings: QSettings) -> dict[str, int]:
    indent = get_int(settings, KEYS.INDENT_WIDTH, INDENT_WIDTH)
    max_level = get_int(settings, KEYS.MAX_HEADING_LEVEL, MAX_HEADING_LEVEL)
    return {
        "indent_width": indent if indent > 0 else INDENT_WIDTH,
        "max_heading_level": max_level if max_level > 0 else MAX_HEADING_LEVEL,
    }
