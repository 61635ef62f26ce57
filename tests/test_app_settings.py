import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from PySide6.QtCore import QSettings

from ydnotes.app_settings import KEYS, editor_options, get_int, get_str, notes_path
from ydnotes.settings import DATA_DIR, NOTES_FILENAME


def make_settings(tmp_path):
    return QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)


def test_defaults(tmp_path):
    s = make_settings(tmp_path)
    assert notes_path(s) == DATA_DIR / NOTES_FILENAME
    assert editor_options(s) == {"indent_width": 4, "max_heading_level": 6}


def test_values_are_read_back(tmp_path):
    s = make_settings(tmp_path)
    s.setValue(KEYS.INDENT_WIDTH, 2)
    s.setValue(KEYS.MAX_HEADING_LEVEL, "3")
    assert editor_options(s) == {"indent_width": 2, "max_heading_level": 3}


def test_bad_values_fall_back(tmp_path):
    s = make_settings(tmp_path)
    s.setValue(KEYS.INDENT_WIDTH, "wide")
    s.setValue(KEYS.MAX_HEADING_LEVEL, 0)
    assert get_int(s, KEYS.INDENT_WIDTH, 7) == 7
    assert editor_options(s) == {"indent_width": 4, "max_heading_level": 6}
    assert get_str(s, KEYS.NOTES_FILE, "none") == "none"
