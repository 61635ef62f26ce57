import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtGui import QGuiApplication

    app = QGuiApplication.instance() or QGuiApplication([])
    yield app


@pytest.fixture
def recorder():
    """Collects signal payloads: connect `recorder` and inspect `recorder.calls`."""
    calls = []

    def record(*args):
        calls.append(args)

    record.calls = calls
    return record
