from __future__ import annotations

from contextlib import contextmanager

from PySide6.QtCore import QObject, Signal


class LineModel(QObject):
    """
    Mutable text buffer stored as a list of lines.

    "\\n" is the only separator: "\\r" and any other character stay part of the
    line they were typed on. The buffer always holds at least one line; an
    empty document is [""].

    Signals:
      content_changed  - a user edit changed the buffer
      content_replaced - set_content() swapped the whole buffer

    Edits made inside batch() are reported as one content_changed on exit.
    """

    content_changed = Signal()
    content_replaced = Signal()

    def __init__(self, text: str = "", parent: QObject | None = None):
        super().__init__(parent)
        self._lines: list[str] = _split(text)
        self._batch_depth = 0
        self._batch_dirty = False

    # ───────────────────────── read ─────────────────────────

    def line_count(self) -> int:
        return len(self._lines)

    def line(self, index: int) -> str:
        return self._lines[self._check(index)]

    def lines(self) -> list[str]:
        return list(self._lines)

    def content(self) -> str:
        return "\n".join(self._lines)

    # ───────────────────────── write ─────────────────────────

    def replace_line(self, index: int, text: str) -> None:
        index = self._check(index)
        if self._lines[index] == text:
            return
        self._lines[index] = text
        self._changed()

    def insert_line(self, index: int, text: str) -> None:
        # index == line_count() appends
        if not 0 <= index <= len(self._lines):
            raise IndexError(f"line index out of range: {index}")
        self._lines.insert(index, text)
        self._changed()

    def delete_line(self, index: int) -> None:
        index = self._check(index)
        if len(self._lines) == 1:
            if self._lines[0] == "":
                return
            self._lines[0] = ""
        else:
            del self._lines[index]
        self._changed()

    def set_content(self, text: str) -> None:
        """Replace the whole buffer without raising content_changed."""
        self._lines = _split(text)
        self.content_replaced.emit()

    @contextmanager
    def batch(self):
        self._batch_depth += 1
        try:
            yield self
        finally:
            self._batch_depth -= 1
            if self._batch_depth == 0 and self._batch_dirty:
                self._batch_dirty = False
                self.content_changed.emit()

    # ───────────────────────── internals ─────────────────────────

    def _check(self, index: int) -> int:
        if not 0 <= index < len(self._lines):
            raise IndexError(f"line index out of range: {index}")
        return index

    def _changed(self) -> None:
        if self._batch_depth:
            self._batch_dirty = True
        else:
            self.content_changed.emit()


def _split(text: str) -> list[str]:
    return (text or "").split("\n")
