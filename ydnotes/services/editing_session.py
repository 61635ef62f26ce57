from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, QSettings, Signal, Slot

from ydnotes.app_settings import editor_options
from ydnotes.core.highlight import HighlightEngine, Span
from ydnotes.core.line_model import LineModel
from ydnotes.core.models import Note
from ydnotes.core.note_graph import NoteGraph
from ydnotes.core.structural_editor import EditIntent, EditResult, StructuralEditor
from ydnotes.settings import APP_NAME, INDENT_WIDTH, MAX_HEADING_LEVEL

log = logging.getLogger(APP_NAME)


class EditingSession(QObject):
    """
    Editor-side state for the note currently open.

    The session holds a transient copy of the note's text in a LineModel.
    Loading a note uses LineModel.set_content(), which does not mark the
    session dirty; only user edits do. save() writes back through the graph.
    """

    dirty_changed = Signal(bool)
    note_closed = Signal(str)

    def __init__(
        self,
        graph: NoteGraph,
        *,
        engine: HighlightEngine | None = None,
        indent_width: int = INDENT_WIDTH,
        max_heading_level: int = MAX_HEADING_LEVEL,
        parent: QObject | None = None,
    ):
        super().__init__(parent)
        self.graph = graph
        self.engine = engine if engine is not None else HighlightEngine()
        self.model = LineModel(parent=self)
        self.editor = StructuralEditor(
            self.model,
            indent_width=indent_width,
            max_heading_level=max_heading_level,
        )

        self.note_id: str | None = None
        self._dirty = False
        self._last_saved_text = ""

        self.model.content_changed.connect(self._on_content_changed)
        self.graph.note_deleted.connect(self._on_note_deleted)

    @classmethod
    def from_settings(cls, graph: NoteGraph, settings: QSettings) -> "EditingSession":
        return cls(graph, **editor_options(settings))

    @property
    def dirty(self) -> bool:
        return self._dirty

    # ───────────────────────── navigation ─────────────────────────

    def open(self, note_id: str) -> bool:
        if note_id not in self.graph:
            log.warning("Open failed, note not found: id=%s", note_id)
            return False

        self.flush()
        note = self.graph.require(note_id)
        self.note_id = note.id
        self._last_saved_text = note.content
        self.model.set_content(note.content)
        self._set_dirty(False)
        log.info("Note opened: id=%s title=%s", note.id, note.title)
        return True

    def open_or_create_by_title(self, title: str) -> Note:
        """Follow a wiki link: open the note with that title, creating it if missing."""
        note = self.graph.resolve_title(title)
        if note is None:
            log.info("Note does not exist, creating: %s", title)
            note = self.graph.create(title)
        self.open(note.id)
        return note

    def close(self) -> None:
        self.flush()
        self._drop_current()

    # ───────────────────────── editing ─────────────────────────

    def apply(self, intent: EditIntent) -> EditResult:
        return self.editor.apply(intent)

    def text(self) -> str:
        return self.model.content()

    def current_note(self) -> Optional[Note]:
        if self.note_id is None:
            return None
        return self.graph.get(self.note_id)

    def highlight_line(self, index: int) -> list[Span]:
        return self.engine.highlight_line(self.model.line(index))

    def backlinks(self) -> list[Note]:
        if self.note_id is None:
            return []
        refs = (self.graph.get(i) for i in self.graph.backlinks_of(self.note_id))
        return sorted((n for n in refs if n is not None), key=lambda n: n.title.casefold())

    # ───────────────────────── saving ─────────────────────────

    def save(self) -> bool:
        """Write the buffer back if the user changed it. Returns True if a write happened."""
        if self.note_id is None or not self._dirty:
            return False
        return self._write_back()

    def flush(self) -> bool:
        """
        Save before switching notes, even if the dirty flag was missed:
        compares the buffer with the last saved text instead.
        """
        if self.note_id is None:
            return False
        return self._write_back()

    def _write_back(self) -> bool:
        text = self.model.content()
        if text == self._last_saved_text:
            self._set_dirty(False)
            return False

        if not self.graph.set_content(self.note_id, text):
            log.warning("Save skipped, note no longer exists: id=%s", self.note_id)
            return False

        log.info("Note saved: id=%s", self.note_id)
        self._last_saved_text = text
        self._set_dirty(False)
        return True

    # ───────────────────────── internals ─────────────────────────

    @Slot()
    def _on_content_changed(self) -> None:
        self._set_dirty(True)

    @Slot(str)
    def _on_note_deleted(self, note_id: str) -> None:
        if note_id == self.note_id:
            log.info("Open note was deleted: id=%s", note_id)
            self._drop_current()

    def _drop_current(self) -> None:
        closed = self.note_id
        self.note_id = None
        self._last_saved_text = ""
        self.model.set_content("")
        self._set_dirty(False)
        if closed is not None:
            self.note_closed.emit(closed)

    def _set_dirty(self, value: bool) -> None:
        if value != self._dirty:
            self._dirty = value
            self.dirty_changed.emit(value)
