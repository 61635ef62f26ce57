from __future__ import annotations

import logging

from PySide6.QtCore import QSettings

from ydnotes.app_settings import notes_path
from ydnotes.core.errors import PersistenceError
from ydnotes.core.models import welcome_note
from ydnotes.core.note_graph import NoteGraph
from ydnotes.settings import APP_NAME
from ydnotes.vault.filesystem import write_recovery_copy
from ydnotes.vault.store import JsonNoteStore, dump_notes

log = logging.getLogger(APP_NAME)


class Notebook:
    """
    Ties a NoteGraph to its JSON file.

    open()  - load the file into the graph (or seed the welcome note)
    save()  - write every note back; on failure keep a recovery copy
    """

    def __init__(self, store: JsonNoteStore, graph: NoteGraph | None = None):
        self.store = store
        self.graph = graph if graph is not None else NoteGraph()

    @classmethod
    def from_settings(cls, settings: QSettings) -> "Notebook":
        return cls(JsonNoteStore(notes_path(settings)))

    def open(self) -> bool:
        """Returns True if notes came from disk, False if a fresh notebook was seeded."""
        if not self.store.exists():
            log.info("No notes file yet, seeding welcome note: path=%s", self.store.path)
            self.graph.replace_all([welcome_note()])
            return False

        # load_all() validates everything first; a bad file leaves the graph as is
        notes = self.store.load_all()
        self.graph.replace_all(notes)
        return True

    def save(self) -> None:
        notes = self.graph.list_all()
        try:
            self.store.save_all(notes)
        except PersistenceError:
            log.exception("Save failed: %s", self.store.path)
            try:
                rec = write_recovery_copy(self.store.path, dump_notes(notes))
                log.warning("Recovery copy written: %s", rec)
            except (OSError, UnicodeError):
                log.exception("Recovery copy failed too: %s", self.store.path)
            raise
