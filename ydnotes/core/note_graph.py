from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Optional

from PySide6.QtCore import QObject, Signal

from ydnotes.settings import APP_NAME

from .errors import DuplicateNoteError, NoteNotFound
from .models import Link, Note, generate_note_id, new_note, utcnow
from .wikilinks import extract_links, links_to

log = logging.getLogger(APP_NAME)


class NoteGraph(QObject):
    """
    Source of truth for notes:
      id -> Note

    Links are not stored: they are recomputed from note content on every
    query. Backlinks match on the target's *title*, so renaming a note leaves
    links to its old title dangling.

    Notes never leave the graph by reference; every read returns a copy and
    every write goes through add/update/delete.
    """

    note_added = Signal(str)
    note_updated = Signal(str)
    note_deleted = Signal(str)
    notes_reset = Signal()

    def __init__(self, parent: QObject | None = None):
        super().__init__(parent)
        self._notes: dict[str, Note] = {}

    def __len__(self) -> int:
        return len(self._notes)

    def __contains__(self, note_id: object) -> bool:
        return note_id in self._notes

    # ───────────────────────── mutations ─────────────────────────

    def add(self, note: Note) -> str:
        note_id = note.id or generate_note_id()
        if note_id in self._notes:
            raise DuplicateNoteError(note_id)

        self._notes[note_id] = replace(note, id=note_id)
        log.debug("Note added: id=%s title=%s", note_id, note.title)
        self.note_added.emit(note_id)
        return note_id

    def create(self, title: str) -> Note:
        """New-note request: content is seeded with an H1 of the title."""
        note = new_note(title)
        self.add(note)
        return replace(note)

    def update(self, note: Note) -> bool:
        if note.id not in self._notes:
            log.debug("Update skipped, note not found: id=%s", note.id)
            return False

        # id and creation time are fixed once the note is in the graph
        created_at = self._notes[note.id].created_at
        self._notes[note.id] = replace(note, created_at=created_at, updated_at=utcnow())
        self.note_updated.emit(note.id)
        return True

    def set_content(self, note_id: str, content: str) -> bool:
        note = self._notes.get(note_id)
        if note is None:
            return False
        return self.update(replace(note, content=content))

    def set_title(self, note_id: str, title: str) -> bool:
        note = self._notes.get(note_id)
        if note is None:
            return False
        return self.update(replace(note, title=title))

    def delete(self, note_id: str) -> bool:
        if self._notes.pop(note_id, None) is None:
            return False
        log.debug("Note deleted: id=%s", note_id)
        self.note_deleted.emit(note_id)
        return True

    def replace_all(self, notes: Iterable[Note]) -> None:
        """
        Swap the whole collection in one step (used after loading from disk).
        Validation happens before the swap, so a bad input leaves the graph
        untouched.
        """
        fresh: dict[str, Note] = {}
        for note in notes:
            if not note.id:
                raise ValueError("note without id")
            if note.id in fresh:
                raise DuplicateNoteError(note.id)
            fresh[note.id] = replace(note)

        self._notes = fresh
        log.info("Notes replaced: count=%d", len(fresh))
        self.notes_reset.emit()

    # ───────────────────────── queries ─────────────────────────

    def get(self, note_id: str) -> Optional[Note]:
        note = self._notes.get(note_id)
        return replace(note) if note is not None else None

    def require(self, note_id: str) -> Note:
        note = self.get(note_id)
        if note is None:
            raise NoteNotFound(note_id)
        return note

    def list_all(self) -> list[Note]:
        return [replace(n) for n in self._notes.values()]

    def list_by_title(self) -> list[Note]:
        return sorted(self.list_all(), key=lambda n: (n.title.casefold(), n.id))

    def resolve_title(self, title: str) -> Optional[Note]:
        """Case-insensitive title lookup; first match in insertion order wins."""
        key = (title or "").strip().casefold()
        if not key:
            return None
        for note in self._notes.values():
            if note.title.strip().casefold() == key:
                return replace(note)
        return None

    def search(self, query: str) -> list[Note]:
        if not query:
            return self.list_all()

        q = query.lower()
        return [
            replace(n)
            for n in self._notes.values()
            if q in n.title.lower() or q in n.content.lower()
        ]

    def backlinks_of(self, note_id: str) -> list[str]:
        target = self._notes.get(note_id)
        if target is None:
            return []

        return [
            other.id
            for other in self._notes.values()
            if other.id != note_id and links_to(other.content, target.title)
        ]

    def links_from(self, note_id: str) -> list[Link]:
        note = self._notes.get(note_id)
        if note is None:
            return []
        return [Link(note_id, title) for title in extract_links(note.content)]

    @staticmethod
    def extract_links(content: str) -> list[str]:
        return extract_links(content)
