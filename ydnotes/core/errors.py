from __future__ import annotations


class NotesError(Exception):
    """Base class for every error raised by the notes core."""


class NoteNotFound(NotesError, KeyError):
    def __init__(self, note_id: str):
        super().__init__(note_id)
        self.note_id = note_id

    def __str__(self) -> str:
        return f"note not found: {self.note_id!r}"


class DuplicateNoteError(NotesError, ValueError):
    def __init__(self, note_id: str):
        super().__init__(f"note id already present: {note_id!r}")
        self.note_id = note_id


class PersistenceError(NotesError):
    """Reading or writing the notes file failed."""


class MalformedRecordError(PersistenceError):
    """The notes file parsed, but a record in it is not a valid note."""

    def __init__(self, message: str, *, index: int | None = None):
        if index is not None:
            message = f"record #{index}: {message}"
        super().__init__(message)
        self.index = index


class ReentrantEditError(NotesError, RuntimeError):
    """An edit was issued while another edit on the same buffer was still being applied."""
