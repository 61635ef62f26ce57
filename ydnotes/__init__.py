from .core.errors import (
    DuplicateNoteError,
    MalformedRecordError,
    NoteNotFound,
    NotesError,
    PersistenceError,
    ReentrantEditError,
)
from .core.highlight import DEFAULT_RULES, HighlightEngine, HighlightRule, Span, TextStyle
from .core.line_model import LineModel
from .core.models import Link, Note, generate_note_id, new_note
from .core.note_graph import NoteGraph
from .core.structural_editor import Cursor, EditAction, EditIntent, EditResult, StructuralEditor
from .core.wikilinks import extract_links
from .services.editing_session import EditingSession
from .services.notebook import Notebook
from .vault.store import JsonNoteStore

__all__ = [
    "NotesError",
    "NoteNotFound",
    "DuplicateNoteError",
    "PersistenceError",
    "MalformedRecordError",
    "ReentrantEditError",
    "TextStyle",
    "HighlightRule",
    "Span",
    "HighlightEngine",
    "DEFAULT_RULES",
    "LineModel",
    "Note",
    "Link",
    "new_note",
    "generate_note_id",
    "NoteGraph",
    "Cursor",
    "EditAction",
    "EditIntent",
    "EditResult",
    "StructuralEditor",
    "extract_links",
    "EditingSession",
    "Notebook",
    "JsonNoteStore",
]
