from .errors import (
    DuplicateNoteError,
    MalformedRecordError,
    NoteNotFound,
    NotesError,
    PersistenceError,
    ReentrantEditError,
)
from .highlight import DEFAULT_RULES, HighlightEngine, HighlightRule, Span, TextStyle
from .line_model import LineModel
from .models import Link, Note, generate_note_id, new_note, welcome_note
from .note_graph import NoteGraph
from .structural_editor import Cursor, EditAction, EditIntent, EditResult, StructuralEditor
from .wikilinks import extract_links

__all__ = [
    "NotesError",
    "NoteNotFound",
    "DuplicateNoteError",
    "PersistenceError",
    "MalformedRecordError",
    "ReentrantEditError",
    "DEFAULT_RULES",
    "HighlightEngine",
    "HighlightRule",
    "Span",
    "TextStyle",
    "LineModel",
    "Link",
    "Note",
    "generate_note_id",
    "new_note",
    "welcome_note",
    "NoteGraph",
    "Cursor",
    "EditAction",
    "EditIntent",
    "EditResult",
    "StructuralEditor",
    "extract_links",
]
