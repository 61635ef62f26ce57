from .filesystem import atomic_write_text, write_recovery_copy
from .store import JsonNoteStore, dump_notes, parse_notes

__all__ = [
    "atomic_write_text",
    "write_recovery_copy",
    "JsonNoteStore",
    "dump_notes",
    "parse_notes",
]
