from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable

from ydnotes.core.errors import MalformedRecordError, PersistenceError
from ydnotes.core.models import Note
from ydnotes.settings import APP_NAME

from .filesystem import atomic_write_text

log = logging.getLogger(APP_NAME)

FORMAT_VERSION = 1


@dataclass(frozen=True)
class JsonNoteStore:
    """
    All notes in one JSON document:

        {"version": 1,
         "notes": [{"id", "title", "content", "createdAt", "updatedAt"}, ...]}

    Timestamps are ISO-8601 strings.
    """

    path: Path

    def exists(self) -> bool:
        return Path(self.path).is_file()

    def save_all(self, notes: Iterable[Note]) -> None:
        text = dump_notes(notes)
        try:
            atomic_write_text(Path(self.path), text, encoding="utf-8")
        except (OSError, UnicodeError) as e:
            raise PersistenceError(f"cannot write {self.path}: {e}") from e
        log.info("Notes saved: path=%s", self.path)

    def load_all(self) -> list[Note]:
        """
        Read every note or nothing: any malformed record fails the whole load.
        """
        try:
            text = Path(self.path).read_text(encoding="utf-8")
        except OSError as e:
            raise PersistenceError(f"cannot read {self.path}: {e}") from e
        except UnicodeDecodeError as e:
            raise MalformedRecordError(f"{self.path} is not UTF-8: {e}") from e

        notes = parse_notes(text)
        log.info("Notes loaded: path=%s count=%d", self.path, len(notes))
        return notes


# ───────────────────────── codec ─────────────────────────


def dump_notes(notes: Iterable[Note]) -> str:
    records = [
        {
            "id": n.id,
            "title": n.title,
            "content": n.content,
            "createdAt": n.created_at.isoformat(),
            "updatedAt": n.updated_at.isoformat(),
        }
        for n in notes
    ]
    return json.dumps({"version": FORMAT_VERSION, "notes": records}, ensure_ascii=False, indent=2)


def parse_notes(text: str) -> list[Note]:
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedRecordError(f"invalid JSON: {e}") from e

    if not isinstance(doc, dict) or not isinstance(doc.get("notes"), list):
        raise MalformedRecordError('expected an object with a "notes" list')

    notes: list[Note] = []
    seen: set[str] = set()
    for index, record in enumerate(doc["notes"]):
        note = _parse_record(record, index)
        if note.id in seen:
            raise MalformedRecordError(f"duplicate id {note.id!r}", index=index)
        seen.add(note.id)
        notes.append(note)
    return notes


def _parse_record(record, index: int) -> Note:
    if not isinstance(record, dict):
        raise MalformedRecordError("not an object", index=index)

    fields = {}
    for key in ("id", "title", "content", "createdAt", "updatedAt"):
        value = record.get(key)
        if not isinstance(value, str):
            raise MalformedRecordError(f"{key!r} missing or not a string", index=index)
        fields[key] = value

    if not fields["id"]:
        raise MalformedRecordError("empty id", index=index)

    return Note(
        id=fields["id"],
        title=fields["title"],
        content=fields["content"],
        created_at=_parse_timestamp(fields["createdAt"], index),
        updated_at=_parse_timestamp(fields["updatedAt"], index),
    )


def _parse_timestamp(value: str, index: int) -> datetime:
    # fromisoformat() rejects a trailing "Z" before Python 3.11
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        ts = datetime.fromisoformat(value)
    except ValueError as e:
        raise MalformedRecordError(f"bad timestamp {value!r}", index=index) from e
    # Files written without an offset are read as UTC.
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts
