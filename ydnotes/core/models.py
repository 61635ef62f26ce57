from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone


def generate_note_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Note:
    id: str
    title: str
    content: str = ""
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)


@dataclass(frozen=True)
class Link:
    """Directed edge: source note -> title it mentions as [[target_title]]."""
    source_id: str
    target_title: str


def new_note(title: str, *, note_id: str = "") -> Note:
    title = (title or "").strip() or "Untitled Note"
    now = utcnow()
    return Note(
        id=note_id or generate_note_id(),
        title=title,
        content=f"# {title}\n\n",
        created_at=now,
        updated_at=now,
    )


WELCOME_TITLE = "Welcome to YD-Notes"

WELCOME_CONTENT = (
    "# Welcome to YD-Notes\n\n"
    "This is your first note. You can edit it to get started.\n\n"
    "## Features\n\n"
    "- Bullet lists\n"
    "- Nested lists\n"
    "  - Like this one\n"
    "  - And this one\n"
    "- Markdown formatting\n"
    "- Wiki-style links: [[Another Note]]\n\n"
    "## Tips\n\n"
    "- Use **bold** for emphasis\n"
    "- Use *italic* for subtle emphasis\n"
    "- Use `code` for inline code\n"
    "- Use # for headings\n"
    "- Use [[brackets]] for page links\n"
)


def welcome_note() -> Note:
    note = new_note(WELCOME_TITLE)
    note.content = WELCOME_CONTENT
    return note
