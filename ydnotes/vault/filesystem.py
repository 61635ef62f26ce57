# ydnotes/vault/filesystem.py

from __future__ import annotations

import os
import uuid
from datetime import datetime
from pathlib import Path

from ydnotes.settings import RECOVERY_DIR


# ───────────────────────── public API ─────────────────────────

def atomic_write_text(
    path: Path,
    text: str,
    *,
    encoding: str = "utf-8",
) -> None:
    """
    Write the notes file so readers see either the old or the new document.

    The text goes to a hidden sibling file that is synced to disk and then
    renamed over `path`; the sibling is removed if anything fails.
    """
    path = Path(path)
    parent = path.parent
    parent.mkdir(parents=True, exist_ok=True)

    tmp_path = parent / f".{path.name}.tmp-{uuid.uuid4().hex}"

    try:
        with open(tmp_path, "w", encoding=encoding, newline="") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()


def write_recovery_copy(
    original: Path,
    text: str,
    *,
    recovery_dir: Path = RECOVERY_DIR,
) -> Path:
    """
    Keep the unsaved notes document next to the other recovery copies
    (~/.ydnotes/recovery/ by default) when the notes file cannot be written.
    Returns the path written.
    """
    original = Path(original)
    stem = original.stem or "notes"
    ts = datetime.now().strftime("%Y%m%d-%H%M%S")

    recovery_path = Path(recovery_dir) / f"{stem}.recovery.{ts}{original.suffix or '.json'}"
    atomic_write_text(recovery_path, text, encoding="utf-8")
    return recovery_path
