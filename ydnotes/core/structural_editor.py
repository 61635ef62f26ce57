from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from enum import Enum

from ydnotes.settings import APP_NAME, INDENT_WIDTH, MAX_HEADING_LEVEL

from .errors import ReentrantEditError
from .line_model import LineModel

log = logging.getLogger(APP_NAME)

BULLET_LINE_RE = re.compile(r"^(\s*)([-*+])\s+(.*)$")
BULLET_PREFIX_RE = re.compile(r"^\s*[-*+]\s+")
HEADING_PREFIX_RE = re.compile(r"^#+\s+")
LEADING_WS_RE = re.compile(r"^\s*")


class EditAction(Enum):
    TAB = "tab"
    SHIFT_TAB = "shift_tab"
    ENTER = "enter"
    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"
    HEADING = "heading"
    BULLET = "bullet"


INLINE_MARKERS = {
    EditAction.BOLD: "**",
    EditAction.ITALIC: "*",
    EditAction.CODE: "`",
}


@dataclass(frozen=True, order=True)
class Cursor:
    line: int
    column: int


@dataclass(frozen=True)
class EditIntent:
    """
    One editing gesture plus the cursor it was issued at.

    `anchor` is the other end of the selection; the selection is active when
    anchor is set and differs from cursor. `level` is used by HEADING only.
    """
    action: EditAction
    cursor: Cursor
    anchor: Cursor | None = None
    level: int = 1


@dataclass(frozen=True)
class EditResult:
    cursor: Cursor
    anchor: Cursor | None = None


class StructuralEditor:
    """
    Applies outline-editor gestures to a LineModel.

    Every intent runs inside one LineModel.batch(), so listeners see a single
    content_changed per intent. Cursor and anchor positions outside the
    buffer are clamped to it.
    """

    def __init__(
        self,
        model: LineModel,
        *,
        indent_width: int = INDENT_WIDTH,
        max_heading_level: int = MAX_HEADING_LEVEL,
    ):
        self.model = model
        self.indent_width = max(1, int(indent_width))
        self.max_heading_level = max(1, int(max_heading_level))
        self._applying = False
        self._handlers = {
            EditAction.TAB: self._tab,
            EditAction.SHIFT_TAB: self._shift_tab,
            EditAction.ENTER: self._enter,
            EditAction.BULLET: self._bullet,
            EditAction.HEADING: self._heading,
            EditAction.BOLD: self._wrap,
            EditAction.ITALIC: self._wrap,
            EditAction.CODE: self._wrap,
        }

    # ───────────────────────── public API ─────────────────────────

    def apply(self, intent: EditIntent) -> EditResult:
        if self._applying:
            raise ReentrantEditError(
                f"{intent.action.value} issued while another edit is being applied"
            )

        cursor = self.clamp(intent.cursor)
        anchor = self.clamp(intent.anchor) if intent.anchor is not None else None
        if anchor == cursor:
            anchor = None

        log.debug("edit: action=%s cursor=%s anchor=%s", intent.action.value, cursor, anchor)

        self._applying = True
        try:
            with self.model.batch():
                return self._handlers[intent.action](intent, cursor, anchor)
        finally:
            self._applying = False

    def clamp(self, pos: Cursor) -> Cursor:
        line = min(max(pos.line, 0), self.model.line_count() - 1)
        column = min(max(pos.column, 0), len(self.model.line(line)))
        return Cursor(line, column)

    @staticmethod
    def is_bullet_line(text: str) -> bool:
        return BULLET_LINE_RE.match(text) is not None

    # ───────────────────────── indentation ─────────────────────────

    def _tab(self, intent, cursor: Cursor, anchor: Cursor | None) -> EditResult:
        indent = " " * self.indent_width

        if anchor is None:
            text = self.model.line(cursor.line)
            col = cursor.column
            self.model.replace_line(cursor.line, text[:col] + indent + text[col:])
            return EditResult(replace(cursor, column=col + len(indent)))

        for i in _selected_lines(cursor, anchor):
            self.model.replace_line(i, indent + self.model.line(i))
        return EditResult(
            replace(cursor, column=cursor.column + len(indent)),
            replace(anchor, column=anchor.column + len(indent)),
        )

    def _shift_tab(self, intent, cursor: Cursor, anchor: Cursor | None) -> EditResult:
        targets = _selected_lines(cursor, anchor) if anchor is not None else [cursor.line]

        removed: dict[int, int] = {}
        for i in targets:
            text = self.model.line(i)
            n = _leading_spaces(text, limit=self.indent_width)
            if n:
                self.model.replace_line(i, text[n:])
            removed[i] = n

        def shift(pos: Cursor) -> Cursor:
            return replace(pos, column=max(0, pos.column - removed.get(pos.line, 0)))

        return EditResult(shift(cursor), shift(anchor) if anchor is not None else None)

    # ───────────────────────── enter / lists ─────────────────────────

    def _enter(self, intent, cursor: Cursor, anchor: Cursor | None) -> EditResult:
        if anchor is not None:
            cursor = self._delete_range(*sorted((cursor, anchor)))

        row = cursor.line
        text = self.model.line(row)

        m = BULLET_LINE_RE.match(text)
        if m and not m.group(3).strip():
            # Enter on an empty bullet ends the list.
            if row == 0:
                self.model.replace_line(0, "")
                return EditResult(Cursor(0, 0))
            self.model.delete_line(row)
            prev = row - 1
            return EditResult(Cursor(prev, len(self.model.line(prev))))

        if m:
            prefix = f"{m.group(1)}{m.group(2)} "
        else:
            prefix = " " * _leading_spaces(text)

        head, tail = text[:cursor.column], text[cursor.column:]
        self.model.replace_line(row, head)
        self.model.insert_line(row + 1, prefix + tail)
        return EditResult(Cursor(row + 1, len(prefix)))

    def _bullet(self, intent, cursor: Cursor, anchor: Cursor | None) -> EditResult:
        targets = _selected_lines(cursor, anchor) if anchor is not None else [cursor.line]

        inserted_at: dict[int, int] = {}
        for i in targets:
            text = self.model.line(i)
            if BULLET_PREFIX_RE.match(text):
                continue
            ws = LEADING_WS_RE.match(text).group(0)
            self.model.replace_line(i, ws + "- " + text[len(ws):])
            inserted_at[i] = len(ws)

        def shift(pos: Cursor) -> Cursor:
            at = inserted_at.get(pos.line)
            if at is None or pos.column < at:
                return pos
            return replace(pos, column=pos.column + 2)

        return EditResult(shift(cursor), shift(anchor) if anchor is not None else None)

    # ───────────────────────── formatting ─────────────────────────

    def _heading(self, intent, cursor: Cursor, anchor: Cursor | None) -> EditResult:
        level = min(max(int(intent.level), 1), self.max_heading_level)

        text = self.model.line(cursor.line).strip()
        m = HEADING_PREFIX_RE.match(text)
        body = text[m.end():] if m else text

        new_text = "#" * level + " " + body
        self.model.replace_line(cursor.line, new_text)
        return EditResult(Cursor(cursor.line, len(new_text)))

    def _wrap(self, intent, cursor: Cursor, anchor: Cursor | None) -> EditResult:
        marker = INLINE_MARKERS[intent.action]

        if anchor is None:
            text = self.model.line(cursor.line)
            col = cursor.column
            self.model.replace_line(cursor.line, text[:col] + marker * 2 + text[col:])
            return EditResult(replace(cursor, column=col + len(marker)))

        start, end = sorted((cursor, anchor))
        # closing marker first so the start column stays valid
        text = self.model.line(end.line)
        self.model.replace_line(end.line, text[:end.column] + marker + text[end.column:])
        text = self.model.line(start.line)
        self.model.replace_line(start.line, text[:start.column] + marker + text[start.column:])

        end_col = end.column + len(marker)
        if start.line == end.line:
            end_col += len(marker)
        return EditResult(Cursor(end.line, end_col))

    # ───────────────────────── helpers ─────────────────────────

    def _delete_range(self, start: Cursor, end: Cursor) -> Cursor:
        head = self.model.line(start.line)[:start.column]
        tail = self.model.line(end.line)[end.column:]
        for i in range(end.line, start.line, -1):
            self.model.delete_line(i)
        self.model.replace_line(start.line, head + tail)
        return start


def _selected_lines(cursor: Cursor, anchor: Cursor) -> list[int]:
    first, last = sorted((cursor.line, anchor.line))
    return list(range(first, last + 1))


def _leading_spaces(text: str, *, limit: int | None = None) -> int:
    n = len(text) - len(text.lstrip(" "))
    return n if limit is None else min(n, limit)
