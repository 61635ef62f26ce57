from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class TextStyle:
    """Visual attributes of a span; None means "leave as is"."""
    bold: bool = False
    italic: bool = False
    underline: bool = False
    foreground: str | None = None
    background: str | None = None
    font_family: str | None = None
    point_size: float | None = None


@dataclass(frozen=True)
class HighlightRule:
    name: str
    pattern: re.Pattern
    style: TextStyle

    @classmethod
    def compile(cls, name: str, pattern: str, style: TextStyle) -> "HighlightRule":
        return cls(name=name, pattern=re.compile(pattern), style=style)


@dataclass(frozen=True)
class Span:
    start: int
    length: int
    style: TextStyle
    rule: str

    @property
    def end(self) -> int:
        return self.start + self.length


# ───────────────────────── default palette ─────────────────────────

HEADING_STYLE = TextStyle(bold=True, foreground="#1a202c", point_size=16)
HEADING2_STYLE = TextStyle(bold=True, foreground="#1a202c", point_size=14)
HEADING3_STYLE = TextStyle(bold=True, foreground="#1a202c", point_size=12)
BOLD_STYLE = TextStyle(bold=True, foreground="#1a202c")
ITALIC_STYLE = TextStyle(italic=True)
BULLET_STYLE = TextStyle(bold=True, foreground="#4a5568")
CODE_STYLE = TextStyle(font_family="Consolas", foreground="#2d3748", background="#f7fafc")
LINK_STYLE = TextStyle(underline=True, foreground="#3182ce")
QUOTE_STYLE = TextStyle(italic=True, foreground="#4a5568")

# Evaluation order is part of the contract: later rules paint over earlier ones.
DEFAULT_RULES: tuple[HighlightRule, ...] = (
    HighlightRule.compile("heading1", r"^#\s+.+$", HEADING_STYLE),
    HighlightRule.compile("heading2", r"^##\s+.+$", HEADING2_STYLE),
    HighlightRule.compile("heading3", r"^###\s+.+$", HEADING3_STYLE),
    HighlightRule.compile("bold", r"\*\*(.+?)\*\*", BOLD_STYLE),
    HighlightRule.compile("italic", r"\*(.+?)\*", ITALIC_STYLE),
    HighlightRule.compile("bullet", r"^\s*[-*+]\s+", BULLET_STYLE),
    HighlightRule.compile("code", r"`([^`]+)`", CODE_STYLE),
    HighlightRule.compile("link", r"\[([^\[\]]+)\]\(([^()]+)\)", LINK_STYLE),
    HighlightRule.compile("wikilink", r"\[\[([^\[\]]+)\]\]", LINK_STYLE),
    HighlightRule.compile("quote", r"^>\s+.+$", QUOTE_STYLE),
)


class HighlightEngine:
    """
    Maps one line of markdown to style spans.

    Rules run in order over the whole line and every match becomes a span;
    spans from different rules may overlap and are never merged. No state is
    kept between calls, so a line never depends on its neighbours.
    """

    def __init__(self, rules: Iterable[HighlightRule] = DEFAULT_RULES):
        self._rules: tuple[HighlightRule, ...] = tuple(rules)

    @property
    def rules(self) -> tuple[HighlightRule, ...]:
        return self._rules

    def highlight_line(self, text: str) -> list[Span]:
        spans: list[Span] = []
        for rule in self._rules:
            for m in rule.pattern.finditer(text):
                length = m.end() - m.start()
                if length:
                    spans.append(Span(m.start(), length, rule.style, rule.name))
        return spans

    def highlight(self, text: str) -> list[list[Span]]:
        return [self.highlight_line(line) for line in text.split("\n")]
