from __future__ import annotations

import re

# [[target]]
WIKILINK_RE = re.compile(r"\[\[([^\]]+)\]\]")


def extract_links(markdown_text: str) -> list[str]:
    """
    Return every [[...]] target in markdown_text, in order of appearance.

    Targets are returned verbatim: case is kept, duplicates are kept and
    nothing is stripped or canonicalized.
    """
    if not markdown_text:
        return []
    return [m.group(1) for m in WIKILINK_RE.finditer(markdown_text)]


def wikilink_pattern(title: str) -> re.Pattern:
    """Pattern matching the literal link [[title]]; title is escaped."""
    return re.compile(r"\[\[" + re.escape(title) + r"\]\]")


def links_to(markdown_text: str, title: str) -> bool:
    if not markdown_text or not title:
        return False
    return wikilink_pattern(title).search(markdown_text) is not None
