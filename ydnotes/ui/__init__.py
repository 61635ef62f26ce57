from .highlighter import MarkdownHighlighter, to_char_format

__all__ = [
    "MarkdownHighlighter",
    "to_char_format",
]
