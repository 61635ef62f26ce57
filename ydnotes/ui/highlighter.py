from __future__ import annotations

from PySide6.QtGui import QColor, QFont, QSyntaxHighlighter, QTextCharFormat, QTextDocument

from ydnotes.core.highlight import HighlightEngine, TextStyle


BOLD_WEIGHT = QFont.Weight.Bold.value


def to_char_format(style: TextStyle) -> QTextCharFormat:
    fmt = QTextCharFormat()
    if style.bold:
        fmt.setFontWeight(BOLD_WEIGHT)
    if style.italic:
        fmt.setFontItalic(True)
    if style.underline:
        fmt.setUnderlineStyle(QTextCharFormat.UnderlineStyle.SingleUnderline)
    if style.foreground:
        fmt.setForeground(QColor(style.foreground))
    if style.background:
        fmt.setBackground(QColor(style.background))
    if style.font_family:
        fmt.setFontFamilies([style.font_family])
    if style.point_size:
        fmt.setFontPointSize(style.point_size)
    return fmt


class MarkdownHighlighter(QSyntaxHighlighter):
    """Paints HighlightEngine spans onto a QTextDocument, one block (line) at a time."""

    def __init__(self, document: QTextDocument, *, engine: HighlightEngine | None = None):
        super().__init__(document)
        self.engine = engine if engine is not None else HighlightEngine()
        # formats are built once per distinct style
        self._formats: dict[TextStyle, QTextCharFormat] = {}

    def format_for(self, style: TextStyle) -> QTextCharFormat:
        fmt = self._formats.get(style)
        if fmt is None:
            fmt = self._formats[style] = to_char_format(style)
        return fmt

    def highlightBlock(self, text: str) -> None:
        for span in self.engine.highlight_line(text):
            self.setFormat(span.start, span.length, self.format_for(span.style))
