"""Regex-driven syntax highlighting for C-like source text, one line at a time."""

from __future__ import annotations

import re
from dataclasses import dataclass

NO_STATE = -1
IN_COMMENT = 1

KEYWORDS = (
    "char", "class", "const", "double", "enum", "explicit",
    "friend", "inline", "int", "long", "namespace", "operator",
    "private", "protected", "public", "short", "signals", "signed",
    "slots", "static", "struct", "template", "typedef", "typename",
    "union", "unsigned", "virtual", "void", "volatile", "bool",
)


@dataclass(frozen=True)
class Style:
    """Character formatting applied to a highlighted span."""

    foreground: str
    bold: bool = False
    italic: bool = False


@dataclass(frozen=True)
class Span:
    """A run of characters within a line and the style given to it."""

    start: int
    length: int
    style: Style

    @property
    def end(self) -> int:
        return self.start + self.length


class SyntaxHighlighter:
    """Produces style spans for lines of text, carrying comment state across lines.

    Spans are returned in the order they are applied; a later span overrides
    an earlier one where they overlap.
    """

    def __init__(self) -> None:
        self.keyword_style = Style("green", bold=True)
        self.class_style = Style("magenta", bold=True)
        self.quotation_style = Style("cyan")
        self.function_style = Style("yellow", italic=True)
        self.angle_brackets_style = Style("dark_green", italic=True)
        self.include_style = Style("dark_red", italic=True)
        self.single_line_comment_style = Style("red")
        self.multi_line_comment_style = Style("red")

        rules: list[tuple[re.Pattern[str], Style]] = [
            (re.compile(rf"\b{word}\b"), self.keyword_style) for word in KEYWORDS
        ]
        rules += [
            (re.compile(r"\bQ[A-Za-z]+\b"), self.class_style),
            (re.compile(r"\".*\""), self.quotation_style),
            (re.compile(r"\b[A-Za-z0-9_]+(?=\()"), self.function_style),
            (re.compile(r"<[A-Za-z0-9]+(\.h)?p*>"), self.angle_brackets_style),
            (re.compile(r"#[A-Za-z0-9]+ "), self.include_style),
            (re.compile(r"//[^\n]*"), self.single_line_comment_style),
        ]
        self.rules = rules
        self._comment_start = re.compile(r"/\*")
        self._comment_end = re.compile(r"\*/")

    def _find_comment_start(self, text: str, pos: int) -> int:
        match = self._comment_start.search(text, pos)
        return match.start() if match else -1

    def highlight_block(self, text: str, previous_state: int = NO_STATE) -> tuple[list[Span], int]:
        """Highlight one line; return its spans and the state to hand to the next line."""
        spans = [
            Span(match.start(), match.end() - match.start(), style)
            for pattern, style in self.rules
            for match in pattern.finditer(text)
            if match.end() > match.start()
        ]

        state = NO_STATE
        start = 0 if previous_state == IN_COMMENT else self._find_comment_start(text, 0)
        while start >= 0:
            end_match = self._comment_end.search(text, start)
            if end_match is None:
                state = IN_COMMENT
                length = len(text) - start
            else:
                length = end_match.end() - start
            if length > 0:
                spans.append(Span(start, length, self.multi_line_comment_style))
            start = self._find_comment_start(text, start + length)
        return spans, state

    def highlight(self, text: str) -> list[list[Span]]:
        """Highlight every line of ``text``, returning one span list per line."""
        result = []
        state = NO_STATE
        for line in text.split("\n"):
            spans, state = self.highlight_block(line, state)
            result.append(spans)
        return result