"""A plain-text buffer with one cursor, and the line edits made on it."""

from __future__ import annotations

import enum
from pathlib import Path


class Move(enum.Enum):
    """Cursor movements understood by :meth:`Document.move`."""

    START = enum.auto()
    END = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    START_OF_LINE = enum.auto()
    END_OF_LINE = enum.auto()
    PREVIOUS_WORD = enum.auto()
    NEXT_WORD = enum.auto()


_WORD, _SPACE, _NEWLINE, _OTHER = range(4)


def _kind(ch: str) -> int:
    if ch.isalnum() or ch == "_":
        return _WORD
    if ch in " \t":
        return _SPACE
    if ch == "\n":
        return _NEWLINE
    return _OTHER


class Document:
    """Text with a cursor made of a position and an anchor; the span between is the selection."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.position = 0
        self.anchor = 0
        self._history: list[tuple[str, int]] = []

    @classmethod
    def from_file(cls, path) -> "Document":
        """Load a file as UTF-8 text; an unreadable file gives an empty document."""
        try:
            text = Path(path).read_text(encoding="utf-8", errors="replace")
        except OSError:
            text = ""
        return cls(text)

    @property
    def has_selection(self) -> bool:
        return self.position != self.anchor

    def _bounds(self) -> tuple[int, int]:
        return min(self.position, self.anchor), max(self.position, self.anchor)

    def _line_start(self, pos: int) -> int:
        return self.text.rfind("\n", 0, pos) + 1

    def _line_end(self, pos: int) -> int:
        end = self.text.find("\n", pos)
        return len(self.text) if end == -1 else end

    def _next_word(self, pos: int) -> int | None:
        text = self.text
        if pos >= len(text):
            return None
        if text[pos] == "\n":
            return pos + 1
        kind = _kind(text[pos])
        if kind != _SPACE:
            while pos < len(text) and _kind(text[pos]) == kind:
                pos += 1
        while pos < len(text) and _kind(text[pos]) == _SPACE:
            pos += 1
        return pos

    def _previous_word(self, pos: int) -> int | None:
        text = self.text
        if pos == 0:
            return None
        if text[pos - 1] == "\n":
            return pos - 1
        while pos > 0 and _kind(text[pos - 1]) == _SPACE:
            pos -= 1
        if pos > 0 and text[pos - 1] != "\n":
            kind = _kind(text[pos - 1])
            while pos > 0 and _kind(text[pos - 1]) == kind:
                pos -= 1
        return pos

    def _target(self, operation: Move) -> int | None:
        pos = self.position
        if operation is Move.START:
            return 0
        if operation is Move.END:
            return len(self.text)
        if operation is Move.LEFT:
            return pos - 1 if pos > 0 else None
        if operation is Move.RIGHT:
            return pos + 1 if pos < len(self.text) else None
        if operation is Move.START_OF_LINE:
            return self._line_start(pos)
        if operation is Move.END_OF_LINE:
            return self._line_end(pos)
        if operation is Move.UP:
            start = self._line_start(pos)
            if start == 0:
                return None
            prev_end = start - 1
            prev_start = self._line_start(prev_end)
            return prev_start + min(pos - start, prev_end - prev_start)
        if operation is Move.DOWN:
            end = self._line_end(pos)
            if end == len(self.text):
                return None
            next_start = end + 1
            next_end = self._line_end(next_start)
            return next_start + min(pos - self._line_start(pos), next_end - next_start)
        if operation is Move.PREVIOUS_WORD:
            return self._previous_word(pos)
        return self._next_word(pos)

    def move(self, operation: Move, keep_anchor: bool = False) -> bool:
        """Move the cursor; return False when the movement is impossible."""
        target = self._target(operation)
        if target is None:
            return False
        self.position = target
        if not keep_anchor:
            self.anchor = target
        return True

    def set_position(self, position: int, keep_anchor: bool = False) -> None:
        if not 0 <= position <= len(self.text):
            raise ValueError(f"position {position} out of range")
        self.position = position
        if not keep_anchor:
            self.anchor = position

    def _replace(self, start: int, end: int, new: str) -> None:
        self._history.append((self.text, self.position))
        self.text = self.text[:start] + new + self.text[end:]
        self.position = self.anchor = start + len(new)

    def insert_text(self, text: str) -> None:
        """Insert at the cursor, replacing any selection."""
        start, end = self._bounds()
        if not text and start == end:
            return
        self._replace(start, end, text)

    def delete_char(self) -> bool:
        if self.has_selection:
            self.remove_selected_text()
            return True
        if self.position >= len(self.text):
            return False
        self._replace(self.position, self.position + 1, "")
        return True

    def delete_previous_char(self) -> bool:
        if self.has_selection:
            self.remove_selected_text()
            return True
        if self.position == 0:
            return False
        self._replace(self.position - 1, self.position, "")
        return True

    def selected_text(self) -> str:
        start, end = self._bounds()
        return self.text[start:end]

    def remove_selected_text(self) -> None:
        start, end = self._bounds()
        if start != end:
            self._replace(start, end, "")

    def clear_selection(self) -> None:
        self.anchor = self.position

    def block_text(self) -> str:
        """Text of the line the cursor is on."""
        return self.text[self._line_start(self.position):self._line_end(self.position)]

    def undo(self) -> bool:
        """Revert the last edit; return False when there is nothing to undo."""
        if not self._history:
            return False
        self.text, position = self._history.pop()
        self.position = self.anchor = min(position, len(self.text))
        return True


def delete_line(document: Document) -> None:
    """Remove the current line's text and the line break before it."""
    document.move(Move.START_OF_LINE)
    document.move(Move.END_OF_LINE, keep_anchor=True)
    if document.has_selection:
        document.remove_selected_text()
    document.delete_previous_char()
    document.move(Move.START_OF_LINE)


def copy_line(document: Document) -> str | None:
    """Return the current line with a trailing newline, or None for an empty line."""
    old_position = document.position
    document.move(Move.START_OF_LINE)
    document.move(Move.END_OF_LINE, keep_anchor=True)
    yanked = document.selected_text() + "\n" if document.has_selection else None
    document.set_position(old_position)
    return yanked


def indent(document: Document, level: int) -> int:
    """Break the line and indent the new one with tabs; return the new indent level."""
    previous = document.block_text().strip()
    if previous.endswith("{"):
        level += 1
    elif previous.endswith("}"):
        level -= 1
    level = max(level, 0)
    document.insert_text("\n" + "\t" * level)
    return level