"""Modal editing: normal, insert, visual and command modes driven by key events."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from minivim.document import Document, Move
from minivim.document import copy_line as _copy_line
from minivim.document import delete_line as _delete_line
from minivim.document import indent as _indent

ESCAPE = "Escape"
RETURN = "Return"
BACKSPACE = "Backspace"
TAB = "Tab"
LEFT = "Left"
RIGHT = "Right"
UP = "Up"
DOWN = "Down"

DOUBLE_PRESS_WINDOW = 1.5
"""Seconds within which the second key of ``dd`` or ``yy`` must follow the first."""

_MOTIONS = {
    "H": Move.LEFT,
    "J": Move.DOWN,
    "K": Move.UP,
    "L": Move.RIGHT,
    "$": Move.END_OF_LINE,
    "0": Move.START_OF_LINE,
    "B": Move.PREVIOUS_WORD,
    "W": Move.NEXT_WORD,
}

_ARROWS = {LEFT: Move.LEFT, RIGHT: Move.RIGHT, UP: Move.UP, DOWN: Move.DOWN}


@dataclass(frozen=True)
class KeyEvent:
    """A key press: ``key`` names the key, ``text`` is the character it types, if any."""

    key: str
    text: str = ""

    @classmethod
    def char(cls, ch: str) -> "KeyEvent":
        """The event for typing the single character ``ch``."""
        return cls(key=ch.upper() if ch.isalpha() else ch, text=ch)


class QuitRequested(Exception):
    """Raised when a command asks the editor to exit."""


class Focus(enum.Enum):
    """Which input field receives typed text."""

    TEXT = "text"
    COMMAND = "command"


class Editor:
    """Holds the editing modes and turns key events into edits on a document."""

    def __init__(
        self,
        document: Document | None = None,
        path: str | Path | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.document = document if document is not None else Document()
        self.path = path
        self.clock = clock
        self.esc_mode = False
        self.ins_mode = True
        self.cmd_mode = False
        self.vis_mode = False
        self.label = "INS"
        self.command = ""
        self.focus = Focus.TEXT
        self.register = ""
        self.indent_level = 0
        self._paste_at_line_start = False
        self._selection_start = 0
        self._timers: dict[str, float | None] = {"d": None, "y": None}

    def handle_key(self, event: KeyEvent) -> bool:
        """Process a key; return True if a binding consumed it, False if it was typed."""
        handlers = (
            self._command_key,
            self._trigger_insert,
            self._trigger_escape,
            self._visual_key,
            self._bindings,
        )
        if any(handler(event) for handler in handlers):
            return True
        self._type(event)
        return False

    def load_file(self) -> None:
        """Insert the contents of the editor's file and put the cursor at the start."""
        if self.path is None:
            return
        try:
            text = Path(self.path).read_text(encoding="utf-8", errors="replace")
        except OSError:
            return
        self.document.insert_text(text)
        self.document.move(Move.START)

    def write_file(self) -> None:
        """Replace the editor's file with the document text."""
        if self.path is None:
            raise ValueError("no file name")
        Path(self.path).write_text(self.document.text, encoding="utf-8")

    def delete_line(self) -> None:
        """Delete the line under the cursor."""
        _delete_line(self.document)

    def copy_line(self) -> None:
        """Yank the line under the cursor into the register."""
        yanked = _copy_line(self.document)
        if yanked is not None:
            self.register = yanked
            self._paste_at_line_start = True

    def _command_key(self, event: KeyEvent) -> bool:
        if self.esc_mode and event.text == ":":
            self.label = "CMD"
            self.cmd_mode = True
            self.focus = Focus.COMMAND
            return True
        if self.esc_mode and self.cmd_mode and event.key == RETURN:
            command = self.command
            if command == "q":
                raise QuitRequested(command)
            if command in ("w", "wq"):
                if self.path is not None:
                    self.write_file()
                if command == "wq":
                    raise QuitRequested(command)
                self.command = ""
                self.focus = Focus.TEXT
            return True
        return False

    def _trigger_insert(self, event: KeyEvent) -> bool:
        if self.esc_mode and not self.cmd_mode and event.text == "i":
            self.label = "INS"
            self.esc_mode = False
            self.ins_mode = True
            self.focus = Focus.TEXT
            return True
        return False

    def _trigger_escape(self, event: KeyEvent) -> bool:
        if event.key != ESCAPE:
            return False
        self.label = "NRM"
        if not self.esc_mode:
            self.esc_mode = True
        elif self.cmd_mode:
            self.cmd_mode = False
            self.command = ""
            self.focus = Focus.TEXT
        elif self.vis_mode:
            self.vis_mode = False
            self.focus = Focus.TEXT
        return True

    def _visual_key(self, event: KeyEvent) -> bool:
        doc = self.document
        if event.text == "v" and not self.cmd_mode:
            if self.vis_mode:
                self.vis_mode = False
                self.label = "NRM"
                return True
            self.label = "Vis"
            self.vis_mode = True
            self._selection_start = doc.anchor
            return True
        if event.text == "y" and self.vis_mode:
            end = doc.position
            doc.set_position(min(self._selection_start, len(doc.text)))
            doc.set_position(end, keep_anchor=True)
            self.register = doc.selected_text()
            doc.clear_selection()
            self.vis_mode = False
            self.label = "NRM"
            return True
        return False

    def _bindings(self, event: KeyEvent) -> bool:
        doc = self.document
        if self.ins_mode:
            if event.text == "}":
                doc.move(Move.LEFT)
                doc.delete_char()
            elif event.key == RETURN:
                if doc.block_text().endswith(("{", "}")) or self.indent_level > 0:
                    self.indent_level = _indent(doc, self.indent_level)
                    return True
        if not self.esc_mode or self.cmd_mode:
            return False
        key = event.key
        if key in _MOTIONS:
            doc.move(_MOTIONS[key])
        elif key == "P":
            self._paste()
        elif key == "U":
            doc.undo()
        elif key == "O":
            self._open_line()
        elif key == "D":
            self._double_press("d", self.delete_line)
        elif key == "Y":
            self._double_press("y", self.copy_line)
        return True

    def _paste(self) -> None:
        if self._paste_at_line_start:
            self.document.move(Move.START_OF_LINE)
            self._paste_at_line_start = False
        self.document.insert_text(self.register)

    def _open_line(self) -> None:
        self.document.move(Move.END_OF_LINE)
        self.document.insert_text("\n" + "\t" * self.indent_level)
        self.esc_mode = False
        self.ins_mode = True
        self.label = "INS"

    def _double_press(self, name: str, action: Callable[[], None]) -> None:
        started = self._timers[name]
        if started is None:
            self._timers[name] = self.clock()
            return
        self._timers[name] = None
        if self.clock() - started <= DOUBLE_PRESS_WINDOW:
            action()

    def _type(self, event: KeyEvent) -> None:
        if self.focus is Focus.COMMAND:
            if event.key == BACKSPACE:
                self.command = self.command[:-1]
            elif event.text:
                self.command += event.text
            return
        doc = self.document
        if event.key == RETURN:
            doc.insert_text("\n")
        elif event.key == TAB:
            doc.insert_text("\t")
        elif event.key == BACKSPACE:
            doc.delete_previous_char()
        elif event.key in _ARROWS:
            doc.move(_ARROWS[event.key])
        elif event.text:
            doc.insert_text(event.text)