"""Terminal front end: draws the editor with curses and feeds it key presses."""

from __future__ import annotations

import curses
import sys

from minivim.document import Document
from minivim.editor import (
    BACKSPACE,
    DOWN,
    ESCAPE,
    LEFT,
    RETURN,
    RIGHT,
    TAB,
    UP,
    Editor,
    Focus,
    KeyEvent,
    QuitRequested,
)
from minivim.highlight import Span, Style, SyntaxHighlighter

TAB_WIDTH = 4

_SPECIAL_CODES = {
    curses.KEY_BACKSPACE: BACKSPACE,
    curses.KEY_ENTER: RETURN,
    curses.KEY_LEFT: LEFT,
    curses.KEY_RIGHT: RIGHT,
    curses.KEY_UP: UP,
    curses.KEY_DOWN: DOWN,
}

_SPECIAL_CHARS = {
    "\x1b": ESCAPE,
    "\n": RETURN,
    "\r": RETURN,
    "\x7f": BACKSPACE,
    "\b": BACKSPACE,
    "\t": TAB,
}

_COLOR_NAMES = {
    "green": curses.COLOR_GREEN,
    "dark_green": curses.COLOR_GREEN,
    "magenta": curses.COLOR_MAGENTA,
    "cyan": curses.COLOR_CYAN,
    "yellow": curses.COLOR_YELLOW,
    "red": curses.COLOR_RED,
    "dark_red": curses.COLOR_RED,
}


def translate_key(code: int | str) -> KeyEvent | None:
    """Turn a curses key code or character into a key event, or None if it has no meaning."""
    if isinstance(code, int):
        if code in _SPECIAL_CODES:
            return KeyEvent(_SPECIAL_CODES[code])
        if not 0 <= code < 256:
            return None
        code = chr(code)
    if code in _SPECIAL_CHARS:
        return KeyEvent(_SPECIAL_CHARS[code])
    if len(code) == 1 and code.isprintable():
        return KeyEvent.char(code)
    return None


def build_editor(argv) -> Editor:
    """Create the editor; a single argument names the file to edit."""
    args = list(argv)
    path = args[0] if len(args) == 1 else None
    editor = Editor(Document(), path)
    editor.load_file()
    return editor


def _init_colors() -> dict[str, int]:
    if not curses.has_colors():
        return {}
    curses.start_color()
    try:
        curses.use_default_colors()
        background = -1
    except curses.error:
        background = curses.COLOR_BLACK
    pairs: dict[int, int] = {}
    result = {}
    for name, color in _COLOR_NAMES.items():
        if color not in pairs:
            number = len(pairs) + 1
            curses.init_pair(number, color, background)
            pairs[color] = number
        result[name] = curses.color_pair(pairs[color])
    return result


def _attr(style: Style | None, colors: dict[str, int]) -> int:
    if style is None:
        return curses.A_NORMAL
    attr = colors.get(style.foreground, curses.A_NORMAL)
    if style.bold:
        attr |= curses.A_BOLD
    if style.italic:
        attr |= getattr(curses, "A_ITALIC", 0)
    return attr


def _char_styles(line: str, spans: list[Span]) -> list[Style | None]:
    styles: list[Style | None] = [None] * len(line)
    for span in spans:
        for index in range(span.start, min(span.end, len(line))):
            styles[index] = span.style
    return styles


def _put(screen, y: int, x: int, text: str, attr: int, width: int) -> None:
    if y < 0 or x >= width - 1:
        return
    try:
        screen.addstr(y, x, text[: width - 1 - x], attr)
    except curses.error:
        pass


def _render(screen, editor: Editor, highlighter: SyntaxHighlighter, colors, top: int) -> int:
    height, width = screen.getmaxyx()
    rows = max(height - 2, 1)
    doc = editor.document
    before = doc.text[: doc.position]
    cursor_line = before.count("\n")
    cursor_col = len(before) - (before.rfind("\n") + 1)
    top = max(min(top, cursor_line), cursor_line - rows + 1)

    screen.erase()
    lines = doc.text.split("\n")[top: top + rows]
    spans = highlighter.highlight(doc.text)[top: top + rows]
    cursor = (0, 0)
    for row, (line, line_spans) in enumerate(zip(lines, spans)):
        on_cursor_line = top + row == cursor_line
        x = 0
        for column, (char, style) in enumerate(zip(line, _char_styles(line, line_spans))):
            if on_cursor_line and column == cursor_col:
                cursor = (row, x)
            cell = " " * (TAB_WIDTH - x % TAB_WIDTH) if char == "\t" else char
            _put(screen, row, x, cell, _attr(style, colors), width)
            x += len(cell)
        if on_cursor_line and cursor_col >= len(line):
            cursor = (row, x)

    _put(screen, height - 2, 0, f" {editor.label} ", curses.A_REVERSE, width)
    prompt = ":" + editor.command if editor.focus is Focus.COMMAND else editor.command
    _put(screen, height - 1, 0, prompt, curses.A_NORMAL, width)
    if editor.focus is Focus.COMMAND:
        cursor = (height - 1, len(prompt))
    try:
        screen.move(*cursor)
    except curses.error:
        pass
    screen.refresh()
    return top


def _run(screen, editor: Editor) -> None:
    curses.set_escdelay(25)
    colors = _init_colors()
    highlighter = SyntaxHighlighter()
    top = 0
    while True:
        top = _render(screen, editor, highlighter, colors, top)
        try:
            code = screen.get_wch()
        except curses.error:
            continue
        event = translate_key(code)
        if event is not None:
            editor.handle_key(event)


def main(argv=None) -> int:
    """Start the editor in the terminal; the optional argument names the file to edit."""
    if argv is None:
        argv = sys.argv[1:]
    editor = build_editor(argv)
    try:
        curses.wrapper(_run, editor)
    except QuitRequested:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())