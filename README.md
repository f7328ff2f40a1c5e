# minivim

A small modal text editor for the terminal, with vi-style keys, brace-driven
tab indentation and syntax highlighting for C and C++ sources. The screen is
drawn with the standard library's `curses` module, so it runs where `curses`
is available (Linux, macOS and other POSIX systems).

## Installation

```
pip install .
```

## Usage

```
minivim path/to/file.c
```

With exactly one argument the file is loaded into the buffer and the cursor
is put at its start. With no argument (or more than one) the editor opens an
empty buffer that has no file name. The editor starts in insert mode. The
bottom of the screen shows the current mode (`INS`, `NRM`, `Vis`, `CMD`) and,
in command mode, the command being typed after a `:`.

## Modes and keys

| Mode                  | Key             | Action                                                        |
|-----------------------|-----------------|---------------------------------------------------------------|
| any                   | `Esc`           | go to normal mode; a second `Esc` leaves command or visual mode |
| normal                | `i`             | go to insert mode                                             |
| normal                | `h` `j` `k` `l` | move left, down, up, right                                    |
| normal                | `0` / `$`       | start / end of line                                           |
| normal                | `b` / `w`       | previous word / next word                                     |
| normal                | `o`             | open a new line below, indented, and go to insert mode        |
| normal                | `dd`            | delete the current line (second press within 1.5 s)           |
| normal                | `yy`            | copy the current line (second press within 1.5 s)             |
| normal                | `p`             | paste the last copy; a copied line goes in at the line start  |
| normal                | `u`             | undo the last edit                                            |
| any but command       | `v`             | start visual mode, or leave it if already in it               |
| visual                | `y`             | copy the text from where `v` was pressed to the cursor        |
| normal                | `:`             | enter command mode                                            |

In insert mode the arrow keys move the cursor, and Backspace, Tab and Enter
edit as usual. Note that `v` is caught as the visual-mode key in every mode
except command mode, so it cannot be typed into the buffer.

### Commands

Type a command after `:` and press Enter:

- `w` — write the buffer to its file (nothing is written when the buffer has no file name)
- `wq` — write the buffer and quit
- `q` — quit without writing

Any other command is ignored.

## Indentation

In insert mode, pressing Enter on a line that ends in `{` starts the next
line one tab deeper; on a line ending in `}` one tab shallower. While the
level is above zero every Enter keeps it. Typing `}` first removes the
character before the cursor (the last indent tab), then inserts the brace.

## Highlighting

C and C++ keywords, `Q`-prefixed class names, string literals, function
names, `<header>` names, preprocessor directives and both `//` and
`/* ... */` comments (also across lines) are highlighted.

## Library use

The modules can be used without the terminal front end.

```python
from minivim.document import Document, Move, copy_line, delete_line
from minivim.editor import Editor, KeyEvent, QuitRequested
from minivim.highlight import SyntaxHighlighter

doc = Document("int main(void)\n{\n}\n")
print(copy_line(doc))            # 'int main(void)\n'

editor = Editor(Document("hello"))
editor.handle_key(KeyEvent("Escape"))
editor.handle_key(KeyEvent.char("l"))   # cursor moves right
print(editor.label)                     # 'NRM'

for line_spans in SyntaxHighlighter().highlight("int x = f(1); // note"):
    for span in line_spans:
        print(span.start, span.length, span.style.foreground)
```

- `minivim.document` — `Document` (text, cursor, selection, undo) and the
  line edits `delete_line`, `copy_line` and `indent`.
- `minivim.editor` — `Editor`, which turns `KeyEvent`s into edits; the `q`
  and `wq` commands raise `QuitRequested`.
- `minivim.highlight` — `SyntaxHighlighter`, giving `Span`s with a `Style`
  for each line.
- `minivim.app` — the curses front end; `translate_key`, `build_editor` and
  `main`.

## What it does not do

There is no `:w` with a file name, no saving of an unnamed buffer, no search,
no counts before commands, no redo, no mouse and no configuration. Undo
covers edits to the text only.

## Running the tests

```
pip install .[test]
pytest
```