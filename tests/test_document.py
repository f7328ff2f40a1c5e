import pytest

from minivim.document import Document, Move, copy_line, delete_line, indent


def test_left_and_right_respect_bounds():
    doc = Document("ab")
    assert doc.move(Move.LEFT) is False
    assert doc.move(Move.RIGHT) is True
    assert doc.move(Move.RIGHT) is True
    assert doc.position == len(doc.text)
    assert doc.move(Move.RIGHT) is False


def test_up_and_down_keep_column_clamped():
    doc = Document("abcd\nxy")
    doc.set_position(3)
    assert doc.move(Move.DOWN)
    assert doc.position == len(doc.text)
    assert doc.move(Move.UP)
    assert doc.block_text() == "abcd"
    assert doc.move(Move.UP) is False


def test_down_on_last_line_fails():
    doc = Document("one\ntwo")
    doc.move(Move.END)
    assert doc.move(Move.DOWN) is False


def test_start_and_end_of_line():
    doc = Document("first\nsecond line\nthird")
    doc.set_position(doc.text.index("line"))
    doc.move(Move.START_OF_LINE)
    assert doc.position == doc.text.index("second")
    doc.move(Move.END_OF_LINE)
    assert doc.text[doc.position] == "\n"


def test_word_motions():
    doc = Document("foo, bar")
    doc.move(Move.NEXT_WORD)
    assert doc.position == doc.text.index(",")
    doc.move(Move.NEXT_WORD)
    assert doc.position == doc.text.index("bar")
    doc.move(Move.END)
    doc.move(Move.PREVIOUS_WORD)
    assert doc.position == doc.text.index("bar")


def test_selection_and_removal():
    doc = Document("hello world")
    doc.set_position(5, keep_anchor=True)
    assert doc.selected_text() == "hello"
    doc.remove_selected_text()
    assert doc.text == " world"
    assert not doc.has_selection


def test_selection_across_lines_uses_newline():
    doc = Document("ab\ncd")
    doc.move(Move.END, keep_anchor=True)
    assert doc.selected_text() == doc.text


def test_set_position_out_of_range():
    doc = Document("abc")
    with pytest.raises(ValueError):
        doc.set_position(10)
    with pytest.raises(ValueError):
        doc.set_position(-1)


def test_insert_then_undo_round_trip():
    doc = Document("abc")
    doc.set_position(1)
    doc.insert_text("XYZ")
    assert doc.text == "aXYZbc"
    assert doc.undo() is True
    assert doc.text == "abc"
    assert doc.position == 1
    assert doc.undo() is False


def test_insert_replaces_selection():
    doc = Document("abc")
    doc.set_position(3, keep_anchor=True)
    doc.insert_text("z")
    assert doc.text == "z"


def test_delete_char_and_previous_char():
    doc = Document("abc")
    doc.set_position(1)
    assert doc.delete_char()
    assert doc.text == "ac"
    assert doc.delete_previous_char()
    assert doc.text == "c"
    assert doc.delete_previous_char() is False


def test_delete_middle_line():
    doc = Document("a\nbb\nc")
    doc.set_position(3)
    delete_line(doc)
    assert doc.text == "a\nc"
    assert doc.block_text() == "a"


def test_delete_first_line_leaves_empty_line():
    doc = Document("ab\ncd")
    doc.set_position(1)
    delete_line(doc)
    assert doc.text == "\ncd"
    assert doc.position == 0


def test_copy_line_restores_cursor():
    doc = Document("hello\nworld")
    doc.set_position(7)
    assert copy_line(doc) == "world\n"
    assert doc.position == 7
    assert not doc.has_selection
    assert doc.text == "hello\nworld"


def test_copy_empty_line_gives_none():
    doc = Document("a\n\nb")
    doc.set_position(2)
    assert copy_line(doc) is None


def test_indent_after_open_brace():
    doc = Document("int f() {")
    doc.move(Move.END)
    assert indent(doc, 0) == 1
    assert doc.text == "int f() {\n\t"
    assert doc.position == len(doc.text)


def test_indent_after_close_brace_never_negative():
    doc = Document("}")
    doc.move(Move.END)
    assert indent(doc, 0) == 0
    assert doc.text == "}\n"


def test_indent_keeps_level_on_plain_line():
    doc = Document("x = 1;")
    doc.move(Move.END)
    assert indent(doc, 2) == 2
    assert doc.text.endswith("\n\t\t")


def test_from_file_reads_text(tmp_path):
    path = tmp_path / "sample.c"
    path.write_bytes(b"a\r\nb")
    doc = Document.from_file(path)
    assert doc.text == "a\nb"
    assert doc.position == 0


def test_from_missing_file_is_empty(tmp_path):
    doc = Document.from_file(tmp_path / "missing.c")
    assert doc.text == ""