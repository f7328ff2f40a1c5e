import pytest

from minivim.highlight import IN_COMMENT, NO_STATE, Span, Style, SyntaxHighlighter


@pytest.fixture
def hl():
    return SyntaxHighlighter()


def _texts(text, spans, style):
    return [text[s.start:s.end] for s in spans if s.style == style]


def test_keyword_style_is_green_bold(hl):
    spans, _ = hl.highlight_block("int x;")
    assert spans == [Span(0, 3, Style("green", bold=True))]


@pytest.mark.parametrize("word", ["char", "void", "bool", "struct", "unsigned"])
def test_keywords_are_matched(hl, word):
    text = f"{word} value"
    spans, _ = hl.highlight_block(text)
    assert _texts(text, spans, hl.keyword_style) == [word]


def test_keyword_inside_identifier_is_not_matched(hl):
    spans, _ = hl.highlight_block("integer shortcut")
    assert _texts("integer shortcut", spans, hl.keyword_style) == []


def test_class_names_starting_with_q(hl):
    text = "QString s; Q x;"
    spans, _ = hl.highlight_block(text)
    assert _texts(text, spans, hl.class_style) == ["QString"]
    assert hl.class_style == Style("magenta", bold=True)


def test_quotation(hl):
    text = 'say "hi" now'
    spans, _ = hl.highlight_block(text)
    assert _texts(text, spans, hl.quotation_style) == ['"hi"']


def test_function_name_without_parenthesis(hl):
    text = "foo(bar)"
    spans, _ = hl.highlight_block(text)
    assert _texts(text, spans, hl.function_style) == ["foo"]


def test_include_line(hl):
    text = "#include <stdio.h>"
    spans, _ = hl.highlight_block(text)
    assert _texts(text, spans, hl.include_style) == ["#include "]
    assert _texts(text, spans, hl.angle_brackets_style) == ["<stdio.h>"]


def test_single_line_comment_applied_after_keyword(hl):
    text = "int x; // int"
    spans, state = hl.highlight_block(text)
    assert state == NO_STATE
    assert spans[-1].style == hl.single_line_comment_style
    assert text[spans[-1].start:spans[-1].end] == "// int"


def test_unterminated_block_comment_sets_state(hl):
    text = "x /* open"
    spans, state = hl.highlight_block(text)
    assert state == IN_COMMENT
    assert _texts(text, spans, hl.multi_line_comment_style) == ["/* open"]


def test_closed_block_comment_leaves_state_unset(hl):
    text = "/* a */ b /* c */"
    spans, state = hl.highlight_block(text)
    assert state == NO_STATE
    assert _texts(text, spans, hl.multi_line_comment_style) == ["/* a */", "/* c */"]


def test_continuing_comment_from_previous_line(hl):
    text = "c */ d"
    spans, state = hl.highlight_block(text, IN_COMMENT)
    assert state == NO_STATE
    assert _texts(text, spans, hl.multi_line_comment_style) == ["c */"]


def test_empty_line_inside_comment_stays_in_comment(hl):
    spans, state = hl.highlight_block("", IN_COMMENT)
    assert spans == []
    assert state == IN_COMMENT


def test_highlight_threads_state_between_lines(hl):
    text = "a /* b\nmiddle\nc */ d"
    result = hl.highlight(text)
    lines = text.split("\n")
    assert len(result) == len(lines)
    assert _texts(lines[0], result[0], hl.multi_line_comment_style) == ["/* b"]
    assert _texts(lines[1], result[1], hl.multi_line_comment_style) == ["middle"]
    assert _texts(lines[2], result[2], hl.multi_line_comment_style) == ["c */"]


def test_spans_stay_within_line(hl):
    text = '#include <iostream>\nint main(void) { "s"; } /* x'
    for line, spans in zip(text.split("\n"), hl.highlight(text)):
        for span in spans:
            assert 0 <= span.start < span.end <= len(line)