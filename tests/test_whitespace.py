"""Tests for line trimming, escaped newlines and fragment-end whitespace."""

import unittest

from tagtree import ParseElement, ParseValue, parse


def texts(node):
    return [child.value for child in node.children]


class TestLineTrimming(unittest.TestCase):
    def test_lines_are_trimmed(self):
        assert parse("<p>\n  text\n</p>") == ParseElement("p", None, [ParseValue("text")])

    def test_each_line_is_a_separate_run(self):
        assert texts(parse("<p>\n  one  \n  two\n</p>")) == ["one", "two"]

    def test_windows_newlines(self):
        assert texts(parse("<p>\r\n  one\r\n  two\r\n</p>")) == ["one", "two"]

    def test_leading_whitespace_of_template_is_trimmed(self):
        assert parse("   hello") == ParseValue("hello")

    def test_whitespace_between_inline_tags_is_kept(self):
        result = parse("<p><b>a</b> <i>b</i></p>")
        assert result.children[1] == ParseValue(" ")

    def test_trailing_whitespace_at_end_is_trimmed(self):
        assert parse("<p>a</p>   ") == ParseElement("p", None, [ParseValue("a")])

    def test_blank_runs_are_not_emitted(self):
        result = parse("<p>\n\n   \n</p>")
        assert result.children == []


class TestEscapedNewline(unittest.TestCase):
    def test_escaped_newline_keeps_space(self):
        result = parse("<p> \\\n text</p>")
        assert texts(result) == [" ", "text"]
        assert "".join(texts(result)) == " text"

    def test_escaped_newline_removes_backslash_only(self):
        assert texts(parse("<p>a  \\\nb</p>")) == ["a  ", "b"]

    def test_plain_newline_after_backslash_text(self):
        assert texts(parse("<p>a \\b\nc</p>")) == ["a \\b", "c"]


class TestValueWhitespace(unittest.TestCase):
    def test_whitespace_before_value_is_kept(self):
        result = parse(["<p>Hello ", "!</p>"], ["World"])
        assert texts(result) == ["Hello ", "World", "!"]

    def test_text_after_value_is_not_at_line_start(self):
        result = parse(["<p>\n  a ", " b\n</p>"], [1])
        assert texts(result) == ["a ", 1, " b"]

    def test_value_on_its_own_line(self):
        result = parse(["<p>\n  ", "\n</p>"], ["v"])
        assert texts(result) == ["v"]

    def test_adjacent_values(self):
        result = parse(["<p>", "", "</p>"], ["a", "b"])
        assert texts(result) == ["a", "b"]

    def test_value_after_closing_tag(self):
        result = parse(["<p><b>x</b>", "</p>"], ["y"])
        assert result.children == [ParseElement("b", None, [ParseValue("x")]), ParseValue("y")]

    def test_value_after_self_closing_tag(self):
        result = parse(["<p><br/>", "</p>"], ["y"])
        assert result.children == [ParseElement("br", None, []), ParseValue("y")]


if __name__ == "__main__":
    unittest.main()
