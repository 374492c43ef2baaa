"""Tests for props: flags, quoted strings, value props and spreads."""

import unittest

from tagtree import ParseElement, parse


class TestLiteralProps(unittest.TestCase):
    def test_flag_and_quoted_props(self):
        result = parse("<x a b=\"1\" c='2'/>")
        assert result.props == {"a": True, "b": "1", "c": "2"}

    def test_prop_order_is_source_order(self):
        result = parse('<x z="1" a="2" m/>')
        assert list(result.props) == ["z", "a", "m"]

    def test_duplicate_prop_last_write_wins(self):
        result = parse('<x a="1" a="2"/>')
        assert result.props == {"a": "2"}

    def test_no_props_is_none(self):
        assert parse("<x></x>").props is None

    def test_names_allow_dashes_and_dollars(self):
        result = parse('<x data-id="7" $ref _private/>')
        assert result.props == {"data-id": "7", "$ref": True, "_private": True}

    def test_spaces_around_equals(self):
        assert parse('<x a = "1"/>').props == {"a": "1"}

    def test_escaped_quotes(self):
        result = parse('<a title="say \\"hi\\""/>')
        assert result.props == {"title": 'say "hi"'}

    def test_other_quote_kind_is_literal(self):
        assert parse("<a t='a\"b'/>").props == {"t": 'a"b'}

    def test_escaped_backslash_before_closing_quote(self):
        assert parse('<a t="x\\\\"/>').props == {"t": "x\\"}

    def test_multiline_string_is_kept(self):
        assert parse('<a t="x\n  y"/>').props == {"t": "x\n  y"}

    def test_props_span_lines(self):
        result = parse('<a\n  one="1"\n  two\n/>')
        assert result.props == {"one": "1", "two": True}


class TestValueProps(unittest.TestCase):
    def test_value_prop(self):
        result = parse(["<input value=", " disabled/>"], [7])
        assert result.props == {"value": 7, "disabled": True}

    def test_value_prop_keeps_identity(self):
        handler = object()
        result = parse(["<button onclick=", ">go</button>"], [handler])
        assert result.props["onclick"] is handler

    def test_value_inside_string(self):
        result = parse(['<a href="/u/', '/edit" class="x"></a>'], [42])
        assert result.props == {"href": "/u/42/edit", "class": "x"}

    def test_several_values_inside_string(self):
        result = parse(["<a class='", " ", "'/>"], ["big", "red"])
        assert result.props == {"class": "big red"}

    def test_adjacent_values_inside_string(self):
        result = parse(['<a class="', "", '"/>'], ["a", "b"])
        assert result.props == {"class": "ab"}

    def test_none_and_bools_contribute_nothing(self):
        result = parse(['<a t="x', "", "", 'y"/>'], [None, False, True])
        assert result.props == {"t": "xy"}

    def test_escaped_quote_after_value(self):
        result = parse(['<a t="', ' \\" done"/>'], [1])
        assert result.props == {"t": '1 " done'}

    def test_values_are_not_unescaped(self):
        result = parse(['<a t="', '"/>'], ["a\\b"])
        assert result.props == {"t": "a\\b"}


class TestSpread(unittest.TestCase):
    def test_spread_merges(self):
        result = parse(['<x a b="1" c=\'2\' ...', "/>"], [{"c": "3", "d": 4}])
        assert result.props == {"a": True, "b": "1", "c": "3", "d": 4}
        assert list(result.props) == ["a", "b", "c", "d"]

    def test_later_literal_overrides_spread(self):
        result = parse(["<a ...", ' x="lit"/>'], [{"x": "spread", "y": 1}])
        assert result.props == {"x": "lit", "y": 1}

    def test_spread_accepts_pairs(self):
        result = parse(["<a ...", "/>"], [[("k", "v")]])
        assert result.props == {"k": "v"}

    def test_spread_none_is_noop(self):
        result = parse(["<a ...", "/>"], [None])
        assert result == ParseElement("a", None, [])

    def test_multiple_spreads(self):
        result = parse(["<a ...", " ...", "/>"], [{"a": 1, "b": 1}, {"b": 2}])
        assert result.props == {"a": 1, "b": 2}

    def test_spread_rejects_non_mapping(self):
        with self.assertRaises(TypeError):
            parse(["<a ...", "/>"], [5])


if __name__ == "__main__":
    unittest.main()
