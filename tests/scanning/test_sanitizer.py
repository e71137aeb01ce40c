"""Tests for string/comment scrubbing and brace matching."""

import pytest

from class_insight.scanning.sanitizer import find_closing_brace, match_braces, sanitize


class TestSanitize:
    """Test sanitize()."""

    def test_plain_code_unchanged(self):
        text = "class A { int x = 1; }"
        assert sanitize(text) == text

    def test_same_length(self):
        text = 'String s = "a // b"; /* c */ char q = \'"\'; // tail\nint y;'
        assert len(sanitize(text)) == len(text)

    def test_string_literal_blanked(self):
        result = sanitize('x = "class Foo {";')
        assert "Foo" not in result
        assert "{" not in result
        assert result.startswith("x = ")
        assert result.endswith(";")

    def test_line_comment_keeps_newline(self):
        result = sanitize("a; // class B\nb;")
        assert "B" not in result
        assert result.split("\n")[1] == "b;"

    def test_block_comment_blanked(self):
        result = sanitize("a /* class B { */ b")
        assert result.replace(" ", "") == "ab"

    def test_block_comment_keeps_newlines(self):
        text = "a /* one\ntwo\nthree */ b"
        assert sanitize(text).count("\n") == 2

    def test_escaped_quote_does_not_close_string(self):
        result = sanitize('s = "say \\"class X\\" now"; y')
        assert "X" not in result
        assert result.rstrip().endswith("; y")

    def test_char_literal_quote_does_not_open_string(self):
        result = sanitize("char c = '\"'; class A {}")
        assert "class A {}" in result

    def test_escaped_char_literal(self):
        result = sanitize("char c = '\\''; int z;")
        assert "int z;" in result

    def test_unterminated_string_scrubbed_to_end(self):
        result = sanitize('x = "never closed class A {}')
        assert result.startswith("x = ")
        assert "A" not in result

    def test_unterminated_block_comment_scrubbed_to_end(self):
        result = sanitize("x; /* class A {\n}")
        assert "A" not in result
        assert "}" not in result
        assert "\n" in result

    def test_comment_markers_inside_string_ignored(self):
        result = sanitize('s = "/* not a comment */"; int k;')
        assert "int k;" in result

    def test_idempotent(self):
        samples = [
            'a = "x"; // c\n/* d */ b = \'y\';',
            'unterminated "string',
            "/* open comment",
            "char c = '\\\\'; s = \"\\\\\";",
        ]
        for text in samples:
            once = sanitize(text)
            assert sanitize(once) == once

    def test_empty(self):
        assert sanitize("") == ""


class TestFindClosingBrace:
    """Test find_closing_brace()."""

    def test_simple(self):
        text = "{ a { b } c }"
        assert find_closing_brace(text, 0) == len(text) - 1

    def test_inner(self):
        text = "{ a { b } c }"
        assert find_closing_brace(text, 4) == 8

    def test_unbalanced_returns_none(self):
        assert find_closing_brace("{ { }", 0) is None

    def test_not_an_opener(self):
        assert find_closing_brace("a { }", 0) is None

    def test_out_of_range(self):
        assert find_closing_brace("{}", 5) is None

    def test_parentheses(self):
        assert find_closing_brace("f(a(b), c)", 1, "(", ")") == 9


class TestMatchBraces:
    """Test match_braces()."""

    def test_agrees_with_find_closing_brace(self):
        text = "{ { } { { } } } {"
        matches = match_braces(text)
        for i, ch in enumerate(text):
            if ch == "{":
                assert matches.get(i) == find_closing_brace(text, i)

    def test_stray_closer_ignored(self):
        assert match_braces("} { }") == {2: 4}

    @pytest.mark.slow
    def test_deep_nesting_is_linear(self):
        depth = 200_000
        text = "{" * depth + "}" * depth
        matches = match_braces(text)
        assert len(matches) == depth
        assert matches[0] == len(text) - 1
