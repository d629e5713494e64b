"""Tests for syntax.parser.rules: the WSV line state machine.

Each rule is exercised directly with a Cursor so the resulting cursor
position (which delimiter was or was not consumed) can be asserted.
"""

from __future__ import annotations

import pytest

from wsvlexengine.diagnostics import DiagnosticCode
from wsvlexengine.syntax.cursor import Cursor, ParseError, ParseResult
from wsvlexengine.syntax.parser.rules import (
    parse_line_values,
    parse_quoted_value,
    parse_unquoted_value,
    parse_value,
)


def _ok(result: ParseResult[object] | ParseError) -> ParseResult[object]:
    assert isinstance(result, ParseResult), result
    return result


def _err(result: ParseResult[object] | ParseError) -> ParseError:
    assert isinstance(result, ParseError), result
    return result


# ============================================================================
# UNQUOTED VALUES
# ============================================================================


class TestParseUnquotedValue:
    """Unquoted value scanning."""

    def test_runs_to_end_of_line(self) -> None:
        """Value without delimiter consumes the whole line."""
        result = _ok(parse_unquoted_value(Cursor("abc", 0)))

        assert result.value == "abc"
        assert result.cursor.is_eof

    def test_stops_before_whitespace(self) -> None:
        """Whitespace ends the value and is not consumed."""
        result = _ok(parse_unquoted_value(Cursor("abc\tdef", 0)))

        assert result.value == "abc"
        assert result.cursor.pos == 3
        assert result.cursor.current == "\t"

    def test_stops_before_hash(self) -> None:
        """An unquoted '#' ends the value and is not consumed."""
        result = _ok(parse_unquoted_value(Cursor("abc#comment", 0)))

        assert result.value == "abc"
        assert result.cursor.current == "#"

    def test_lone_dash_is_null(self) -> None:
        """Exactly '-' is the null marker."""
        assert _ok(parse_unquoted_value(Cursor("-", 0))).value is None

    @pytest.mark.parametrize("text", ["--", "-a", "a-", "-1"])
    def test_dash_prefixed_tokens_are_strings(self, text: str) -> None:
        """Only a lone '-' is null; longer tokens are plain strings."""
        assert _ok(parse_unquoted_value(Cursor(text, 0))).value == text

    def test_starts_mid_line(self) -> None:
        """Scanning begins at the cursor position, not at 0."""
        result = _ok(parse_unquoted_value(Cursor("ab cd", 3)))

        assert result.value == "cd"

    def test_double_quote_inside_fails(self) -> None:
        """A bare quote after the first character is an error at the quote."""
        error = _err(parse_unquoted_value(Cursor('ab"c', 0, 2)))

        assert error.code is DiagnosticCode.INVALID_DOUBLE_QUOTE_IN_VALUE
        assert error.line_index == 2
        assert error.position == 2

    def test_astral_characters(self) -> None:
        """Supplementary-plane characters are ordinary value content."""
        result = _ok(parse_unquoted_value(Cursor("\U0001f600\U0001f601 x", 0)))

        assert result.value == "\U0001f600\U0001f601"
        assert result.cursor.pos == 2


# ============================================================================
# QUOTED VALUES
# ============================================================================


class TestParseQuotedValue:
    """Quoted value escape state machine."""

    def test_simple(self) -> None:
        """Quoted value closed at end of line."""
        result = _ok(parse_quoted_value(Cursor('"a b"', 0)))

        assert result.value == "a b"
        assert result.cursor.is_eof

    def test_empty(self) -> None:
        """Two quotes are the empty string."""
        assert _ok(parse_quoted_value(Cursor('""', 0))).value == ""

    def test_escaped_quote(self) -> None:
        """Doubled quote inside quotes is a literal quote."""
        assert _ok(parse_quoted_value(Cursor('"ab""cd"', 0))).value == 'ab"cd'

    def test_only_escaped_quote(self) -> None:
        """Four quotes are a single literal quote."""
        assert _ok(parse_quoted_value(Cursor('""""', 0))).value == '"'

    def test_line_break_escape(self) -> None:
        """The "/" sequence is a line feed."""
        result = _ok(parse_quoted_value(Cursor('"line1"/"line2"', 0)))

        assert result.value == "line1\nline2"

    def test_consecutive_line_breaks(self) -> None:
        """Escapes can follow each other directly."""
        assert _ok(parse_quoted_value(Cursor('""/""/""', 0))).value == "\n\n"

    def test_stops_before_whitespace(self) -> None:
        """Whitespace after the closing quote is not consumed."""
        result = _ok(parse_quoted_value(Cursor('"a" b', 0)))

        assert result.value == "a"
        assert result.cursor.pos == 3
        assert result.cursor.current == " "

    def test_stops_before_hash(self) -> None:
        """A '#' directly after the closing quote ends the value."""
        result = _ok(parse_quoted_value(Cursor('"a"#c', 0)))

        assert result.value == "a"
        assert result.cursor.current == "#"

    def test_hash_inside_quotes_is_content(self) -> None:
        """Inside quotes '#' does not start a comment."""
        assert _ok(parse_quoted_value(Cursor('"#not a comment"', 0))).value == "#not a comment"

    def test_line_feed_free_content_is_literal(self) -> None:
        """Tabs and CR inside quotes are kept verbatim."""
        assert _ok(parse_quoted_value(Cursor('"a\tb\rc"', 0))).value == "a\tb\rc"

    def test_not_closed(self) -> None:
        """End of line inside quotes fails at the line length."""
        error = _err(parse_quoted_value(Cursor('"unterminated', 0)))

        assert error.code is DiagnosticCode.STRING_NOT_CLOSED
        assert error.position == 13

    def test_not_closed_after_escaped_quote(self) -> None:
        """A trailing escaped quote does not close the value."""
        error = _err(parse_quoted_value(Cursor('"a""', 0)))

        assert error.code is DiagnosticCode.STRING_NOT_CLOSED
        assert error.position == 4

    def test_opening_quote_only(self) -> None:
        """A lone quote is an unclosed string at position 1."""
        error = _err(parse_quoted_value(Cursor('"', 0)))

        assert error.code is DiagnosticCode.STRING_NOT_CLOSED
        assert error.position == 1

    def test_invalid_line_break(self) -> None:
        """Quote-slash must be followed by a quote."""
        error = _err(parse_quoted_value(Cursor('"a"/b"', 0)))

        assert error.code is DiagnosticCode.INVALID_STRING_LINE_BREAK
        assert error.position == 4

    def test_invalid_line_break_at_end(self) -> None:
        """Quote-slash at end of line fails at the line length."""
        error = _err(parse_quoted_value(Cursor('"a"/', 0)))

        assert error.code is DiagnosticCode.INVALID_STRING_LINE_BREAK
        assert error.position == 4

    def test_invalid_character_after_string(self) -> None:
        """A non-delimiter directly after the closing quote fails."""
        error = _err(parse_quoted_value(Cursor('"a"b', 0, 5)))

        assert error.code is DiagnosticCode.INVALID_CHARACTER_AFTER_STRING
        assert error.line_index == 5
        assert error.position == 3


# ============================================================================
# DISPATCH AND LINES
# ============================================================================


class TestParseValue:
    """parse_value() dispatches on the opening character."""

    def test_quoted_dash_is_string(self) -> None:
        """'"-"' is the one-character string, not null."""
        assert _ok(parse_value(Cursor('"-"', 0))).value == "-"

    def test_unquoted_dash_is_null(self) -> None:
        """'-' is null."""
        assert _ok(parse_value(Cursor("-", 0))).value is None


class TestParseLineValues:
    """Whole-line parsing."""

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("", ()),
            ("   \t ", ()),
            ("#only a comment", ()),
            ("  # indented comment", ()),
            ("a b #comment", ("a", "b")),
            ('a "b" # x y', ("a", "b")),
            ("a#b", ("a",)),
            ('"a"#b', ("a",)),
            ("- -", (None, None)),
            ('- "-" ""', (None, "-", "")),
            ("\u3000a\u2000b\u00a0", ("a", "b")),
            ('"a b" "c""d" "e"/"f"', ("a b", 'c"d', "e\nf")),
        ],
    )
    def test_values(self, line: str, expected: tuple[str | None, ...]) -> None:
        """Line text parses to the expected value tuple."""
        assert _ok(parse_line_values(Cursor(line, 0))).value == expected

    def test_first_error_aborts(self) -> None:
        """The first malformed value fails the line; later ones are not scanned."""
        error = _err(parse_line_values(Cursor('ok x"y "unclosed', 0)))

        assert error.code is DiagnosticCode.INVALID_DOUBLE_QUOTE_IN_VALUE
        assert error.position == 4

    def test_error_position_counts_code_points(self) -> None:
        """Positions are code point offsets even after astral characters."""
        error = _err(parse_line_values(Cursor('\U0001f600 \U0001f601"', 0)))

        assert error.code is DiagnosticCode.INVALID_DOUBLE_QUOTE_IN_VALUE
        assert error.position == 3

    def test_quoted_value_must_be_separated(self) -> None:
        """Two quoted values with no whitespace between them fail."""
        error = _err(parse_line_values(Cursor('"a""b" "c"x', 0)))

        assert error.code is DiagnosticCode.INVALID_CHARACTER_AFTER_STRING
        assert error.position == 10
