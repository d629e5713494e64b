"""Grammar rules for WSV lines.

This module implements the line-level state machine:

    line            ::= (ws* value)* ws* comment?
    value           ::= quoted_value | unquoted_value
    unquoted_value  ::= (char - ws - '"' - '#')+         ; "-" alone is null
    quoted_value    ::= '"' (char - '"' | '""' | '"/"')* '"'
    comment         ::= '#' char*

A quoted value must be followed by whitespace, '#', or the end of the line.

Every rule takes an immutable Cursor and returns either a ParseResult with
the cursor positioned after the consumed input, or a ParseError. Nothing
in this module raises on malformed input.
"""

from wsvlexengine.diagnostics import DiagnosticCode
from wsvlexengine.syntax.chars import DOUBLE_QUOTE, HASH, LINE_FEED, NULL_MARKER, SLASH
from wsvlexengine.syntax.cursor import Cursor, ParseError, ParseResult
from wsvlexengine.syntax.types import WsvLine, WsvValue

__all__ = [
    "parse_line_values",
    "parse_quoted_value",
    "parse_unquoted_value",
    "parse_value",
]


def parse_unquoted_value(cursor: Cursor) -> ParseResult[WsvValue] | ParseError:
    """Parse an unquoted value.

    The cursor must sit on the first character of the value, which is known
    to be neither whitespace, a double quote, nor '#'. The value ends at
    whitespace, '#', or end of line; that delimiter is not consumed.

    Args:
        cursor: Position of the first character

    Returns:
        ParseResult with the string (or None for a lone "-"), or
        ParseError(INVALID_DOUBLE_QUOTE_IN_VALUE) at the offending quote
    """
    start_pos = cursor.pos
    cursor = cursor.advance()
    while not cursor.is_eof:
        if cursor.is_current_whitespace() or cursor.is_current(HASH):
            break
        if cursor.is_current(DOUBLE_QUOTE):
            return cursor.error_at(DiagnosticCode.INVALID_DOUBLE_QUOTE_IN_VALUE)
        cursor = cursor.advance()

    text = cursor.slice_since(start_pos)
    value: WsvValue = None if text == NULL_MARKER else text
    return ParseResult(value, cursor)


def parse_quoted_value(cursor: Cursor) -> ParseResult[WsvValue] | ParseError:
    """Parse a double-quoted value.

    Escapes inside the quotes:
        ""   -> literal double quote
        "/"  -> line feed

    Args:
        cursor: Position of the opening double quote

    Returns:
        ParseResult with the unescaped string, cursor on the terminator
        (whitespace or '#') or at end of line; or ParseError with one of
        STRING_NOT_CLOSED, INVALID_STRING_LINE_BREAK,
        INVALID_CHARACTER_AFTER_STRING
    """
    chars: list[str] = []
    while True:
        cursor = cursor.advance()
        if cursor.is_eof:
            return cursor.error_at(DiagnosticCode.STRING_NOT_CLOSED)

        if not cursor.is_current(DOUBLE_QUOTE):
            chars.append(cursor.current)
            continue

        # Closing quote, or the first half of an escape
        cursor = cursor.advance()
        if cursor.is_eof:
            return ParseResult("".join(chars), cursor)
        if cursor.is_current(DOUBLE_QUOTE):
            chars.append(DOUBLE_QUOTE)
        elif cursor.is_current(SLASH):
            cursor = cursor.advance()
            if not cursor.is_current(DOUBLE_QUOTE):
                return cursor.error_at(DiagnosticCode.INVALID_STRING_LINE_BREAK)
            chars.append(LINE_FEED)
        elif cursor.is_current_whitespace() or cursor.is_current(HASH):
            return ParseResult("".join(chars), cursor)
        else:
            return cursor.error_at(DiagnosticCode.INVALID_CHARACTER_AFTER_STRING)


def parse_value(cursor: Cursor) -> ParseResult[WsvValue] | ParseError:
    """Parse one value, dispatching on the opening character."""
    if cursor.is_current(DOUBLE_QUOTE):
        return parse_quoted_value(cursor)
    return parse_unquoted_value(cursor)


def parse_line_values(cursor: Cursor) -> ParseResult[WsvLine] | ParseError:
    """Parse all values of a single line.

    Skips whitespace between values and stops at end of line or at an
    unquoted '#', discarding the comment.

    Args:
        cursor: Cursor at the start of a line (source contains no line feed)

    Returns:
        ParseResult with the tuple of values, or the first ParseError
    """
    values: list[WsvValue] = []
    while True:
        cursor = cursor.skip_whitespace()
        if cursor.is_eof or cursor.is_current(HASH):
            break
        match parse_value(cursor):
            case ParseError() as error:
                return error
            case ParseResult(value=value, cursor=cursor):
                values.append(value)

    return ParseResult(tuple(values), cursor)
