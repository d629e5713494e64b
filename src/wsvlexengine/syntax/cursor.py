"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern for zero-`None` parsing.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Failures are values (ParseError), not exceptions

Code Points:
    A cursor walks a Python ``str``, which is indexed by Unicode code point.
    Characters outside the Basic Multilingual Plane (emoji, CJK extension B)
    therefore occupy exactly one position, and every reported position is a
    code point offset, never a UTF-8 byte or UTF-16 unit offset.

Line Scope:
    A cursor covers exactly one WSV line (no line feed) and remembers that
    line's zero-based index so errors can be reported without rescanning
    the whole document.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from wsvlexengine.diagnostics import Diagnostic, DiagnosticCode, ErrorTemplate, WsvSyntaxError

from .chars import is_whitespace

__all__ = ["Cursor", "ParseError", "ParseResult"]

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable position within one line of WSV source.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency (one cursor per scanned code point)
        3. Simple position - Just an integer offset
        4. EOF is a property - Not a return value
        5. current raises - No None handling needed

    Example:
        >>> cursor = Cursor("a b", 0)
        >>> cursor.current
        'a'
        >>> cursor.advance().is_current_whitespace()
        True
        >>> cursor.current  # Original unchanged (immutability)
        'a'
        >>> Cursor("ab", 2).is_eof
        True
    """

    source: str
    pos: int
    line_index: int = 0

    @property
    def is_eof(self) -> bool:
        """Check if at end of line.

        Returns:
            True if position >= source length
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current code point.

        Returns:
            Current character at position

        Raises:
            EOFError: If at end of line
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance at new position (original unchanged).
            The position is clamped to the line length.
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos, self.line_index)

    def is_current(self, char: str) -> bool:
        """Check whether the current code point equals char (False at EOF)."""
        return not self.is_eof and self.source[self.pos] == char

    def is_current_whitespace(self) -> bool:
        """Check whether the current code point is WSV whitespace (False at EOF)."""
        return not self.is_eof and is_whitespace(self.source[self.pos])

    def slice_since(self, start_pos: int) -> str:
        """Extract source text from start_pos up to (not including) current position.

        Args:
            start_pos: Position where the slice begins (inclusive)

        Returns:
            Source substring [start_pos, pos)

        Example:
            >>> start = Cursor("hello world", 0)
            >>> cursor = start.advance(5)
            >>> cursor.slice_since(start.pos)
            'hello'
        """
        return self.source[start_pos : self.pos]

    def skip_whitespace(self) -> "Cursor":
        """Skip WSV whitespace characters.

        Returns:
            New cursor advanced past all consecutive whitespace characters

        Example:
            >>> Cursor("\\t\\u3000 x", 0).skip_whitespace().pos
            3
        """
        c = self
        while c.is_current_whitespace():
            c = c.advance()
        return c

    def error_at(self, code: DiagnosticCode) -> "ParseError":
        """Create a ParseError located at this cursor.

        Args:
            code: Diagnostic code describing the failure

        Returns:
            ParseError carrying this cursor's line index and position
        """
        return ParseError(
            code=code,
            line_index=self.line_index,
            position=self.pos,
            line=self.source,
        )


@dataclass(frozen=True, slots=True)
class ParseResult(Generic[T]):
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Pattern:
        Every parser rule has signature:
            def parse_foo(cursor: Cursor) -> ParseResult[Foo] | ParseError:
                ...
                return ParseResult(parsed_value, new_cursor)

        Callers dispatch on the outcome:
            match parse_foo(cursor):
                case ParseError() as error:
                    return error
                case ParseResult(value=value, cursor=cursor):
                    ...
    """

    value: T
    cursor: Cursor


@dataclass(frozen=True, slots=True)
class ParseError:
    """Parse failure with exact location.

    Design:
        - Returned, never raised, by the parser rules (explicit result type)
        - Carries the failing line text for context rendering
        - Convertible to Diagnostic / WsvSyntaxError at API boundaries

    Attributes:
        code: Error kind
        line_index: Zero-based line index
        position: Zero-based code point position within the line
        line: Text of the failing line (without line feed)

    Example:
        >>> error = Cursor('a"b', 1).error_at(DiagnosticCode.INVALID_DOUBLE_QUOTE_IN_VALUE)
        >>> error.format_error()
        'Invalid double quote in value (1, 2)'
    """

    code: DiagnosticCode
    line_index: int
    position: int
    line: str = ""

    @property
    def message(self) -> str:
        """Human-readable message including 1-based (line, column)."""
        return self.to_diagnostic().message

    def to_diagnostic(self) -> Diagnostic:
        """Build the structured Diagnostic for this error."""
        return ErrorTemplate.for_code(self.code, self.line_index, self.position)

    def to_exception(self) -> WsvSyntaxError:
        """Wrap this error in a WsvSyntaxError for raising at API boundaries."""
        return WsvSyntaxError(self.to_diagnostic())

    def format_error(self) -> str:
        """Format error as a single line.

        Returns:
            Message with (line, column) suffix, both 1-based
        """
        return self.message

    def format_with_context(self) -> str:
        """Format error with the failing line and a caret under the position.

        Returns:
            Multi-line formatted error with context

        Example:
            >>> error = Cursor('x "abc" y"z', 9, 4).error_at(
            ...     DiagnosticCode.INVALID_DOUBLE_QUOTE_IN_VALUE
            ... )
            >>> print(error.format_with_context())
            Invalid double quote in value (5, 10)
            <BLANKLINE>
               5 | x "abc" y"z
                 |          ^
        """
        line_num_str = f"{self.line_index + 1:4} | "
        gutter = " " * (len(line_num_str) - 2) + "| "
        return "\n".join(
            [
                self.format_error(),
                "",
                line_num_str + self.line,
                gutter + " " * self.position + "^",
            ]
        )
