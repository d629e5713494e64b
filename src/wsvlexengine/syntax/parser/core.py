"""Core WSV parser implementation.

This module provides the WsvParser class that splits WSV source into lines
and drives the line rules in :mod:`wsvlexengine.syntax.parser.rules` over
each one.

Architecture:
    Each line gets its own immutable :class:`~wsvlexengine.syntax.cursor.Cursor`
    tagged with the line's zero-based index. Rules return either a
    :class:`~wsvlexengine.syntax.cursor.ParseResult` or a
    :class:`~wsvlexengine.syntax.cursor.ParseError`; the parser stops at the
    first error (fail-fast, no recovery).

Line Endings:
    Only LF (``\\n``) separates lines. A CR (``\\r``) is WSV whitespace, so
    in CRLF input it is dropped by the whitespace-skipping rule rather than
    treated as part of the line ending. Inside a quoted value a CR is kept
    as content, and a CR directly after a closing quote acts as the value
    terminator.

Security:
    Includes configurable input size limit to prevent unbounded memory
    allocation from extremely large WSV documents.
"""

import logging

from wsvlexengine.constants import MAX_SOURCE_SIZE
from wsvlexengine.syntax.chars import LINE_FEED
from wsvlexengine.syntax.cursor import Cursor, ParseError, ParseResult
from wsvlexengine.syntax.parser.rules import parse_line_values
from wsvlexengine.syntax.types import WsvDocument, WsvLine

__all__ = ["WsvParser"]

logger = logging.getLogger(__name__)


class WsvParser:
    """Non-preserving WSV parser using the immutable cursor pattern.

    Design:
    - Immutable cursor prevents infinite loops (no manual guards needed)
    - Explicit result type: parse() returns the document OR a ParseError
    - Error positions are code point offsets within the failing line

    Security:
    - Configurable max_source_size prevents memory exhaustion via large inputs
    - Default limit: 10 Mi characters

    Thread Safety:
        Instances hold only immutable configuration. A single parser may be
        shared freely between threads.

    Attributes:
        max_source_size: Maximum allowed source size in characters
    """

    __slots__ = ("_max_source_size",)

    def __init__(self, *, max_source_size: int | None = None) -> None:
        """Initialize parser with optional size limit.

        Args:
            max_source_size: Maximum source size in characters (default: 10 Mi).
                            Set to 0 to disable size limit (not recommended).
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    def parse(self, source: str) -> WsvDocument | ParseError:
        """Parse WSV source into a jagged tuple of values.

        Args:
            source: WSV document text

        Returns:
            Tuple with one tuple of values per ``\\n``-separated line
            (so ``"a\\n"`` yields two lines, the second empty), or the
            ParseError of the first malformed line.

        Raises:
            ValueError: If source exceeds max_source_size

        Example:
            >>> WsvParser().parse("a b\\nc -\\n")
            (('a', 'b'), ('c', None), ())
        """
        self._check_size(source)

        lines: list[WsvLine] = []
        for line_index, line in enumerate(source.split(LINE_FEED)):
            match parse_line_values(Cursor(line, 0, line_index)):
                case ParseError() as error:
                    logger.debug(
                        "WSV parse failed: %s at line %d, position %d",
                        error.code.name,
                        error.line_index,
                        error.position,
                    )
                    return error
                case ParseResult(value=values):
                    lines.append(values)

        logger.debug("Parsed WSV document: %d lines", len(lines))
        return tuple(lines)

    def parse_line(self, source: str) -> WsvLine | ParseError:
        """Parse a single WSV line.

        Only text up to the first line feed is examined. Later lines are
        never scanned, so a malformed second line is not reported; use
        parse() to validate a whole document.

        Args:
            source: WSV line text

        Returns:
            Tuple of values, or ParseError (always with line_index 0)

        Raises:
            ValueError: If source exceeds max_source_size

        Example:
            >>> WsvParser().parse_line('a "b c" - #comment')
            ('a', 'b c', None)
        """
        self._check_size(source)

        line, _, _ = source.partition(LINE_FEED)
        match parse_line_values(Cursor(line, 0, 0)):
            case ParseError() as error:
                logger.debug(
                    "WSV line parse failed: %s at position %d",
                    error.code.name,
                    error.position,
                )
                return error
            case ParseResult(value=values):
                return values

    def _check_size(self, source: str) -> None:
        """Reject oversized input before any scanning."""
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            msg = (
                f"Source size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in WsvParser constructor to increase limit."
            )
            raise ValueError(msg)
