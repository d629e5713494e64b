"""WSV syntax package.

Provides the code point classifier, cursor, parser and serializer.

Python 3.13+.
"""

from .chars import is_whitespace
from .cursor import Cursor, ParseError, ParseResult
from .parser import WsvParser
from .serializer import (
    SerializationValidationError,
    WsvSerializer,
    needs_quotes,
    serialize,
    serialize_line,
    serialize_value,
)
from .types import WsvDocument, WsvDocumentLike, WsvLine, WsvLineLike, WsvValue

__all__ = [
    "Cursor",
    "ParseError",
    "ParseResult",
    "SerializationValidationError",
    "WsvDocument",
    "WsvDocumentLike",
    "WsvLine",
    "WsvLineLike",
    "WsvParser",
    "WsvSerializer",
    "WsvValue",
    "is_whitespace",
    "needs_quotes",
    "parse",
    "parse_line",
    "serialize",
    "serialize_line",
    "serialize_value",
]


def parse(source: str) -> WsvDocument:
    """Parse WSV source into a jagged tuple of values.

    Convenience function for WsvParser.parse() that raises instead of
    returning the ParseError.

    Args:
        source: WSV document text

    Returns:
        One tuple of values per line

    Raises:
        WsvSyntaxError: On the first malformed line

    Example:
        >>> from wsvlexengine.syntax import parse
        >>> parse('a "b c"\\n- "-"')
        (('a', 'b c'), (None, '-'))
    """
    result = WsvParser().parse(source)
    if isinstance(result, ParseError):
        raise result.to_exception()
    return result


def parse_line(source: str) -> WsvLine:
    """Parse a single WSV line.

    Convenience function for WsvParser.parse_line() that raises instead of
    returning the ParseError.

    Raises:
        WsvSyntaxError: If the line is malformed

    Example:
        >>> from wsvlexengine.syntax import parse_line
        >>> parse_line('"ab""cd" x # note')
        ('ab"cd', 'x')
    """
    result = WsvParser().parse_line(source)
    if isinstance(result, ParseError):
        raise result.to_exception()
    return result
