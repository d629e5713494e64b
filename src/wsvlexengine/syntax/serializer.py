"""Serialize values, lines and documents to WSV text.

Inverse of :class:`~wsvlexengine.syntax.parser.WsvParser`:
    parse(serialize(document)) == document

Output is canonical: values separated by a single space, no comments,
no leading or trailing whitespace, quoting only where required.

Python 3.13+.
"""

from collections.abc import Sequence

from .chars import DOUBLE_QUOTE, LINE_FEED, NULL_MARKER, contains_special_char
from .types import WsvDocumentLike, WsvLineLike, WsvValue

__all__ = [
    "SerializationValidationError",
    "WsvSerializer",
    "needs_quotes",
    "serialize",
    "serialize_line",
    "serialize_value",
]

_QUOTED_EMPTY = '""'
_QUOTED_NULL_MARKER = '"-"'
_ESCAPED_QUOTE = '""'
_ESCAPED_LINE_FEED = '"/"'


class SerializationValidationError(TypeError):
    """Raised when a value is neither a string nor None.

    WSV has no representation for numbers, booleans or nested sequences;
    callers must convert them to strings first.
    """


def _check_value(value: object) -> None:
    if value is not None and not isinstance(value, str):
        msg = f"WSV values must be str or None, got {type(value).__name__}"
        raise SerializationValidationError(msg)


def _check_line(values: object) -> None:
    if isinstance(values, str):
        msg = "WSV lines must be a sequence of values, not str"
        raise SerializationValidationError(msg)


class WsvSerializer:
    """Converts values back to WSV source text.

    Thread-safe serializer with no mutable instance state.
    All serialization state is local to each call.

    Usage:
        >>> serializer = WsvSerializer()
        >>> serializer.serialize([["a", None], ["b c", ""]])
        'a -\\n"b c" ""'
    """

    def needs_quotes(self, value: WsvValue) -> bool:
        """Check whether a value must be written in double quotes.

        Args:
            value: String or None

        Returns:
            False for None; True for "", "-", or strings containing
            whitespace, '"', '#' or a line feed
        """
        if value is None:
            return False
        if not value or value == NULL_MARKER:
            return True
        return contains_special_char(value)

    def serialize_value(self, value: WsvValue) -> str:
        """Serialize a single value.

        Args:
            value: String or None

        Returns:
            ``-`` for None, the string itself when no quoting is needed,
            otherwise the quoted and escaped form

        Raises:
            SerializationValidationError: If value is not str or None
        """
        _check_value(value)
        output: list[str] = []
        self._serialize_value(value, output)
        return "".join(output)

    def serialize_line(self, values: WsvLineLike) -> str:
        """Serialize a sequence of values as one line (no line feed).

        Raises:
            SerializationValidationError: If any value is not str or None,
                or a line is itself a str
        """
        output: list[str] = []
        self._serialize_line(values, output)
        return "".join(output)

    def serialize(self, document: WsvDocumentLike) -> str:
        """Serialize a jagged sequence of values to a WSV document.

        Lines are joined with ``\\n``; no trailing line feed is added.

        Raises:
            SerializationValidationError: If any value is not str or None,
                or a line is itself a str
        """
        output: list[str] = []
        for i, line in enumerate(document):
            if i > 0:
                output.append(LINE_FEED)
            self._serialize_line(line, output)
        return "".join(output)

    def _serialize_line(self, values: Sequence[WsvValue], output: list[str]) -> None:
        """Serialize values of one line to output list."""
        _check_line(values)
        for i, value in enumerate(values):
            _check_value(value)
            if i > 0:
                output.append(" ")
            self._serialize_value(value, output)

    def _serialize_value(self, value: WsvValue, output: list[str]) -> None:
        """Serialize a single value to output list."""
        if value is None:
            output.append(NULL_MARKER)
        elif not value:
            output.append(_QUOTED_EMPTY)
        elif value == NULL_MARKER:
            output.append(_QUOTED_NULL_MARKER)
        elif contains_special_char(value):
            output.append(DOUBLE_QUOTE)
            for char in value:
                if char == LINE_FEED:
                    output.append(_ESCAPED_LINE_FEED)
                elif char == DOUBLE_QUOTE:
                    output.append(_ESCAPED_QUOTE)
                else:
                    output.append(char)
            output.append(DOUBLE_QUOTE)
        else:
            output.append(value)


def needs_quotes(value: WsvValue) -> bool:
    """Check whether a value must be written in double quotes.

    Convenience function for WsvSerializer.needs_quotes().

    Example:
        >>> needs_quotes("abc"), needs_quotes("a b"), needs_quotes("-"), needs_quotes(None)
        (False, True, True, False)
    """
    return WsvSerializer().needs_quotes(value)


def serialize_value(value: WsvValue) -> str:
    """Serialize a single value.

    Convenience function for WsvSerializer.serialize_value().

    Example:
        >>> serialize_value("line1\\nline2")
        '"line1"/"line2"'
    """
    return WsvSerializer().serialize_value(value)


def serialize_line(values: WsvLineLike) -> str:
    """Serialize a sequence of values as one line.

    Convenience function for WsvSerializer.serialize_line().

    Example:
        >>> serialize_line(["a", None, "", "-"])
        'a - "" "-"'
    """
    return WsvSerializer().serialize_line(values)


def serialize(document: WsvDocumentLike) -> str:
    """Serialize a jagged sequence of values to a WSV document.

    Convenience function for WsvSerializer.serialize().

    Example:
        >>> serialize([["a", "b"], ["c", None], []])
        'a b\\nc -\\n'
    """
    return WsvSerializer().serialize(document)
