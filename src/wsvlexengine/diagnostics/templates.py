"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from wsvlexengine.constants import WSV_DOCS_URL

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


def _located(message: str, span: SourceSpan) -> str:
    """Append the 1-based (line, column) suffix used in all WSV parse messages."""
    return f"{message} ({span.line}, {span.column})"


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Base documentation URL
    _DOCS_BASE = WSV_DOCS_URL

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Cursor read past the end of its line.

        Args:
            position: Zero-based position where input ended

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            span=None,
            hint="Check cursor.is_eof before reading cursor.current",
        )

    @staticmethod
    def invalid_double_quote_in_value(line_index: int, position: int) -> Diagnostic:
        """Bare double quote inside an unquoted value.

        Args:
            line_index: Zero-based line index
            position: Zero-based code point position of the quote

        Returns:
            Diagnostic for INVALID_DOUBLE_QUOTE_IN_VALUE
        """
        span = SourceSpan(line_index=line_index, position=position)
        return Diagnostic(
            code=DiagnosticCode.INVALID_DOUBLE_QUOTE_IN_VALUE,
            message=_located("Invalid double quote in value", span),
            span=span,
            hint="Quote the whole value and escape inner quotes as \"\"",
            help_url=ErrorTemplate._DOCS_BASE,
        )

    @staticmethod
    def string_not_closed(line_index: int, position: int) -> Diagnostic:
        """End of line reached inside a quoted value.

        Args:
            line_index: Zero-based line index
            position: Zero-based position (always the line length)

        Returns:
            Diagnostic for STRING_NOT_CLOSED
        """
        span = SourceSpan(line_index=line_index, position=position)
        return Diagnostic(
            code=DiagnosticCode.STRING_NOT_CLOSED,
            message=_located("String not closed", span),
            span=span,
            hint="Add a closing double quote before the end of the line",
            help_url=ErrorTemplate._DOCS_BASE,
        )

    @staticmethod
    def invalid_string_line_break(line_index: int, position: int) -> Diagnostic:
        """Line break escape `"/` not followed by a double quote.

        Args:
            line_index: Zero-based line index
            position: Zero-based position after the slash

        Returns:
            Diagnostic for INVALID_STRING_LINE_BREAK
        """
        span = SourceSpan(line_index=line_index, position=position)
        return Diagnostic(
            code=DiagnosticCode.INVALID_STRING_LINE_BREAK,
            message=_located("Invalid string line break", span),
            span=span,
            hint='Line breaks inside quoted values are written as "/"',
            help_url=ErrorTemplate._DOCS_BASE,
        )

    @staticmethod
    def invalid_character_after_string(line_index: int, position: int) -> Diagnostic:
        """Closing quote followed by something other than whitespace, `#` or EOL.

        Args:
            line_index: Zero-based line index
            position: Zero-based position of the offending character

        Returns:
            Diagnostic for INVALID_CHARACTER_AFTER_STRING
        """
        span = SourceSpan(line_index=line_index, position=position)
        return Diagnostic(
            code=DiagnosticCode.INVALID_CHARACTER_AFTER_STRING,
            message=_located("Invalid character after string", span),
            span=span,
            hint="Separate the quoted value from the next value with whitespace",
            help_url=ErrorTemplate._DOCS_BASE,
        )

    @staticmethod
    def for_code(code: DiagnosticCode, line_index: int, position: int) -> Diagnostic:
        """Build the diagnostic for a syntax error code.

        Args:
            code: Syntax error code
            line_index: Zero-based line index
            position: Zero-based code point position

        Returns:
            Diagnostic for the given code
        """
        match code:
            case DiagnosticCode.UNEXPECTED_EOF:
                return ErrorTemplate.unexpected_eof(position)
            case DiagnosticCode.INVALID_DOUBLE_QUOTE_IN_VALUE:
                return ErrorTemplate.invalid_double_quote_in_value(line_index, position)
            case DiagnosticCode.STRING_NOT_CLOSED:
                return ErrorTemplate.string_not_closed(line_index, position)
            case DiagnosticCode.INVALID_STRING_LINE_BREAK:
                return ErrorTemplate.invalid_string_line_break(line_index, position)
            case DiagnosticCode.INVALID_CHARACTER_AFTER_STRING:
                return ErrorTemplate.invalid_character_after_string(line_index, position)
