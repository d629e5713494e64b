"""WSV exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["WsvError", "WsvSyntaxError"]


class WsvError(Exception):
    """Base exception for all WSV errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize WsvError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class WsvSyntaxError(WsvError):
    """Malformed WSV input.

    Parsing is fail-fast: the first syntax error aborts the whole document,
    so there is never more than one of these per parse call.

    Attributes:
        line_index: Zero-based index of the offending line
        line_position: Zero-based code point position within that line
        code: Diagnostic code identifying the error kind

    Example:
        >>> from wsvlexengine import parse_wsv
        >>> try:
        ...     parse_wsv('a"b')
        ... except WsvSyntaxError as e:
        ...     print(e.code.name, e.line_index, e.line_position)
        INVALID_DOUBLE_QUOTE_IN_VALUE 0 1
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        """Initialize WsvSyntaxError.

        Args:
            diagnostic: Diagnostic with a SourceSpan

        Raises:
            ValueError: If the diagnostic carries no span
        """
        if diagnostic.span is None:
            msg = f"WsvSyntaxError requires a located diagnostic, got {diagnostic.code.name}"
            raise ValueError(msg)
        super().__init__(diagnostic)
        self.line_index = diagnostic.span.line_index
        self.line_position = diagnostic.span.position

    @property
    def code(self) -> DiagnosticCode:
        """Diagnostic code of this error."""
        assert self.diagnostic is not None  # noqa: S101 - set in __init__
        return self.diagnostic.code
