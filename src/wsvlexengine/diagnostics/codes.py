"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        3000-3999: Syntax errors (parser failures)
    """

    # Syntax errors (3000-3999)
    UNEXPECTED_EOF = 3001  # cursor read past the end of a line
    INVALID_DOUBLE_QUOTE_IN_VALUE = 3002
    STRING_NOT_CLOSED = 3003
    INVALID_STRING_LINE_BREAK = 3004
    INVALID_CHARACTER_AFTER_STRING = 3005


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source location for error reporting.

    WSV errors are always reported against a single line, so the span is
    a (line, position) pair rather than an offset range.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes or UTF-16 code units. A character outside the Basic
        Multilingual Plane occupies exactly one position.

    Attributes:
        line_index: Line number (0-indexed)
        position: Code point offset within the line (0-indexed)
    """

    line_index: int
    position: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If line_index or position is negative.
        """
        if self.line_index < 0:
            msg = f"SourceSpan.line_index must be >= 0, got {self.line_index}"
            raise ValueError(msg)
        if self.position < 0:
            msg = f"SourceSpan.position must be >= 0, got {self.position}"
            raise ValueError(msg)

    @property
    def line(self) -> int:
        """Line number (1-indexed, like text editors)."""
        return self.line_index + 1

    @property
    def column(self) -> int:
        """Column number (1-indexed, like text editors)."""
        return self.position + 1


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools (editors, linters).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when not tied to a position)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping (log injection prevention).

        Example output:
            error[STRING_NOT_CLOSED]: String not closed (1, 14)
              --> line 1, column 14
              = help: Add a closing double quote before the end of the line

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
