"""Diagnostic formatting service.

Renders diagnostics in Rust-style, single-line or JSON form.
Python 3.13+. Zero external dependencies.
"""

import json
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

# C0 controls, DEL and C1 controls are escaped before reaching a terminal or log.
_CONTROL_CHARS = frozenset(
    [chr(c) for c in range(0x20)] + [chr(0x7F)] + [chr(c) for c in range(0x80, 0xA0)]
)


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Renders Diagnostic objects as human-readable or machine-readable text.
    Control characters in messages and hints are escaped so that error
    text taken from input cannot forge extra terminal or log lines.

    Attributes:
        output_format: Output style (rust, simple, json)

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.string_not_closed(0, 13)
        >>> print(formatter.format(diagnostic))
        error[STRING_NOT_CLOSED]: String not closed (1, 14)
          --> line 1, column 14
          = help: Add a closing double quote before the end of the line
          = note: see https://www.whitespacesv.com

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        STRING_NOT_CLOSED: String not closed (1, 14)
    """

    output_format: OutputFormat = OutputFormat.RUST

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[INVALID_DOUBLE_QUOTE_IN_VALUE]: Invalid double quote in value (1, 2)
              --> line 1, column 2
              = help: Quote the whole value and escape inner quotes as ""
        """
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"

        message = _escape_control_chars(diagnostic.message)
        parts = [f"{severity}[{diagnostic.code.name}]: {message}"]

        if diagnostic.span:
            parts.append(f"  --> line {diagnostic.span.line}, column {diagnostic.span.column}")

        if diagnostic.hint:
            parts.append(f"  = help: {_escape_control_chars(diagnostic.hint)}")

        if diagnostic.help_url:
            parts.append(f"  = note: see {diagnostic.help_url}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            STRING_NOT_CLOSED: String not closed (1, 14)
        """
        return f"{diagnostic.code.name}: {_escape_control_chars(diagnostic.message)}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "STRING_NOT_CLOSED", "code_value": 3003, "message": "...", ...}
        """
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
        }

        if diagnostic.span:
            data["line_index"] = diagnostic.span.line_index
            data["position"] = diagnostic.span.position

        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        if diagnostic.help_url:
            data["help_url"] = diagnostic.help_url

        return json.dumps(data, ensure_ascii=False)


def _escape_control_chars(text: str) -> str:
    """Replace control characters with their \\xNN / \\uNNNN escapes."""
    if not any(ch in _CONTROL_CHARS for ch in text):
        return text
    return "".join(
        ch.encode("unicode_escape").decode("ascii") if ch in _CONTROL_CHARS else ch
        for ch in text
    )
