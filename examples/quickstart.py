"""Quickstart example for wsvlexengine.

Demonstrates parsing and serializing Whitespace-Separated Values:

1. Parse a WSV table
2. Serialize values (null, empty string, quoting)
3. Handle syntax errors (exception and result styles)
4. Format diagnostics for terminals and tools

Python 3.13+.
"""

from __future__ import annotations


def example_1_parsing() -> None:
    """Parse a small table with comments and quoted values."""
    from wsvlexengine import parse_wsv

    print("=" * 60)
    print("Example 1: Parsing")
    print("=" * 60)

    source = '''\
# City       Population   Note
Berlin       3664088      -
"New York"   8804190      "The ""Big Apple"""
Paris        2165423      "line1"/"line2"   # escaped line feed
'''

    for index, line in enumerate(parse_wsv(source)):
        print(f"line {index}: {line!r}")
    # line 0: ()
    # line 1: ('Berlin', '3664088', None)
    # line 2: ('New York', '8804190', 'The "Big Apple"')
    # line 3: ('Paris', '2165423', 'line1\nline2')
    # line 4: ()


def example_2_serializing() -> None:
    """Serialize values; null, empty string and '-' stay distinct."""
    from wsvlexengine import parse_wsv, serialize_wsv, serialize_wsv_value

    print("\n" + "=" * 60)
    print("Example 2: Serializing")
    print("=" * 60)

    for value in (None, "", "-", "plain", "two words", 'say "hi"', "a\nb"):
        print(f"{value!r:>14} -> {serialize_wsv_value(value)}")

    rows = [["id", "name"], ["1", None], ["2", "Ada Lovelace"]]
    text = serialize_wsv(rows)
    print(text)
    assert parse_wsv(text) == tuple(tuple(row) for row in rows)


def example_3_errors() -> None:
    """Handle malformed input with exceptions or with result values."""
    from wsvlexengine import WsvParser, WsvSyntaxError, parse_wsv
    from wsvlexengine.syntax import ParseError

    print("\n" + "=" * 60)
    print("Example 3: Syntax Errors")
    print("=" * 60)

    try:
        parse_wsv('ok line\n"unterminated')
    except WsvSyntaxError as e:
        print(f"{e.code.name} at line {e.line_index}, position {e.line_position}")
        print(f"message: {e}")
    # STRING_NOT_CLOSED at line 1, position 13
    # message: String not closed (2, 14)

    match WsvParser().parse('a "b"c'):
        case ParseError() as error:
            print(error.format_with_context())
        case document:
            print(document)


def example_4_diagnostics() -> None:
    """Render one error in every output format."""
    from wsvlexengine.diagnostics import DiagnosticFormatter, OutputFormat
    from wsvlexengine.syntax import ParseError, WsvParser

    print("\n" + "=" * 60)
    print("Example 4: Diagnostic Formats")
    print("=" * 60)

    result = WsvParser().parse_line('value"with quote')
    assert isinstance(result, ParseError)
    diagnostic = result.to_diagnostic()

    for output_format in OutputFormat:
        print(f"[{output_format}]")
        print(DiagnosticFormatter(output_format=output_format).format(diagnostic))


if __name__ == "__main__":
    example_1_parsing()
    example_2_serializing()
    example_3_errors()
    example_4_diagnostics()
