"""Character classification for WSV.

WSV whitespace is a fixed set of Unicode code points, independent of locale
and of ``str.isspace()``. Notably U+000A (line feed) is NOT in the set: it is
the line delimiter and never reaches the line scanner. U+001C..U+001F, which
``str.isspace()`` accepts, are also excluded.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "DOUBLE_QUOTE",
    "HASH",
    "LINE_FEED",
    "NULL_MARKER",
    "SLASH",
    "WHITESPACE_CHARS",
    "contains_special_char",
    "is_whitespace",
]

LINE_FEED = "\n"
DOUBLE_QUOTE = '"'
HASH = "#"
SLASH = "/"

# Unquoted textual form of a null value.
NULL_MARKER = "-"

WHITESPACE_CHARS: frozenset[str] = frozenset(
    [
        "\u0009",
        "\u000b",
        "\u000c",
        "\u000d",
        "\u0020",
        "\u0085",
        "\u00a0",
        "\u1680",
        *(chr(c) for c in range(0x2000, 0x200B)),  # U+2000..U+200A
        "\u2028",
        "\u2029",
        "\u202f",
        "\u205f",
        "\u3000",
    ]
)


def is_whitespace(char: str) -> bool:
    """Check if a single code point is WSV whitespace.

    Args:
        char: Single character (one code point)

    Returns:
        True if char is in the fixed WSV whitespace set

    Example:
        >>> is_whitespace("\\t")
        True
        >>> is_whitespace("\\u3000")
        True
        >>> is_whitespace("\\n")
        False
    """
    return char in WHITESPACE_CHARS


def contains_special_char(value: str) -> bool:
    """Check if a string holds any character that forces quoting.

    Special characters are WSV whitespace, double quote, hash, and line feed.
    Line feed is included because an unquoted line feed would split the value
    across two lines on output.

    Args:
        value: String to scan

    Returns:
        True if at least one special character is present
    """
    for char in value:
        if char in WHITESPACE_CHARS or char in (DOUBLE_QUOTE, HASH, LINE_FEED):
            return True
    return False
