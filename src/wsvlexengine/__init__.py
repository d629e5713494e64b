"""WSVLexEngine - Whitespace-Separated Values (WSV) parser and serializer.

Each WSV line holds values separated by runs of Unicode whitespace. A value
is a string or the null marker ``-``; values containing whitespace, ``"``
or ``#`` are written in double quotes, and an unquoted ``#`` starts a
comment that runs to the end of the line.

Public API:
    parse_wsv - Parse a WSV document to a tuple of tuples
    parse_wsv_line - Parse a single WSV line to a tuple
    serialize_wsv - Serialize a jagged sequence of values to WSV text
    serialize_wsv_line - Serialize one sequence of values to a WSV line
    serialize_wsv_value - Serialize a single value
    WsvParser - Parser with explicit result type and configurable size limit

Exceptions:
    WsvError - Base exception class
    WsvSyntaxError - Parse errors (carry line_index and line_position)

Submodules:
    wsvlexengine.syntax - Cursor, parser rules, serializer
    wsvlexengine.diagnostics - Diagnostic codes, templates, formatter
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import WsvError, WsvSyntaxError
from .syntax import WsvParser
from .syntax import parse as parse_wsv
from .syntax import parse_line as parse_wsv_line
from .syntax import serialize as serialize_wsv
from .syntax import serialize_line as serialize_wsv_line
from .syntax import serialize_value as serialize_wsv_value
from .syntax.types import WsvDocument, WsvLine, WsvValue

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("wsvlexengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# WSV documents are stored as UTF-8
__recommended_encoding__ = "UTF-8"

__all__ = [
    "WsvDocument",
    "WsvError",
    "WsvLine",
    "WsvParser",
    "WsvSyntaxError",
    "WsvValue",
    "__recommended_encoding__",
    "__version__",
    "parse_wsv",
    "parse_wsv_line",
    "serialize_wsv",
    "serialize_wsv_line",
    "serialize_wsv_value",
]
