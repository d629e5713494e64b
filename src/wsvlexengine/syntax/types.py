"""Type aliases for WSV values, lines and documents.

Provides semantic type aliases used throughout the syntax package
and by user code when annotating parse/serialize call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence
from typing import TypeAlias

__all__ = [
    "WsvDocument",
    "WsvDocumentLike",
    "WsvLine",
    "WsvLineLike",
    "WsvValue",
]

WsvValue: TypeAlias = str | None
"""A single WSV value: a string, or None for the null marker ``-``."""

WsvLine: TypeAlias = tuple[WsvValue, ...]
"""Parsed line: ordered, immutable sequence of values."""

WsvDocument: TypeAlias = tuple[WsvLine, ...]
"""Parsed document: ordered, immutable sequence of lines (jagged)."""

WsvLineLike: TypeAlias = Sequence[WsvValue]
"""Any sequence of values accepted by the serializer."""

WsvDocumentLike: TypeAlias = Sequence[Sequence[WsvValue]]
"""Any jagged sequence of values accepted by the serializer."""
