"""Performance benchmarks for WSVLexEngine.

Benchmarks use pytest-benchmark to measure and track performance of critical operations.
Prevents performance regressions in the parser and serializer.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
