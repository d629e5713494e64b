"""Shared constants for WSVLexEngine.

This module provides centralized configuration constants used across
the syntax and diagnostics packages. Placing constants here avoids circular
imports and provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "MAX_SOURCE_SIZE",
    "WSV_DOCS_URL",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MiB worth of code points).
# Prevents unbounded memory allocation from oversized WSV documents.
# WsvParser(max_source_size=0) disables the check.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# DOCUMENTATION
# ============================================================================

# Base URL referenced by diagnostic help notes.
WSV_DOCS_URL: str = "https://www.whitespacesv.com"
