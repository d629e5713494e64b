"""WSV parser module.

This module provides the main WsvParser class and the line grammar rules
organized into focused submodules.

Module Organization:
- core.py: WsvParser class (document splitting, size limit, fail-fast)
- rules.py: Line state machine (unquoted values, quoted values, comments)

Public API:
    WsvParser: Main parser class
"""

from wsvlexengine.syntax.parser.core import WsvParser

__all__ = ["WsvParser"]
