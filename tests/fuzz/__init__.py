"""Fuzz testing infrastructure for WSVLexEngine.

This package contains:
- test_syntax_parser_property: parser totality and error location properties

Python 3.13+.
"""
