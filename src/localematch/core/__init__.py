"""Core utilities shared across localematch layers.

Exports:
    BabelImportError: Raised when an optional Babel feature is used without Babel
    is_babel_available: Check whether the optional Babel dependency is installed
    require_babel: Fail fast with a helpful message when Babel is missing

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel

__all__ = ["BabelImportError", "is_babel_available", "require_babel"]
