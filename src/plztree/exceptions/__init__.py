"""
plztree exception classes.

This package provides all exception types used throughout plztree for
consistent error handling and reporting.
"""

from plztree.exceptions.core import (
    CommandResolutionError,
    ConfigLoadError,
    DuplicateCommandNameError,
    ErrorContext,
    GrammarParseError,
    PlzTreeError,
    ReservedArgumentError,
    UnsupportedPlatformError,
)

__all__ = [
    "PlzTreeError",
    "ErrorContext",
    "ConfigLoadError",
    "DuplicateCommandNameError",
    "ReservedArgumentError",
    "CommandResolutionError",
    "GrammarParseError",
    "UnsupportedPlatformError",
]
