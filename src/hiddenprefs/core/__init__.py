"""
Core hiddenprefs Package

Contains the infrastructure shared by the filters and the CLI: the error
hierarchy and configuration management.
"""

from hiddenprefs.core.exceptions import (
    HiddenPrefsError,
    UnsupportedContentTypeError,
    ConfigurationError,
    ContentValidationError,
    ErrorCode,
    ErrorContext,
    RecoverySuggestion
)

__all__ = [
    'HiddenPrefsError',
    'UnsupportedContentTypeError',
    'ConfigurationError',
    'ContentValidationError',
    'ErrorCode',
    'ErrorContext',
    'RecoverySuggestion',
]
