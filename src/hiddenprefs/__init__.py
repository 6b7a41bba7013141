"""
hiddenprefs - apply a viewer's hidden preferences to content listings.
"""

from hiddenprefs.apply import (
    HiddenPreferencesResult,
    apply_hidden_preferences,
    explain_hidden_preferences,
)
from hiddenprefs.content import CONTENT_MODELS, ImageIngestionStatus, parse_items
from hiddenprefs.core.exceptions import (
    ContentValidationError,
    HiddenPrefsError,
    UnsupportedContentTypeError,
)
from hiddenprefs.filters import FilterFactory, FilterResult, FilterRule
from hiddenprefs.flags import NsfwLevel, has_overlap
from hiddenprefs.preferences import FilterOptions, HiddenRegistries, ViewerContext

__version__ = "0.2.0"

__all__ = [
    "apply_hidden_preferences",
    "explain_hidden_preferences",
    "HiddenPreferencesResult",
    "HiddenRegistries",
    "ViewerContext",
    "FilterOptions",
    "FilterFactory",
    "FilterResult",
    "FilterRule",
    "NsfwLevel",
    "has_overlap",
    "ImageIngestionStatus",
    "CONTENT_MODELS",
    "parse_items",
    "HiddenPrefsError",
    "UnsupportedContentTypeError",
    "ContentValidationError",
]
