"""
Apply Hidden Preferences

Entry points that run the visibility filter for a content type over a list of
items and report how many were hidden.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from hiddenprefs.filters.base import FilterResult
from hiddenprefs.filters.factory import FilterFactory
from hiddenprefs.preferences import FilterOptions, HiddenRegistries, ViewerContext

logger = logging.getLogger(__name__)


@dataclass
class HiddenPreferencesResult:
    """
    Outcome of filtering one content list.

    Attributes:
        items: Visible items in the caller's representation, nested images
            pruned
        hidden_count: Input length minus output length
        loading_preferences: True while the registries were still loading
    """
    items: List[Any] = field(default_factory=list)
    hidden_count: int = 0
    loading_preferences: bool = False


def apply_hidden_preferences(
    content_type: str,
    items: Optional[Sequence[Any]],
    registries: Optional[HiddenRegistries] = None,
    viewer: Optional[ViewerContext] = None,
    options: Optional[FilterOptions] = None,
) -> HiddenPreferencesResult:
    """
    Filter a content list against the viewer's hidden preferences.

    Args:
        content_type: models, images, articles, users, collections, bounties
            or posts
        items: Content items (models or raw mappings); None when not fetched
        registries: Hidden registries snapshot
        viewer: Viewer identity and browsing level
        options: show_hidden / disabled switches

    Returns:
        HiddenPreferencesResult with the visible items and hidden count

    Raises:
        UnsupportedContentTypeError: If the content type is unknown
        ContentValidationError: If a raw item is malformed
    """
    registries = registries or HiddenRegistries()
    options = options or FilterOptions()
    content_filter = FilterFactory.create_filter(
        content_type,
        registries=registries,
        viewer=viewer,
        show_hidden=options.show_hidden,
    )

    if options.disabled:
        visible = list(items or [])
    elif registries.loading or items is None:
        visible = []
    else:
        visible = content_filter.apply(items)

    hidden_count = len(items) - len(visible) if items else 0
    logger.debug(
        f"Applied hidden preferences to {content_type}: "
        f"{len(items or [])} in, {len(visible)} visible, {hidden_count} hidden"
    )
    return HiddenPreferencesResult(
        items=visible,
        hidden_count=hidden_count,
        loading_preferences=registries.loading,
    )


def explain_hidden_preferences(
    content_type: str,
    items: Optional[Sequence[Any]],
    registries: Optional[HiddenRegistries] = None,
    viewer: Optional[ViewerContext] = None,
    options: Optional[FilterOptions] = None,
) -> List[FilterResult]:
    """
    Return the per-item decisions behind ``apply_hidden_preferences``.

    Disabled filtering and loading registries are not reflected here; every
    item is evaluated against the snapshot as given.
    """
    options = options or FilterOptions()
    content_filter = FilterFactory.create_filter(
        content_type,
        registries=registries,
        viewer=viewer,
        show_hidden=options.show_hidden,
    )
    return content_filter.explain(items or [])
