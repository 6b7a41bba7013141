"""
Filter Factory for creating visibility filters by content type.

Provides the lookup table that dispatches each content type to its filter.
"""

import logging
from typing import Any, Dict, List, Optional, Type

from hiddenprefs.core.exceptions import ErrorCode, HiddenPrefsError, UnsupportedContentTypeError
from hiddenprefs.filters.articles import ArticleFilter
from hiddenprefs.filters.base import VisibilityFilter
from hiddenprefs.filters.bounties import BountyFilter
from hiddenprefs.filters.collections import CollectionFilter
from hiddenprefs.filters.images import ImageFilter
from hiddenprefs.filters.models import ModelFilter
from hiddenprefs.filters.posts import PostFilter
from hiddenprefs.filters.users import UserFilter
from hiddenprefs.preferences import HiddenRegistries, ViewerContext

logger = logging.getLogger(__name__)


class FilterFactory:
    """
    Factory class for creating visibility filters.

    The registry maps content types to filter classes; every lookup of an
    unregistered type raises UnsupportedContentTypeError.
    """

    FILTER_REGISTRY: Dict[str, Type[VisibilityFilter]] = {
        'models': ModelFilter,
        'images': ImageFilter,
        'articles': ArticleFilter,
        'users': UserFilter,
        'collections': CollectionFilter,
        'bounties': BountyFilter,
        'posts': PostFilter,
    }

    @classmethod
    def get_filter_class(cls, content_type: Any) -> Type[VisibilityFilter]:
        """
        Look up the filter class for a content type.

        Raises:
            UnsupportedContentTypeError: If the content type is not registered
        """
        filter_class = cls.FILTER_REGISTRY.get(content_type) if isinstance(content_type, str) else None
        if filter_class is None:
            raise UnsupportedContentTypeError(content_type, available=cls.available_types())
        return filter_class

    @classmethod
    def create_filter(
        cls,
        content_type: str,
        registries: Optional[HiddenRegistries] = None,
        viewer: Optional[ViewerContext] = None,
        show_hidden: bool = False
    ) -> VisibilityFilter:
        """
        Create the filter for a content type bound to one preferences snapshot.

        Args:
            content_type: One of the registered content types
            registries: Hidden registries snapshot
            viewer: Viewer context
            show_hidden: Suppress the self-hidden rule

        Returns:
            VisibilityFilter instance

        Raises:
            UnsupportedContentTypeError: If the content type is not registered
        """
        filter_class = cls.get_filter_class(content_type)
        return filter_class(registries=registries, viewer=viewer, show_hidden=show_hidden)

    @classmethod
    def available_types(cls) -> List[str]:
        return sorted(cls.FILTER_REGISTRY)

    @classmethod
    def get_available_filters(cls) -> Dict[str, Dict[str, str]]:
        """
        Get information about all registered filters.

        Returns:
            Dictionary mapping content types to filter name and description
        """
        filter_info = {}
        for content_type, filter_class in cls.FILTER_REGISTRY.items():
            instance = filter_class()
            filter_info[content_type] = {
                'name': instance.name,
                'description': instance.description,
            }
        return filter_info

    @classmethod
    def register_filter(cls, content_type: str, filter_class: Type[VisibilityFilter], replace: bool = False) -> None:
        """
        Register a filter for a content type.

        Args:
            content_type: Content type key
            filter_class: VisibilityFilter subclass handling the type
            replace: Allow overriding an existing registration
        """
        if not (isinstance(filter_class, type) and issubclass(filter_class, VisibilityFilter)):
            raise TypeError("Filter class must inherit from VisibilityFilter")
        if content_type in cls.FILTER_REGISTRY and not replace:
            raise HiddenPrefsError(
                f"Content type '{content_type}' already has a filter",
                error_code=ErrorCode.FILTER_REGISTRY_CONFLICT,
            )
        cls.FILTER_REGISTRY[content_type] = filter_class
        logger.debug(f"Registered {filter_class.__name__} for '{content_type}'")

    @classmethod
    def unregister_filter(cls, content_type: str) -> None:
        """Remove the filter for a content type, if registered."""
        if content_type in cls.FILTER_REGISTRY:
            del cls.FILTER_REGISTRY[content_type]
