"""
Visibility Filters for Content Listings

One filter per content type decides which items a viewer may see given their
hidden preferences and browsing level.

Key Components:
- VisibilityFilter: Abstract base class for all filters
- FilterResult: Per-item decision with the rule that made it
- FilterFactory: Content type to filter lookup
"""

from .base import FilterResult, FilterRule, VisibilityFilter
from .factory import FilterFactory
from .models import ModelFilter
from .images import ImageFilter
from .articles import ArticleFilter
from .users import UserFilter
from .collections import CollectionFilter
from .bounties import BountyFilter
from .posts import PostFilter

__all__ = [
    "VisibilityFilter",
    "FilterResult",
    "FilterRule",
    "FilterFactory",
    "ModelFilter",
    "ImageFilter",
    "ArticleFilter",
    "UserFilter",
    "CollectionFilter",
    "BountyFilter",
    "PostFilter",
]
