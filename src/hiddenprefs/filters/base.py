"""
Abstract Visibility Filter Base Classes

Defines the interface shared by the per-content-type visibility filters. Each
filter decides, item by item, whether the viewer may see it and returns a
FilterResult naming the rule that decided. Container types additionally prune
their nested image lists after the item itself passes.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Dict, Iterable, List, Optional, Sequence, Type

from hiddenprefs.content import ContentModel, ImageIngestionStatus, coerce_item
from hiddenprefs.flags import UNRATED_LEVEL
from hiddenprefs.preferences import HiddenRegistries, ViewerContext


class FilterRule:
    """Names of the rules a FilterResult can report."""
    VISIBLE = "visible"
    OWNER_EXEMPTION = "owner_exemption"
    RATING_OVERLAP = "rating_overlap"
    HIDDEN_USER = "hidden_user"
    HIDDEN_MODEL = "hidden_model"
    HIDDEN_IMAGE = "hidden_image"
    HIDDEN_TAG = "hidden_tag"
    NO_VISIBLE_IMAGES = "no_visible_images"


@dataclass
class FilterResult:
    """
    Result of applying a visibility filter to one item.

    Attributes:
        passed: Whether the item is visible
        rule: Rule that decided the outcome (see FilterRule)
        reason: Human-readable explanation
        item: The visible item, with nested images pruned; None when hidden
        metadata: Additional rule-specific details
    """
    passed: bool
    rule: str = FilterRule.VISIBLE
    reason: str = ""
    item: Optional[ContentModel] = None
    metadata: Dict[str, Any] = field(default_factory=dict)


class VisibilityFilter(ABC):
    """
    Abstract base class for the hidden-preferences filters.

    A filter is bound to one snapshot of registries and viewer; it holds no
    other state and never mutates the items it is given.
    """

    content_type: ClassVar[str] = ""
    item_model: ClassVar[Type[ContentModel]] = ContentModel

    def __init__(
        self,
        registries: Optional[HiddenRegistries] = None,
        viewer: Optional[ViewerContext] = None,
        show_hidden: bool = False
    ):
        """
        Initialize the filter.

        Args:
            registries: Hidden users/models/images/tags snapshot
            viewer: Viewer identity and browsing level
            show_hidden: Suppress the self-hidden rule
        """
        self.registries = registries or HiddenRegistries()
        self.viewer = viewer or ViewerContext()
        self.show_hidden = show_hidden
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of the filter."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what the filter does."""
        pass

    @abstractmethod
    def check(self, item: ContentModel) -> FilterResult:
        """
        Decide whether the item itself is visible, ignoring nested images.

        Args:
            item: Validated content item

        Returns:
            FilterResult for the item-level rules
        """
        pass

    def prune(self, item: ContentModel) -> FilterResult:
        """Narrow nested collections of an item that passed ``check``."""
        return self.accept(item)

    def evaluate(self, item: Any) -> FilterResult:
        """
        Run the item-level rules, then nested pruning.

        Pruning runs for every item that passed, exempt ones included; the
        rule that let the item through is kept on the pruned result.
        """
        item = coerce_item(self.item_model, item, self.content_type)
        result = self.check(item)
        if result.passed:
            pruned = self.prune(item)
            if pruned.passed:
                result.item = pruned.item
            else:
                result = pruned

        if not result.passed:
            self.logger.debug(
                f"Hiding {self.content_type} {getattr(item, 'id', None)}: {result.reason}"
            )
        return result

    def apply(self, items: Iterable[Any]) -> List[Any]:
        """
        Return the visible items, in input order.

        Items come back in the caller's representation: models stay models,
        mappings stay mappings. An item that was not pruned is returned as
        given.
        """
        visible = []
        for item in items:
            parsed = coerce_item(self.item_model, item, self.content_type)
            result = self.evaluate(parsed)
            if not result.passed:
                continue
            if result.item is parsed:
                visible.append(item)
            elif isinstance(item, ContentModel):
                visible.append(result.item)
            else:
                visible.append(result.item.to_payload())
        return visible

    def explain(self, items: Iterable[Any]) -> List[FilterResult]:
        """Return one decision per input item."""
        return [self.evaluate(item) for item in items]

    # Result helpers

    def accept(self, item: ContentModel, rule: str = FilterRule.VISIBLE, reason: str = "Visible") -> FilterResult:
        return FilterResult(passed=True, rule=rule, reason=reason, item=item)

    def reject(self, rule: str, reason: str, **metadata) -> FilterResult:
        return FilterResult(passed=False, rule=rule, reason=reason, metadata=metadata)

    # Rule helpers

    def owner_exempt(self, owner_id: Optional[int], nsfw_level: int) -> bool:
        """Owners and moderators always see their own unrated content."""
        is_owner = self.viewer.is_owner(owner_id)
        return (is_owner or self.viewer.is_moderator) and nsfw_level == UNRATED_LEVEL

    def self_view_exempt(self, owner_id: Optional[int]) -> bool:
        """Owners see their own content unless browsing in strict safe mode."""
        return self.viewer.is_owner(owner_id) and not self.registries.is_sfw

    def is_hidden_user(self, user_id: Optional[int]) -> bool:
        return user_id is not None and user_id in self.registries.hidden_users

    def is_hidden_image(self, image_id: Optional[int]) -> bool:
        return image_id is not None and image_id in self.registries.hidden_images

    def find_hidden_tag(self, tag_ids: Optional[Iterable[int]]) -> Optional[int]:
        """Return the first hidden tag id in ``tag_ids``, if any."""
        for tag_id in tag_ids or ():
            if tag_id in self.registries.hidden_tags:
                return tag_id
        return None

    def visible_images(
        self,
        images: Optional[Sequence[Any]],
        tags_of: Callable[[Any], Optional[Iterable[int]]],
        require_scanned: bool = False
    ) -> List[Any]:
        """
        Prune a nested image list.

        Nested images inherit owner and rating visibility from their parent;
        only hidden-image, hidden-tag and, when requested, ingestion rules
        apply.
        """
        kept = []
        for image in images or ():
            if self.is_hidden_image(image.id):
                continue
            if require_scanned:
                ingestion = getattr(image, 'ingestion', None)
                if ingestion is not None and ingestion != ImageIngestionStatus.SCANNED:
                    continue
            if self.find_hidden_tag(tags_of(image)) is not None:
                continue
            kept.append(image)
        return kept

    def keep_images(self, item: ContentModel, images: List[Any], empty_reason: str) -> FilterResult:
        """Accept ``item`` with its pruned image list, or drop it if none remain."""
        if not images:
            return self.reject(FilterRule.NO_VISIBLE_IMAGES, empty_reason)
        if len(images) == len(item.images or ()):
            return self.accept(item)
        return self.accept(item.model_copy(update={'images': images}))

    def __str__(self) -> str:
        return f"{self.name}: {self.description}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(content_type={self.content_type!r}, "
            f"show_hidden={self.show_hidden})"
        )
