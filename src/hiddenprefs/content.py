"""
Content Models

Pydantic models for the seven content variants that hidden preferences are
applied to. Field aliases match the camelCase payloads served by the platform
API, unknown fields are kept so filtered items round-trip unchanged, and all
models are frozen: filters derive pruned copies instead of mutating input.
"""

from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from hiddenprefs.core.exceptions import (
    ContentValidationError,
    ErrorContext,
    UnsupportedContentTypeError,
)


class ImageIngestionStatus(str, Enum):
    """Moderation pipeline state of an uploaded image."""
    PENDING = "Pending"
    SCANNED = "Scanned"
    ERROR = "Error"
    BLOCKED = "Blocked"
    NOT_FOUND = "NotFound"


class ContentModel(BaseModel):
    """Base for all content payloads."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )

    def to_payload(self) -> Dict[str, Any]:
        """Serialize back to the camelCase wire shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class UserRef(ContentModel):
    id: int


class ModelImage(ContentModel):
    """Image attached to a model; tagged through ``tags``."""
    id: int
    nsfw_level: int = Field(default=0, alias="nsfwLevel")
    tags: Optional[List[int]] = None


class TaggedImage(ContentModel):
    """Image reference tagged through ``tagIds``."""
    id: int
    nsfw_level: int = Field(default=0, alias="nsfwLevel")
    tag_ids: Optional[List[int]] = Field(default=None, alias="tagIds")


class PostImage(TaggedImage):
    ingestion: Optional[ImageIngestionStatus] = None


class CoverImage(ContentModel):
    id: int
    nsfw_level: int = Field(default=0, alias="nsfwLevel")
    tags: List[int] = Field(default_factory=list)


class ArticleTag(ContentModel):
    id: int


class ModelItem(ContentModel):
    id: int
    user: UserRef
    nsfw_level: int = Field(alias="nsfwLevel")
    tags: Optional[List[int]] = None
    images: Optional[List[ModelImage]] = None

    @property
    def owner_id(self) -> Optional[int]:
        return self.user.id


class ImageItem(ContentModel):
    id: int
    nsfw_level: int = Field(alias="nsfwLevel")
    user_id: Optional[int] = Field(default=None, alias="userId")
    user: Optional[UserRef] = None
    tag_ids: Optional[List[int]] = Field(default=None, alias="tagIds")
    ingestion: Optional[ImageIngestionStatus] = None

    @property
    def owner_id(self) -> Optional[int]:
        if self.user_id is not None:
            return self.user_id
        return self.user.id if self.user else None


class ArticleItem(ContentModel):
    id: int
    nsfw_level: int = Field(alias="nsfwLevel")
    user: Optional[UserRef] = None
    tags: Optional[List[ArticleTag]] = None
    cover_image: Optional[CoverImage] = Field(default=None, alias="coverImage")

    @property
    def owner_id(self) -> Optional[int]:
        return self.user.id if self.user else None


class UserItem(ContentModel):
    id: int

    @property
    def owner_id(self) -> Optional[int]:
        return self.id


class CollectionItem(ContentModel):
    id: int
    nsfw_level: int = Field(alias="nsfwLevel")
    user_id: Optional[int] = Field(default=None, alias="userId")
    user: Optional[UserRef] = None
    image: Optional[TaggedImage] = None
    images: Optional[List[TaggedImage]] = None

    @property
    def owner_id(self) -> Optional[int]:
        if self.user_id is not None:
            return self.user_id
        return self.user.id if self.user else None


class BountyItem(ContentModel):
    id: int
    user: UserRef
    nsfw_level: int = Field(alias="nsfwLevel")
    tags: Optional[List[int]] = None
    images: Optional[List[TaggedImage]] = None

    @property
    def owner_id(self) -> Optional[int]:
        return self.user.id


class PostItem(ContentModel):
    # Post feeds do not always carry the post id
    id: Optional[int] = None
    user: UserRef
    nsfw_level: int = Field(alias="nsfwLevel")
    image: Optional[TaggedImage] = None
    images: Optional[List[PostImage]] = None

    @property
    def owner_id(self) -> Optional[int]:
        return self.user.id


CONTENT_MODELS: Dict[str, Type[ContentModel]] = {
    'models': ModelItem,
    'images': ImageItem,
    'articles': ArticleItem,
    'users': UserItem,
    'collections': CollectionItem,
    'bounties': BountyItem,
    'posts': PostItem,
}


def coerce_item(model_class: Type[ContentModel], item: Any, content_type: str = "") -> ContentModel:
    """
    Return ``item`` as an instance of ``model_class``, validating mappings.

    Raises:
        ContentValidationError: If the payload is missing required fields
    """
    if isinstance(item, model_class):
        return item
    try:
        return model_class.model_validate(item)
    except PydanticValidationError as e:
        raise ContentValidationError(
            f"Malformed {content_type or model_class.__name__} item: {e.errors()[0]['msg']}",
            field_name='.'.join(str(p) for p in e.errors()[0]['loc']),
            context=ErrorContext(operation="parse_items", content_type=content_type),
            cause=e,
        )


def parse_items(content_type: str, raw_items: Iterable[Any]) -> List[ContentModel]:
    """
    Validate a list of raw payloads against the model for ``content_type``.

    Raises:
        UnsupportedContentTypeError: If the content type is unknown
        ContentValidationError: If any item is malformed
    """
    model_class = CONTENT_MODELS.get(content_type)
    if model_class is None:
        raise UnsupportedContentTypeError(content_type, available=sorted(CONTENT_MODELS))
    return [coerce_item(model_class, item, content_type) for item in raw_items]
