"""
Hidden Preferences Snapshots

Immutable snapshots of the state the visibility filters read: the viewer's
hidden-entity registries, the viewer identity and the per-call options.
Providers own and refresh the live state; every filter call receives a
snapshot, so nothing is captured from mutable outer scope.
"""

from dataclasses import dataclass
from typing import Any, FrozenSet, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hiddenprefs.flags import SFW_BROWSING_LEVELS, from_names


def _coerce_id_set(value: Any) -> FrozenSet[int]:
    """Accept a list/set of ids or an ``{id: bool}`` presence map."""
    if value is None:
        return frozenset()
    if isinstance(value, Mapping):
        return frozenset(int(key) for key, present in value.items() if present)
    return frozenset(int(entry) for entry in value)


class HiddenRegistries(BaseModel):
    """Ids the viewer has opted not to see, keyed by entity kind."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    hidden_users: FrozenSet[int] = Field(default_factory=frozenset, alias="hiddenUsers")
    hidden_models: FrozenSet[int] = Field(default_factory=frozenset, alias="hiddenModels")
    hidden_images: FrozenSet[int] = Field(default_factory=frozenset, alias="hiddenImages")
    hidden_tags: FrozenSet[int] = Field(default_factory=frozenset, alias="hiddenTags")
    is_sfw: bool = Field(default=False, alias="isSfw")
    loading: bool = False

    @field_validator('hidden_users', 'hidden_models', 'hidden_images', 'hidden_tags', mode='before')
    @classmethod
    def validate_id_sets(cls, v):
        return _coerce_id_set(v)


class ViewerContext(BaseModel):
    """Who is looking, and which ratings they allow."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    current_user_id: Optional[int] = Field(default=None, alias="currentUserId")
    is_moderator: bool = Field(default=False, alias="isModerator")
    browsing_level: int = Field(default=SFW_BROWSING_LEVELS, ge=0, alias="browsingLevel")

    @field_validator('browsing_level', mode='before')
    @classmethod
    def validate_browsing_level(cls, v):
        """Allow preset and level names such as ``"sfw"`` or ``"PG,R"``."""
        if v is None:
            return SFW_BROWSING_LEVELS
        return from_names(v)

    def is_owner(self, user_id: Optional[int]) -> bool:
        """Anonymous viewers own nothing, and neither does an unowned item."""
        return user_id is not None and self.current_user_id is not None and user_id == self.current_user_id


@dataclass(frozen=True)
class FilterOptions:
    """
    Per-call switches.

    Attributes:
        show_hidden: Reveal self-hidden models/images (review views); owner
            and tag hiding still apply
        disabled: Return the input untouched
    """
    show_hidden: bool = False
    disabled: bool = False
