"""
Visibility filtering for model listings.

Models are rated with the fine-grained browsing-level bitmask and carry their
showcase images; a model whose images are all hidden is dropped.
"""

from hiddenprefs.content import ModelItem
from hiddenprefs.filters.base import FilterResult, FilterRule, VisibilityFilter
from hiddenprefs.flags import has_overlap


class ModelFilter(VisibilityFilter):
    """
    Hide models by rating, creator, model id and tag.

    Rules, first match wins:
    - owner or moderator viewing an unrated model: visible
    - no overlap with the browsing level: hidden
    - creator in hidden users: hidden
    - model in hidden models (unless show_hidden): hidden
    - any tag in hidden tags: hidden
    Surviving models keep only images that are not hidden by id or tag.
    """

    content_type = 'models'
    item_model = ModelItem

    @property
    def name(self) -> str:
        return "Model Filter"

    @property
    def description(self) -> str:
        return "Hide models by browsing level, hidden users, hidden models and hidden tags"

    def check(self, model: ModelItem) -> FilterResult:
        user_id = model.owner_id
        if self.owner_exempt(user_id, model.nsfw_level):
            return self.accept(model, FilterRule.OWNER_EXEMPTION, "Unrated model visible to its owner")
        if not has_overlap(model.nsfw_level, self.viewer.browsing_level):
            return self.reject(
                FilterRule.RATING_OVERLAP,
                f"NSFW level {model.nsfw_level} outside browsing level {self.viewer.browsing_level}",
                nsfw_level=model.nsfw_level,
            )
        if self.is_hidden_user(user_id):
            return self.reject(FilterRule.HIDDEN_USER, f"Creator {user_id} is hidden", user_id=user_id)
        if model.id in self.registries.hidden_models and not self.show_hidden:
            return self.reject(FilterRule.HIDDEN_MODEL, f"Model {model.id} is hidden", model_id=model.id)
        tag_id = self.find_hidden_tag(model.tags)
        if tag_id is not None:
            return self.reject(FilterRule.HIDDEN_TAG, f"Tag {tag_id} is hidden", tag_id=tag_id)
        return self.accept(model)

    def prune(self, model: ModelItem) -> FilterResult:
        images = self.visible_images(model.images, lambda image: image.tags)
        return self.keep_images(model, images, "All model images are hidden")
