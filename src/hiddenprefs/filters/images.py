"""
Visibility filtering for image feeds.
"""

from hiddenprefs.content import ImageItem
from hiddenprefs.filters.base import FilterResult, FilterRule, VisibilityFilter
from hiddenprefs.flags import has_overlap


class ImageFilter(VisibilityFilter):
    """
    Hide standalone images by rating, uploader, image id and tag.

    The owner id is read from ``userId`` and falls back to ``user.id``.
    """

    content_type = 'images'
    item_model = ImageItem

    @property
    def name(self) -> str:
        return "Image Filter"

    @property
    def description(self) -> str:
        return "Hide images by browsing level, hidden users, hidden images and hidden tags"

    def check(self, image: ImageItem) -> FilterResult:
        user_id = image.owner_id
        if self.owner_exempt(user_id, image.nsfw_level):
            return self.accept(image, FilterRule.OWNER_EXEMPTION, "Unrated image visible to its owner")
        if not has_overlap(image.nsfw_level, self.viewer.browsing_level):
            return self.reject(
                FilterRule.RATING_OVERLAP,
                f"NSFW level {image.nsfw_level} outside browsing level {self.viewer.browsing_level}",
                nsfw_level=image.nsfw_level,
            )
        if self.is_hidden_user(user_id):
            return self.reject(FilterRule.HIDDEN_USER, f"Uploader {user_id} is hidden", user_id=user_id)
        if image.id in self.registries.hidden_images and not self.show_hidden:
            return self.reject(FilterRule.HIDDEN_IMAGE, f"Image {image.id} is hidden", image_id=image.id)
        tag_id = self.find_hidden_tag(image.tag_ids)
        if tag_id is not None:
            return self.reject(FilterRule.HIDDEN_TAG, f"Tag {tag_id} is hidden", tag_id=tag_id)
        return self.accept(image)
