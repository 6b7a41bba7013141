"""
Visibility filtering for bounties.
"""

from hiddenprefs.content import BountyItem
from hiddenprefs.filters.base import FilterResult, FilterRule, VisibilityFilter


class BountyFilter(VisibilityFilter):
    """
    Hide bounties by creator, example images and tag.

    Unlike the other containers, one hidden example image hides the whole
    bounty; the surviving bounties are still pruned by image tags.
    """

    content_type = 'bounties'
    item_model = BountyItem

    @property
    def name(self) -> str:
        return "Bounty Filter"

    @property
    def description(self) -> str:
        return "Hide bounties by hidden users, hidden images and hidden tags"

    def check(self, bounty: BountyItem) -> FilterResult:
        user_id = bounty.owner_id
        if self.self_view_exempt(user_id):
            return self.accept(bounty, FilterRule.OWNER_EXEMPTION, "Bounty visible to its creator")
        if self.is_hidden_user(user_id):
            return self.reject(FilterRule.HIDDEN_USER, f"Creator {user_id} is hidden", user_id=user_id)
        for image in bounty.images or ():
            if self.is_hidden_image(image.id):
                return self.reject(
                    FilterRule.HIDDEN_IMAGE, f"Bounty image {image.id} is hidden", image_id=image.id
                )
        tag_id = self.find_hidden_tag(bounty.tags)
        if tag_id is not None:
            return self.reject(FilterRule.HIDDEN_TAG, f"Tag {tag_id} is hidden", tag_id=tag_id)
        return self.accept(bounty)

    def prune(self, bounty: BountyItem) -> FilterResult:
        images = self.visible_images(bounty.images, lambda image: image.tag_ids)
        return self.keep_images(bounty, images, "All bounty images are hidden")
