"""
Visibility filtering for collections.

A collection is judged by its owner and its representative image, then its
image list is pruned; a collection left without images is dropped.
"""

from hiddenprefs.content import CollectionItem
from hiddenprefs.filters.base import FilterResult, FilterRule, VisibilityFilter


class CollectionFilter(VisibilityFilter):
    """Hide collections by owner and representative image, then prune images."""

    content_type = 'collections'
    item_model = CollectionItem

    @property
    def name(self) -> str:
        return "Collection Filter"

    @property
    def description(self) -> str:
        return "Hide collections by hidden users and hidden images, pruning collection images"

    def check(self, collection: CollectionItem) -> FilterResult:
        user_id = collection.owner_id
        if self.self_view_exempt(user_id):
            return self.accept(collection, FilterRule.OWNER_EXEMPTION, "Collection visible to its owner")
        if self.is_hidden_user(user_id):
            return self.reject(FilterRule.HIDDEN_USER, f"Owner {user_id} is hidden", user_id=user_id)

        image = collection.image
        if image is not None:
            if self.is_hidden_image(image.id):
                return self.reject(
                    FilterRule.HIDDEN_IMAGE, f"Collection image {image.id} is hidden", image_id=image.id
                )
            tag_id = self.find_hidden_tag(image.tag_ids)
            if tag_id is not None:
                return self.reject(
                    FilterRule.HIDDEN_TAG, f"Collection image tag {tag_id} is hidden", tag_id=tag_id
                )
        return self.accept(collection)

    def prune(self, collection: CollectionItem) -> FilterResult:
        images = self.visible_images(collection.images, lambda image: image.tag_ids)
        return self.keep_images(collection, images, "All collection images are hidden")
