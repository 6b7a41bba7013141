"""
Visibility filtering for posts.

Posts may carry a single representative image, an image list, or both. Only
the image list is pruned: a post without an image list passes through, while
a post whose list prunes to nothing is dropped. Images still moving through
ingestion are never shown in a post.
"""

from hiddenprefs.content import PostItem
from hiddenprefs.filters.base import FilterResult, FilterRule, VisibilityFilter


class PostFilter(VisibilityFilter):
    """Hide posts by author and representative image, then prune post images."""

    content_type = 'posts'
    item_model = PostItem

    @property
    def name(self) -> str:
        return "Post Filter"

    @property
    def description(self) -> str:
        return "Hide posts by hidden users and hidden images, keeping only scanned post images"

    def check(self, post: PostItem) -> FilterResult:
        user_id = post.owner_id
        if self.self_view_exempt(user_id):
            return self.accept(post, FilterRule.OWNER_EXEMPTION, "Post visible to its author")
        if self.is_hidden_user(user_id):
            return self.reject(FilterRule.HIDDEN_USER, f"Author {user_id} is hidden", user_id=user_id)

        image = post.image
        if image is not None:
            if self.is_hidden_image(image.id):
                return self.reject(
                    FilterRule.HIDDEN_IMAGE, f"Post image {image.id} is hidden", image_id=image.id
                )
            tag_id = self.find_hidden_tag(image.tag_ids)
            if tag_id is not None:
                return self.reject(
                    FilterRule.HIDDEN_TAG, f"Post image tag {tag_id} is hidden", tag_id=tag_id
                )
        return self.accept(post)

    def prune(self, post: PostItem) -> FilterResult:
        if post.images is None:
            return self.accept(post)
        images = self.visible_images(post.images, lambda image: image.tag_ids, require_scanned=True)
        return self.keep_images(post, images, "No scanned, visible post images")
