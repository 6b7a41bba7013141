"""
Visibility filtering for articles.

Articles are not checked against the browsing-level bitmask; authors see
their own articles whenever the viewer is not in strict safe mode.
"""

from hiddenprefs.content import ArticleItem
from hiddenprefs.filters.base import FilterResult, FilterRule, VisibilityFilter


class ArticleFilter(VisibilityFilter):
    """Hide articles by author, article tag, cover image and cover image tag."""

    content_type = 'articles'
    item_model = ArticleItem

    @property
    def name(self) -> str:
        return "Article Filter"

    @property
    def description(self) -> str:
        return "Hide articles by hidden users, hidden tags and hidden cover images"

    def check(self, article: ArticleItem) -> FilterResult:
        user_id = article.owner_id
        if self.self_view_exempt(user_id):
            return self.accept(article, FilterRule.OWNER_EXEMPTION, "Article visible to its author")
        if self.is_hidden_user(user_id):
            return self.reject(FilterRule.HIDDEN_USER, f"Author {user_id} is hidden", user_id=user_id)

        tag_id = self.find_hidden_tag(tag.id for tag in article.tags or ())
        if tag_id is not None:
            return self.reject(FilterRule.HIDDEN_TAG, f"Tag {tag_id} is hidden", tag_id=tag_id)

        cover = article.cover_image
        if cover is not None:
            if self.is_hidden_image(cover.id):
                return self.reject(
                    FilterRule.HIDDEN_IMAGE, f"Cover image {cover.id} is hidden", image_id=cover.id
                )
            tag_id = self.find_hidden_tag(cover.tags)
            if tag_id is not None:
                return self.reject(
                    FilterRule.HIDDEN_TAG, f"Cover image tag {tag_id} is hidden", tag_id=tag_id
                )
        return self.accept(article)
