"""
Visibility filtering for user listings.
"""

from hiddenprefs.content import UserItem
from hiddenprefs.filters.base import FilterResult, FilterRule, VisibilityFilter


class UserFilter(VisibilityFilter):
    """Hide users the viewer has hidden; viewers always find themselves."""

    content_type = 'users'
    item_model = UserItem

    @property
    def name(self) -> str:
        return "User Filter"

    @property
    def description(self) -> str:
        return "Hide users present in the hidden users registry"

    def check(self, user: UserItem) -> FilterResult:
        if self.self_view_exempt(user.id):
            return self.accept(user, FilterRule.OWNER_EXEMPTION, "Viewer's own profile")
        if self.is_hidden_user(user.id):
            return self.reject(FilterRule.HIDDEN_USER, f"User {user.id} is hidden", user_id=user.id)
        return self.accept(user)
