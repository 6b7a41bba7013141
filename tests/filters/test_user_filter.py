"""
Tests for UserFilter
"""

from hiddenprefs.filters.base import FilterRule
from hiddenprefs.filters.users import UserFilter
from hiddenprefs.preferences import HiddenRegistries, ViewerContext


class TestUserFilter:
    """Test suite for UserFilter."""

    def test_hidden_user_excluded(self):
        users = [{'id': 5}, {'id': 7}]
        visible = UserFilter(HiddenRegistries(hidden_users=[7]), ViewerContext()).apply(users)

        assert visible == [{'id': 5}]

    def test_viewer_always_finds_themselves(self):
        viewer = ViewerContext(current_user_id=7)
        result = UserFilter(HiddenRegistries(hidden_users=[7]), viewer).evaluate({'id': 7})

        assert result.rule == FilterRule.OWNER_EXEMPTION

    def test_self_exemption_lifted_in_sfw_mode(self):
        viewer = ViewerContext(current_user_id=7)
        registries = HiddenRegistries(hidden_users=[7], is_sfw=True)

        result = UserFilter(registries, viewer).evaluate({'id': 7})

        assert result.rule == FilterRule.HIDDEN_USER

    def test_extra_fields_preserved(self):
        visible = UserFilter(HiddenRegistries(), ViewerContext()).apply([{'id': 5, 'username': 'alice'}])

        assert visible == [{'id': 5, 'username': 'alice'}]
