"""
Tests for PostFilter

Pins the post-specific container policy: an absent image list keeps the
post, an image list that prunes to nothing drops it, and the representative
image is never required to survive.
"""

import pytest

from hiddenprefs.content import ImageIngestionStatus
from hiddenprefs.filters.base import FilterRule
from hiddenprefs.filters.posts import PostFilter
from hiddenprefs.preferences import HiddenRegistries, ViewerContext


def make_post(**overrides):
    post = {
        'id': 1,
        'user': {'id': 7},
        'nsfwLevel': 1,
        'images': [
            {'id': 1, 'ingestion': 'Pending', 'nsfwLevel': 0},
            {'id': 2, 'ingestion': 'Scanned', 'nsfwLevel': 0},
        ],
    }
    post.update(overrides)
    return post


class TestPostFilter:
    """Test suite for PostFilter."""

    def test_keeps_only_scanned_images(self):
        result = PostFilter(HiddenRegistries(), ViewerContext()).evaluate(make_post())

        assert result.passed is True
        assert [image.id for image in result.item.images] == [2]
        assert result.item.images[0].ingestion == ImageIngestionStatus.SCANNED

    @pytest.mark.parametrize("status", ["Pending", "Error", "Blocked", "NotFound"])
    def test_unscanned_images_excluded(self, status):
        post = make_post(images=[{'id': 1, 'ingestion': status}])
        result = PostFilter(HiddenRegistries(), ViewerContext()).evaluate(post)

        assert result.passed is False
        assert result.rule == FilterRule.NO_VISIBLE_IMAGES

    def test_images_without_ingestion_status_kept(self):
        post = make_post(images=[{'id': 1}])
        result = PostFilter(HiddenRegistries(), ViewerContext()).evaluate(post)

        assert [image.id for image in result.item.images] == [1]

    def test_post_without_image_list_passes_unchanged(self):
        post = make_post(images=None, image={'id': 3})
        del post['images']
        result = PostFilter(HiddenRegistries(), ViewerContext()).evaluate(post)

        assert result.passed is True
        assert result.item.images is None

    def test_post_with_empty_image_list_dropped(self):
        result = PostFilter(HiddenRegistries(), ViewerContext()).evaluate(make_post(images=[]))

        assert result.passed is False
        assert result.rule == FilterRule.NO_VISIBLE_IMAGES

    def test_representative_image_not_required_after_pruning(self):
        post = make_post(image={'id': 2}, images=[{'id': 5, 'tagIds': [300]}, {'id': 6}])
        result = PostFilter(HiddenRegistries(hidden_tags=[300]), ViewerContext()).evaluate(post)

        assert result.passed is True
        assert [image.id for image in result.item.images] == [6]
        assert result.item.image.id == 2

    def test_hidden_representative_image(self):
        post = make_post(image={'id': 2})
        result = PostFilter(HiddenRegistries(hidden_images=[2]), ViewerContext()).evaluate(post)

        assert result.rule == FilterRule.HIDDEN_IMAGE

    def test_hidden_representative_image_tag(self):
        post = make_post(image={'id': 3, 'tagIds': [400]})
        result = PostFilter(HiddenRegistries(hidden_tags=[400]), ViewerContext()).evaluate(post)

        assert result.rule == FilterRule.HIDDEN_TAG

    def test_hidden_author(self):
        result = PostFilter(HiddenRegistries(hidden_users=[7]), ViewerContext()).evaluate(make_post())

        assert result.rule == FilterRule.HIDDEN_USER

    def test_author_sees_only_scanned_images(self):
        viewer = ViewerContext(current_user_id=7)
        result = PostFilter(HiddenRegistries(), viewer).evaluate(make_post())

        assert result.passed is True
        assert result.rule == FilterRule.OWNER_EXEMPTION
        assert [image.id for image in result.item.images] == [2]

    def test_author_post_without_scanned_images_dropped(self):
        viewer = ViewerContext(current_user_id=7)
        post = make_post(images=[{'id': 1, 'ingestion': 'Pending'}, {'id': 3, 'ingestion': 'Blocked'}])

        result = PostFilter(HiddenRegistries(hidden_users=[7]), viewer).evaluate(post)

        assert result.passed is False
        assert result.rule == FilterRule.NO_VISIBLE_IMAGES

    def test_post_without_id(self):
        post = make_post()
        del post['id']
        result = PostFilter(HiddenRegistries(), ViewerContext()).evaluate(post)

        assert result.passed is True
        assert result.item.id is None
