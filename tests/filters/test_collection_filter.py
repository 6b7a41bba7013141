"""
Tests for CollectionFilter
"""

from hiddenprefs.filters.base import FilterRule
from hiddenprefs.filters.collections import CollectionFilter
from hiddenprefs.preferences import HiddenRegistries, ViewerContext


def make_collection(**overrides):
    collection = {
        'id': 1,
        'userId': 7,
        'nsfwLevel': 1,
        'image': {'id': 9, 'tagIds': [100]},
        'images': [{'id': 10}, {'id': 11, 'tagIds': [300]}],
    }
    collection.update(overrides)
    return collection


class TestCollectionFilter:
    """Test suite for CollectionFilter."""

    def test_hidden_representative_image_excludes_before_pruning(self):
        collection = make_collection(images=[])
        result = CollectionFilter(HiddenRegistries(hidden_images=[9]), ViewerContext()).evaluate(collection)

        assert result.passed is False
        assert result.rule == FilterRule.HIDDEN_IMAGE

    def test_hidden_representative_image_tag(self):
        result = CollectionFilter(HiddenRegistries(hidden_tags=[100]), ViewerContext()).evaluate(make_collection())

        assert result.rule == FilterRule.HIDDEN_TAG

    def test_owner_from_nested_user(self):
        collection = make_collection(userId=None, user={'id': 7})
        result = CollectionFilter(HiddenRegistries(hidden_users=[7]), ViewerContext()).evaluate(collection)

        assert result.rule == FilterRule.HIDDEN_USER

    def test_owner_sees_own_collection(self):
        viewer = ViewerContext(current_user_id=7)
        registries = HiddenRegistries(hidden_images=[9, 10])

        result = CollectionFilter(registries, viewer).evaluate(make_collection())

        assert result.rule == FilterRule.OWNER_EXEMPTION
        assert [image.id for image in result.item.images] == [11]

    def test_owner_collection_dropped_when_images_pruned_away(self):
        viewer = ViewerContext(current_user_id=7)
        collection = make_collection(images=[{'id': 9}])

        result = CollectionFilter(HiddenRegistries(hidden_images=[9]), viewer).evaluate(collection)

        assert result.passed is False
        assert result.rule == FilterRule.NO_VISIBLE_IMAGES

    def test_unowned_collection_not_owned_by_anonymous_viewer(self):
        # an anonymous viewer never matches a collection without userId or user
        collection = make_collection(userId=None)

        result = CollectionFilter(HiddenRegistries(hidden_images=[9]), ViewerContext()).evaluate(collection)

        assert result.passed is False
        assert result.rule == FilterRule.HIDDEN_IMAGE

    def test_prunes_collection_images(self):
        registries = HiddenRegistries(hidden_tags=[300])
        result = CollectionFilter(registries, ViewerContext()).evaluate(make_collection())

        assert [image.id for image in result.item.images] == [10]

    def test_drops_collection_when_images_pruned_away(self):
        registries = HiddenRegistries(hidden_images=[10], hidden_tags=[300])
        result = CollectionFilter(registries, ViewerContext()).evaluate(make_collection())

        assert result.passed is False
        assert result.rule == FilterRule.NO_VISIBLE_IMAGES

    def test_drops_collection_without_images(self):
        result = CollectionFilter(HiddenRegistries(), ViewerContext()).evaluate(make_collection(images=None))

        assert result.rule == FilterRule.NO_VISIBLE_IMAGES
