"""
Test Configuration and Fixtures

Shared fixtures for the test suite: viewer snapshots, sample
content payloads for every content type and isolation of configuration
sources.
"""

import json
import os
from typing import Any, Dict, List

import pytest

from hiddenprefs.flags import ALL_BROWSING_LEVELS, SFW_BROWSING_LEVELS
from hiddenprefs.preferences import ViewerContext


OWNER_ID = 5
OTHER_USER_ID = 7


@pytest.fixture(autouse=True)
def isolate_config(monkeypatch, tmp_path):
    """Keep the developer's config files and environment out of the tests."""
    for key in list(os.environ):
        if key.startswith("HIDDENPREFS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def anonymous_viewer() -> ViewerContext:
    return ViewerContext(browsing_level=SFW_BROWSING_LEVELS)


@pytest.fixture
def owner_viewer() -> ViewerContext:
    return ViewerContext(current_user_id=OWNER_ID, browsing_level=SFW_BROWSING_LEVELS)


@pytest.fixture
def moderator_viewer() -> ViewerContext:
    return ViewerContext(current_user_id=99, is_moderator=True, browsing_level=ALL_BROWSING_LEVELS)


@pytest.fixture
def sample_payloads() -> Dict[str, List[Dict[str, Any]]]:
    """Raw camelCase payloads, one small feed per content type."""
    return {
        'models': [
            {'id': 1, 'user': {'id': OWNER_ID}, 'nsfwLevel': 1, 'tags': [100],
             'images': [{'id': 10, 'nsfwLevel': 1, 'tags': [100]}, {'id': 11, 'nsfwLevel': 1}]},
            {'id': 2, 'user': {'id': OTHER_USER_ID}, 'nsfwLevel': 4,
             'images': [{'id': 20, 'nsfwLevel': 4}]},
        ],
        'images': [
            {'id': 10, 'userId': OWNER_ID, 'nsfwLevel': 1, 'tagIds': [100]},
            {'id': 11, 'user': {'id': OTHER_USER_ID}, 'nsfwLevel': 2},
        ],
        'articles': [
            {'id': 1, 'user': {'id': OTHER_USER_ID}, 'nsfwLevel': 1, 'tags': [{'id': 100}],
             'coverImage': {'id': 50, 'nsfwLevel': 1, 'tags': [200]}},
        ],
        'users': [
            {'id': OWNER_ID, 'username': 'owner'},
            {'id': OTHER_USER_ID, 'username': 'other'},
        ],
        'collections': [
            {'id': 1, 'userId': OTHER_USER_ID, 'nsfwLevel': 1,
             'image': {'id': 9, 'tagIds': [100]},
             'images': [{'id': 10, 'nsfwLevel': 1}, {'id': 11, 'nsfwLevel': 1, 'tagIds': [300]}]},
        ],
        'bounties': [
            {'id': 1, 'user': {'id': OTHER_USER_ID}, 'nsfwLevel': 1, 'tags': [100],
             'images': [{'id': 10, 'nsfwLevel': 1}, {'id': 11, 'nsfwLevel': 1, 'tagIds': [300]}]},
        ],
        'posts': [
            {'id': 1, 'user': {'id': OTHER_USER_ID}, 'nsfwLevel': 1,
             'images': [{'id': 1, 'ingestion': 'Pending', 'nsfwLevel': 0},
                        {'id': 2, 'ingestion': 'Scanned', 'nsfwLevel': 0}]},
        ],
    }


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document under tmp_path and return its path."""
    def _write(name: str, data: Any):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding='utf-8')
        return path
    return _write
