"""Shared fixtures."""

import pytest

from feedrank.ingestion import default_preferences, sample_posts
from feedrank.models import Post
from feedrank.ranking import FeedRanker

# 2025-10-09T10:40:00Z
NOW = 1_760_006_400_000
HOUR = 60 * 60 * 1000


def make_post(post_id="p1", creator_id="u1", hours_ago=1.0, **overrides) -> Post:
    """Build a post with neutral defaults; nested dicts override wholesale."""
    data = {
        "id": post_id,
        "creator": {"id": creator_id, "username": creator_id, "trustScore": 5.0, "followerCount": 50000},
        "content": "hello",
        "metrics": {"likesCount": 0, "engagementRate": 0.0, "viralityScore": 0.0},
        "createdAtTimestamp": int(NOW - hours_ago * HOUR),
        "tags": [],
        "category": "general",
    }
    data.update(overrides)
    return Post.model_validate(data)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def ranker():
    return FeedRanker(now=NOW)


@pytest.fixture
def posts():
    return sample_posts(NOW)


@pytest.fixture
def prefs():
    return default_preferences()
