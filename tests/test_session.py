"""Tests for the feed session."""

import asyncio

import httpx

from feedrank.ingestion import PostSource
from feedrank.interactions import InteractionClient
from feedrank.pipeline import FeedSession
from feedrank.ranking import FeedMode, FeedRanker

from .conftest import NOW, make_post

POSTS_URL = "http://feed.test/api/posts"


def _session(posts, prefs, handler=None, **kwargs) -> FeedSession:
    if handler is None:
        def handler(request):
            return httpx.Response(200, json={"success": True, "posts": [p.to_api() for p in posts]})

    source = PostSource(POSTS_URL, transport=httpx.MockTransport(handler))
    return FeedSession(source, prefs, ranker=FeedRanker(now=NOW), **kwargs)


def _ids(session):
    return [p.id for p in session.ranked_posts]


def test_refresh_ranks_fetched_posts(posts, prefs):
    session = _session(posts, prefs)
    result = asyncio.run(session.refresh())

    assert result.mode == FeedMode.INTELLIGENT
    assert _ids(session) == ["4", "1", "3", "2", "5"]
    assert session.last_fetch.success
    assert session.last_refreshed is not None


def test_refresh_falls_back_to_sample(prefs):
    def handler(request):
        return httpx.Response(500)

    session = _session([], prefs, handler=handler)
    asyncio.run(session.refresh())

    assert session.last_fetch.used_fallback
    assert _ids(session) == ["4", "1", "3", "2", "5"]


def test_switch_mode_reuses_snapshot(posts, prefs):
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={"success": True, "posts": [p.to_api() for p in posts]})

    session = _session(posts, prefs, handler=handler)
    asyncio.run(session.refresh())

    session.switch_mode(FeedMode.FOLLOWING)
    assert _ids(session) == ["1", "3", "5"]
    session.switch_mode("discover")
    assert _ids(session) == ["2", "4"]
    assert len(calls) == 1


def test_new_post_is_ranked_in(posts, prefs):
    session = _session(posts, prefs, mode=FeedMode.TRENDING)
    asyncio.run(session.refresh())

    fresh = make_post("6", "user_6", hours_ago=0, metrics={"likesCount": 0, "viralityScore": 10.0})
    session.add_post(fresh)

    assert len(session.posts) == 6
    assert _ids(session)[0] == "6"


def test_local_interaction_updates_preferences_and_feed(posts, prefs):
    session = _session(posts, prefs, mode=FeedMode.DISCOVER)
    asyncio.run(session.refresh())
    assert _ids(session) == ["2", "4"]

    asyncio.run(session.interact("2", "like"))

    assert "2" in session.preferences.engagement_history.liked_posts
    assert _ids(session) == ["4"]
    liked = next(p for p in session.posts if p.id == "2")
    assert liked.is_liked
    assert liked.metrics.likes_count == 891
    # the caller's preferences object is not mutated
    assert prefs.engagement_history.liked_posts == ["3"]


def test_remote_interaction_uses_server_state(posts, prefs):
    def interact(request):
        return httpx.Response(
            200,
            json={
                "success": True,
                "action": "like",
                "userInteractions": {"isLiked": False},
                "counts": {"likes": 1559},
            },
        )

    client = InteractionClient(
        "http://feed.test/api/posts/{post_id}/interact",
        transport=httpx.MockTransport(interact),
    )
    session = _session(posts, prefs, client=client)
    asyncio.run(session.refresh())

    # post 3 is already liked; the server reports the toggle as an un-like
    asyncio.run(session.interact("3", "like"))

    post = next(p for p in session.posts if p.id == "3")
    assert not post.is_liked
    assert post.metrics.likes_count == 1559
    assert "3" not in session.preferences.engagement_history.liked_posts
