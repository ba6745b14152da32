"""Tests for interaction recording."""

import asyncio
import json

import httpx
import pytest

from feedrank.interactions import (
    InteractionClient,
    InteractionError,
    InteractionType,
    apply_interaction,
    record_interaction,
)

from .conftest import make_post

INTERACT_URL = "http://feed.test/api/posts/{post_id}/interact"


class TestRecordInteraction:
    def test_like_adds_post(self, prefs):
        updated = record_interaction(prefs, "2", InteractionType.LIKE)
        assert updated.engagement_history.liked_posts == ["3", "2"]
        # the original preferences are untouched
        assert prefs.engagement_history.liked_posts == ["3"]

    def test_set_semantics(self, prefs):
        updated = record_interaction(prefs, "3", "like")
        assert updated.engagement_history.liked_posts == ["3"]

    def test_undo_removes_post(self, prefs):
        updated = record_interaction(prefs, "4", InteractionType.BOOKMARK, active=False)
        assert updated.engagement_history.bookmarked_posts == []

    @pytest.mark.parametrize(
        "action,field",
        [
            ("comment", "commented_posts"),
            ("share", "shared_posts"),
            ("view", "viewed_posts"),
        ],
    )
    def test_history_lists(self, prefs, action, field):
        updated = record_interaction(prefs, "5", action)
        assert getattr(updated.engagement_history, field) == ["5"]

    def test_view_time_accumulates(self, prefs):
        updated = record_interaction(prefs, "1", InteractionType.VIEW, seconds=12.5)
        updated = record_interaction(updated, "1", InteractionType.VIEW, seconds=7.5)
        assert updated.time_spent_on_posts == {"1": 20.0}
        assert updated.engagement_history.viewed_posts == ["1"]

    def test_unknown_action(self, prefs):
        with pytest.raises(ValueError):
            record_interaction(prefs, "1", "poke")


class TestApplyInteraction:
    def test_like_increments_once(self):
        post = make_post(metrics={"likesCount": 10})
        liked = apply_interaction(post, InteractionType.LIKE)
        assert liked.is_liked
        assert liked.metrics.likes_count == 11
        assert apply_interaction(liked, InteractionType.LIKE).metrics.likes_count == 11
        assert post.metrics.likes_count == 10

    def test_unlike_never_negative(self):
        post = make_post(metrics={"likesCount": 0}, isLiked=True)
        unliked = apply_interaction(post, InteractionType.LIKE, active=False)
        assert not unliked.is_liked
        assert unliked.metrics.likes_count == 0

    def test_server_count_wins(self):
        post = make_post(metrics={"likesCount": 10})
        assert apply_interaction(post, "like", count=42).metrics.likes_count == 42

    def test_bookmark(self):
        post = make_post()
        assert apply_interaction(post, "bookmark").is_bookmarked
        assert not apply_interaction(post, "bookmark", active=False).is_bookmarked

    def test_view(self):
        post = make_post(metrics={"viewsCount": 3})
        viewed = apply_interaction(post, "view")
        assert viewed.is_viewed
        assert viewed.metrics.views_count == 4

    def test_share_and_comment_counters(self):
        post = make_post(metrics={"sharesCount": 1, "commentsCount": 0})
        assert apply_interaction(post, "share").metrics.shares_count == 2
        assert apply_interaction(post, "comment").metrics.comments_count == 1
        assert apply_interaction(post, "comment", active=False).metrics.comments_count == 0


def _client(handler) -> InteractionClient:
    return InteractionClient(INTERACT_URL, transport=httpx.MockTransport(handler))


class TestInteractionClient:
    def test_like(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["body"] = request.content
            return httpx.Response(
                200,
                json={
                    "success": True,
                    "action": "like",
                    "liked": True,
                    "likesCount": 891,
                    "userInteractions": {"isLiked": True, "isBookmarked": False, "isViewed": False},
                    "counts": {"likes": 891, "bookmarks": 0, "views": 0},
                },
            )

        response = asyncio.run(_client(handler).send("2", InteractionType.LIKE))
        assert seen["url"] == "http://feed.test/api/posts/2/interact"
        assert json.loads(seen["body"]) == {"action": "like"}
        assert response.active
        assert response.count == 891

    def test_bookmark_has_no_count(self):
        def handler(request):
            return httpx.Response(
                200,
                json={
                    "success": True,
                    "action": "bookmark",
                    "userInteractions": {"isBookmarked": True},
                    "counts": {"bookmarks": 1},
                },
            )

        response = asyncio.run(_client(handler).send("2", "bookmark"))
        assert response.active
        assert response.count is None

    def test_rejected(self):
        def handler(request):
            return httpx.Response(200, json={"success": False, "action": "like"})

        with pytest.raises(InteractionError, match="rejected"):
            asyncio.run(_client(handler).send("2", "like"))

    def test_server_error(self):
        def handler(request):
            return httpx.Response(400, json={"error": "Invalid action"})

        with pytest.raises(InteractionError):
            asyncio.run(_client(handler).send("2", "view"))

    def test_local_only_actions(self):
        def handler(request):
            raise AssertionError("no request expected")

        with pytest.raises(InteractionError, match="not stored"):
            asyncio.run(_client(handler).send("2", "share"))
