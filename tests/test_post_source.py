"""Tests for candidate post loading."""

import asyncio
import json

import httpx
import pytest
import yaml

from feedrank.ingestion import PostSource, load_posts_file, parse_posts

from .conftest import NOW

POSTS_URL = "http://feed.test/api/posts"


def _source(handler, **kwargs) -> PostSource:
    return PostSource(POSTS_URL, transport=httpx.MockTransport(handler), **kwargs)


def _api_posts(posts):
    return [p.to_api() for p in posts]


class TestFetchPosts:
    def test_success(self, posts):
        def handler(request):
            return httpx.Response(200, json={"success": True, "posts": _api_posts(posts), "total": 5})

        result = asyncio.run(_source(handler).fetch_posts())
        assert result.success
        assert not result.used_fallback
        assert result.source == POSTS_URL
        assert [p.id for p in result.posts] == ["1", "2", "3", "4", "5"]
        assert result.posts[0].creator.username == "jane_fitness"

    def test_skips_malformed_posts(self, posts):
        payload = _api_posts(posts[:2]) + [{"content": "missing id"}, {"id": "9", "mediaType": "hologram"}]

        def handler(request):
            return httpx.Response(200, json={"success": True, "posts": payload})

        result = asyncio.run(_source(handler).fetch_posts())
        assert result.success
        assert [p.id for p in result.posts] == ["1", "2"]
        assert result.skipped == 2

    def test_server_error_falls_back_to_sample(self):
        def handler(request):
            return httpx.Response(500, json={"error": "Failed to fetch posts"})

        result = asyncio.run(_source(handler).fetch_posts(now=NOW))
        assert not result.success
        assert result.used_fallback
        assert result.source == "sample"
        assert "500" in result.error
        assert len(result.posts) == 5
        assert result.posts[3].created_at_timestamp == NOW - 60 * 60 * 1000

    def test_unsuccessful_body_falls_back(self):
        def handler(request):
            return httpx.Response(200, json={"success": False, "error": "database offline"})

        result = asyncio.run(_source(handler).fetch_posts())
        assert result.used_fallback
        assert result.error == "database offline"

    def test_invalid_json_falls_back(self):
        def handler(request):
            return httpx.Response(200, text="<html>oops</html>")

        result = asyncio.run(_source(handler).fetch_posts())
        assert result.used_fallback
        assert result.error.startswith("Invalid JSON response")

    def test_connection_error_falls_back(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        result = asyncio.run(_source(handler).fetch_posts())
        assert result.used_fallback
        assert "connection refused" in result.error

    def test_fallback_disabled(self):
        def handler(request):
            return httpx.Response(503)

        result = asyncio.run(_source(handler, fallback_to_sample=False).fetch_posts())
        assert not result.success
        assert not result.used_fallback
        assert result.posts == []

    def test_sends_bearer_token(self):
        seen = {}

        def handler(request):
            seen["auth"] = request.headers.get("Authorization")
            return httpx.Response(200, json={"success": True, "posts": []})

        result = asyncio.run(_source(handler, api_token="secret").fetch_posts())
        assert result.success
        assert result.posts == []
        assert seen["auth"] == "Bearer secret"

    def test_from_config(self):
        source = PostSource.from_config(
            {"posts_url": POSTS_URL, "timeout": 3.0, "api_token": "t", "fallback_to_sample": False}
        )
        assert source.posts_url == POSTS_URL
        assert source.timeout == 3.0
        assert source.api_token == "t"
        assert not source.fallback_to_sample


class TestLoadPostsFile:
    def test_json_list(self, tmp_path, posts):
        path = tmp_path / "posts.json"
        path.write_text(json.dumps(_api_posts(posts)), encoding="utf-8")
        assert [p.id for p in load_posts_file(path)] == ["1", "2", "3", "4", "5"]

    def test_api_response_body(self, tmp_path, posts):
        path = tmp_path / "posts.json"
        path.write_text(json.dumps({"success": True, "posts": _api_posts(posts[:1])}), encoding="utf-8")
        assert [p.id for p in load_posts_file(path)] == ["1"]

    def test_yaml(self, tmp_path):
        path = tmp_path / "posts.yaml"
        path.write_text(yaml.dump([{"id": "a", "tags": ["x"]}, {"id": "b"}]), encoding="utf-8")
        assert [p.id for p in load_posts_file(path)] == ["a", "b"]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "posts.yaml"
        path.write_text("", encoding="utf-8")
        assert load_posts_file(path) == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_posts_file(tmp_path / "posts.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "posts.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_posts_file(path)

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "posts.yaml"
        path.write_text("just a string", encoding="utf-8")
        with pytest.raises(ValueError, match="must contain a list"):
            load_posts_file(path)


def test_parse_posts_counts_skipped():
    posts, skipped = parse_posts([{"id": "1"}, "not a post", {"id": "2"}])
    assert [p.id for p in posts] == ["1", "2"]
    assert skipped == 1


def test_parse_posts_keeps_sparse_creators_and_private_posts():
    items = [
        {
            "id": "9",
            "creator": {
                "id": "u9",
                "followerCount": None,
                "trustScore": None,
                "engagementRate": None,
                "isVerified": None,
            },
        },
        {"id": "10", "privacy": "private"},
    ]
    posts, skipped = parse_posts(items)
    assert [p.id for p in posts] == ["9", "10"]
    assert skipped == 0
