"""Candidate post loading from the posts API, local files or the sample set."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

import httpx
import yaml
from pydantic import ValidationError

from ..models import Post
from .fixtures import sample_posts
from .models import FetchResult

logger = logging.getLogger(__name__)


def parse_posts(items: Iterable[Any]) -> Tuple[List[Post], int]:
    """
    Validate raw post payloads, dropping the ones that cannot be parsed.

    Args:
        items: Post dictionaries in API (camelCase) or snake_case shape

    Returns:
        Parsed posts and the number of skipped items
    """
    posts = []
    skipped = 0
    for item in items:
        try:
            posts.append(Post.model_validate(item))
        except ValidationError as e:
            skipped += 1
            post_id = item.get("id", "unknown") if isinstance(item, dict) else "unknown"
            logger.warning("Skipping invalid post %s: %s", post_id, e.errors()[0]["msg"])
    return posts, skipped


def load_posts_file(posts_path: Path) -> List[Post]:
    """Load posts from a JSON or YAML file (a list, or an API response body)."""
    if not posts_path.exists():
        raise FileNotFoundError(f"Posts file not found: {posts_path}")

    try:
        with open(posts_path, encoding="utf-8") as f:
            if posts_path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in posts file: {e}")
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in posts file: {e}")

    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("posts") or []
    if not isinstance(data, list):
        raise ValueError(f"Posts file must contain a list of posts: {posts_path}")

    posts, _ = parse_posts(data)
    return posts


class PostSource:
    """Fetch candidate posts from the platform's posts endpoint."""

    def __init__(
        self,
        posts_url: str,
        timeout: float = 10.0,
        api_token: Optional[str] = None,
        fallback_to_sample: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize post source.

        Args:
            posts_url: URL answering ``{"success": true, "posts": [...]}``
            timeout: HTTP timeout in seconds
            api_token: Bearer token sent with the request
            fallback_to_sample: Substitute the sample posts when the fetch fails
            transport: Custom httpx transport
        """
        self.posts_url = posts_url
        self.timeout = timeout
        self.api_token = api_token
        self.fallback_to_sample = fallback_to_sample
        self.transport = transport

    @classmethod
    def from_config(cls, source_config: Dict[str, Any], **kwargs) -> "PostSource":
        """Create a post source from a resolved source configuration dict."""
        return cls(
            posts_url=source_config["posts_url"],
            timeout=source_config.get("timeout", 10.0),
            api_token=source_config.get("api_token"),
            fallback_to_sample=source_config.get("fallback_to_sample", True),
            **kwargs,
        )

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_token:
            headers["Authorization"] = f"Bearer {self.api_token}"
        return headers

    def _fallback(self, error: str, now: Optional[int] = None) -> FetchResult:
        """Build the result for a failed fetch."""
        if not self.fallback_to_sample:
            logger.warning("Fetching posts from %s failed: %s", self.posts_url, error)
            return FetchResult(source=self.posts_url, success=False, error=error)

        logger.warning("Fetching posts from %s failed, using sample posts: %s", self.posts_url, error)
        return FetchResult(
            source="sample",
            success=False,
            posts=sample_posts(now),
            used_fallback=True,
            error=error,
        )

    async def fetch_posts(self, now: Optional[int] = None) -> FetchResult:
        """
        Fetch the candidate post set.

        Args:
            now: Reference time for the sample posts if they are substituted

        Returns:
            Fetch result; never raises for network or payload errors
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                headers=self._headers(),
                transport=self.transport,
            ) as client:
                response = await client.get(self.posts_url)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            return self._fallback(str(e) or type(e).__name__, now)
        except ValueError as e:
            return self._fallback(f"Invalid JSON response: {e}", now)

        if not isinstance(data, dict) or not data.get("success"):
            error = data.get("error") if isinstance(data, dict) else None
            return self._fallback(error or "Posts API reported failure", now)

        posts, skipped = parse_posts(data.get("posts") or [])
        logger.debug("Fetched %d posts from %s (%d skipped)", len(posts), self.posts_url, skipped)

        return FetchResult(
            source=self.posts_url,
            success=True,
            posts=posts,
            skipped=skipped,
        )
