"""Feed session that drives fetch, rank and interaction updates for one viewer."""

import logging
from typing import List, Optional

import pendulum

from ..ingestion import FetchResult, PostSource
from ..interactions import (
    InteractionClient,
    InteractionType,
    apply_interaction,
    record_interaction,
)
from ..interactions.client import REMOTE_ACTIONS
from ..models import Post, UserPreferences
from ..ranking import FeedMode, FeedRanker, RankingResult

logger = logging.getLogger(__name__)


class FeedSession:
    """Owns one viewer's candidate snapshot, preferences and feed mode.

    The snapshot lives on the instance; the ranker itself stays stateless and
    is re-run whenever the snapshot, preferences or mode change.
    """

    def __init__(
        self,
        source: PostSource,
        preferences: UserPreferences,
        ranker: Optional[FeedRanker] = None,
        mode: FeedMode = FeedMode.INTELLIGENT,
        client: Optional[InteractionClient] = None,
    ) -> None:
        """
        Initialize feed session.

        Args:
            source: Where candidate posts are fetched from
            preferences: Viewer preferences at session start
            ranker: Feed ranker
            mode: Initial feed mode
            client: Interaction endpoint client; interactions stay local when omitted
        """
        self.source = source
        self.preferences = preferences
        self.ranker = ranker or FeedRanker()
        self.mode = FeedMode(mode)
        self.client = client
        self.posts: List[Post] = []
        self.result: Optional[RankingResult] = None
        self.last_fetch: Optional[FetchResult] = None
        self.last_refreshed: Optional[pendulum.DateTime] = None

    @property
    def ranked_posts(self) -> List[Post]:
        """Current feed order."""
        return self.result.posts if self.result else []

    def _rerank(self) -> RankingResult:
        self.result = self.ranker.rank(self.posts, self.preferences, self.mode)
        return self.result

    async def refresh(self) -> RankingResult:
        """Fetch a fresh candidate set and rank it."""
        fetch = await self.source.fetch_posts(now=self.ranker.now)
        if fetch.used_fallback:
            logger.warning("Feed is showing sample posts: %s", fetch.error)

        self.last_fetch = fetch
        self.posts = list(fetch.posts)
        self.last_refreshed = pendulum.now("UTC")
        return self._rerank()

    def switch_mode(self, mode: FeedMode) -> RankingResult:
        """Re-rank the current snapshot under another mode."""
        self.mode = FeedMode(mode)
        return self._rerank()

    def add_post(self, post: Post) -> RankingResult:
        """Add a newly created post to the snapshot and re-rank."""
        self.posts = [post] + [p for p in self.posts if p.id != post.id]
        return self._rerank()

    async def interact(
        self,
        post_id: str,
        action: InteractionType,
        active: bool = True,
        seconds: Optional[float] = None,
    ) -> RankingResult:
        """
        Apply a viewer interaction and re-rank.

        When a client is configured and the endpoint stores the action, the
        server's flags and counters win over the local ``active`` value.
        """
        action = InteractionType(action)
        count = None

        if self.client is not None and action in REMOTE_ACTIONS:
            response = await self.client.send(post_id, action)
            active = response.active
            count = response.count

        self.posts = [
            apply_interaction(p, action, active, count) if p.id == post_id else p
            for p in self.posts
        ]
        self.preferences = record_interaction(self.preferences, post_id, action, active, seconds)
        return self._rerank()
