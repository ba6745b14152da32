"""Feed ranker that combines multiple scoring components."""

import logging
from typing import Dict, List, Optional

import pendulum
from rich.console import Console
from rich.table import Table

from ..config import RankingConfig
from ..models import Post, UserPreferences
from .models import FeedMode, RankingResult, ScoredPost
from .scorers import (
    DiscoveryScorer,
    DiversityScorer,
    EngagementScorer,
    QualityScorer,
    RelevanceScorer,
    TrendingScorer,
    now_ms,
)

console = Console()
logger = logging.getLogger(__name__)


class FeedRanker:
    """Rank feed posts under one of four strategies.

    The ranker holds no state between calls: every ranking pass returns a new
    list and leaves the given posts and preferences untouched.
    """

    def __init__(
        self,
        config: Optional[RankingConfig] = None,
        now: Optional[int] = None,
    ) -> None:
        """
        Initialize feed ranker.

        Args:
            config: Ranking configuration
            now: Fixed "current time" in epoch milliseconds; read from the clock
                once per ranking pass when omitted
        """
        self.config = config or RankingConfig()
        self.now = now

        # Initialize scorers
        self.engagement_scorer = EngagementScorer(following_bonus=self.config.following_bonus)
        self.relevance_scorer = RelevanceScorer()
        self.trending_scorer = TrendingScorer(window_hours=self.config.trending_window_hours)
        self.quality_scorer = QualityScorer()
        self.diversity_scorer = DiversityScorer()
        self.discovery_scorer = DiscoveryScorer(
            quality_scorer=self.quality_scorer,
            small_creator_threshold=self.config.small_creator_threshold,
        )

    def _context(self, prefs: Optional[UserPreferences] = None, now: Optional[int] = None) -> Dict:
        return {
            "preferences": prefs or UserPreferences(),
            "now_ms": now if now is not None else (self.now if self.now is not None else now_ms()),
        }

    def calculate_engagement_score(self, post: Post, prefs: UserPreferences) -> float:
        return self.engagement_scorer.score(post, self._context(prefs))

    def calculate_relevance_score(self, post: Post, prefs: UserPreferences) -> float:
        return self.relevance_scorer.score(post, self._context(prefs))

    def calculate_trending_score(self, post: Post, now: Optional[int] = None) -> float:
        return self.trending_scorer.score(post, self._context(now=now))

    def calculate_quality_score(self, post: Post) -> float:
        return self.quality_scorer.score(post)

    def calculate_diversity_score(self, posts: List[Post], prefs: UserPreferences) -> float:
        return self.diversity_scorer.score(posts, prefs)

    def calculate_discovery_score(self, post: Post, prefs: UserPreferences) -> float:
        return self.discovery_scorer.score(post, self._context(prefs))

    def _generate_reason(self, scores: Dict[str, float], post: Post) -> str:
        """Generate human-readable reason for score."""
        reasons = []

        if scores.get("trending", 0.0) >= 8.0:
            reasons.append("Trending now")
        elif "trending" in scores and scores["trending"] <= 3.0:
            reasons.append("Older post")

        if scores.get("engagement", 0.0) >= 9.0:
            reasons.append("high engagement")

        if scores.get("relevance", 0.0) >= 8.0:
            reasons.append("matches your interests")

        if scores.get("discovery", 0.0) >= 8.0:
            reasons.append("new to you")

        if not reasons:
            reasons.append("Balanced scoring across factors")

        creator = post.creator.username or post.creator.id or "unknown creator"
        return "; ".join(reasons) + f" (@{creator})"

    @staticmethod
    def _sort(scored: List[ScoredPost]) -> List[ScoredPost]:
        # sorted() is stable, so ties keep their input order
        return sorted(scored, key=lambda s: s.final_score, reverse=True)

    def rank_posts(
        self,
        posts: List[Post],
        prefs: UserPreferences,
        now: Optional[int] = None,
    ) -> List[ScoredPost]:
        """
        Rank posts by blending every signal (the default feed).

        Args:
            posts: Candidate posts
            prefs: Viewer preferences
            now: Current time in epoch milliseconds for this pass

        Returns:
            Scored posts, best first
        """
        if not posts:
            return []

        context = self._context(prefs, now)
        # Batch-level score, computed once and shared by every post
        diversity = self.diversity_scorer.score(posts, prefs)

        scored = []
        for post in posts:
            scores = {
                "engagement": self.engagement_scorer.score(post, context),
                "relevance": self.relevance_scorer.score(post, context),
                "trending": self.trending_scorer.score(post, context),
                "quality": self.quality_scorer.score(post, context),
            }
            total = (
                scores["engagement"] * self.config.engagement_weight
                + scores["relevance"] * self.config.relevance_weight
                + scores["trending"] * self.config.trending_weight
                + scores["quality"] * self.config.quality_weight
                + diversity * self.config.diversity_weight
            )
            scored.append(
                ScoredPost(
                    post=post,
                    final_score=max(0.0, total),
                    engagement_score=scores["engagement"],
                    relevance_score=scores["relevance"],
                    trending_score=scores["trending"],
                    quality_score=scores["quality"],
                    diversity_score=diversity,
                    reason=self._generate_reason(scores, post),
                )
            )

        return self._sort(scored)

    def rank_posts_by_trending(self, posts: List[Post], now: Optional[int] = None) -> List[ScoredPost]:
        """Rank posts by trending score alone; identical for every viewer."""
        context = self._context(now=now)
        scored = []
        for post in posts:
            trending = self.trending_scorer.score(post, context)
            scored.append(
                ScoredPost(
                    post=post,
                    final_score=trending,
                    trending_score=trending,
                    reason=self._generate_reason({"trending": trending}, post),
                )
            )
        return self._sort(scored)

    def rank_posts_by_following(
        self,
        posts: List[Post],
        following_list: List[str],
        now: Optional[int] = None,
    ) -> List[ScoredPost]:
        """Keep only posts by followed creators, most recent and fastest-moving first."""
        following = set(following_list or [])
        return self.rank_posts_by_trending([p for p in posts if p.creator.id in following], now)

    def rank_posts_by_discovery(
        self,
        posts: List[Post],
        prefs: UserPreferences,
        now: Optional[int] = None,
    ) -> List[ScoredPost]:
        """
        Rank content the viewer has not seen yet.

        Posts by followed creators and posts already liked or viewed are
        dropped before scoring.
        """
        following = set(prefs.following_list)
        seen = set(prefs.engagement_history.liked_posts) | set(prefs.engagement_history.viewed_posts)
        candidates = [p for p in posts if p.creator.id not in following and p.id not in seen]

        context = self._context(prefs, now)
        scored = []
        for post in candidates:
            discovery = self.discovery_scorer.score(post, context)
            scored.append(
                ScoredPost(
                    post=post,
                    final_score=discovery,
                    discovery_score=discovery,
                    reason=self._generate_reason({"discovery": discovery}, post),
                )
            )
        return self._sort(scored)

    def rank(
        self,
        posts: List[Post],
        prefs: UserPreferences,
        mode: FeedMode = FeedMode.INTELLIGENT,
    ) -> RankingResult:
        """
        Rank a candidate batch under the given mode.

        Args:
            posts: Candidate posts
            prefs: Viewer preferences
            mode: Ranking strategy

        Returns:
            Ranking result with scored posts
        """
        mode = FeedMode(mode)
        now = self.now if self.now is not None else now_ms()

        if mode == FeedMode.TRENDING:
            ranked = self.rank_posts_by_trending(posts, now)
        elif mode == FeedMode.FOLLOWING:
            ranked = self.rank_posts_by_following(posts, prefs.following_list, now)
        elif mode == FeedMode.DISCOVER:
            ranked = self.rank_posts_by_discovery(posts, prefs, now)
        else:
            ranked = self.rank_posts(posts, prefs, now)

        logger.debug("Ranked %d of %d posts in %s mode", len(ranked), len(posts), mode.value)

        return RankingResult(
            mode=mode,
            total_posts=len(posts),
            ranked_posts=ranked,
            ranking_timestamp=pendulum.from_timestamp(now / 1000),
            config_used=self.config.model_dump(),
        )


def print_ranking_summary(result: RankingResult, limit: int = 10) -> None:
    """Print ranking summary."""
    console.print(f"\n[bold]Feed ({result.mode.value}):[/bold]")
    console.print(f"  Candidate posts: {result.total_posts}")
    console.print(f"  Ranked posts: {len(result.ranked_posts)}")

    if not result.ranked_posts:
        console.print("[yellow]Nothing to show in this mode.[/yellow]")
        return

    table = Table(title="Top Posts")
    table.add_column("#", style="dim")
    table.add_column("Post", style="cyan")
    table.add_column("Creator", style="magenta")
    table.add_column("Category", style="blue")
    table.add_column("Score", style="green")
    table.add_column("Reason", style="yellow")

    for i, scored in enumerate(result.ranked_posts[:limit], 1):
        post = scored.post
        preview = post.content if len(post.content) <= 40 else post.content[:37] + "..."
        table.add_row(
            str(i),
            f"{post.id}: {preview}",
            f"@{post.creator.username or post.creator.id}",
            post.category,
            f"{scored.final_score:.2f}",
            scored.reason,
        )

    console.print(table)
