"""Individual scoring components for feed ranking.

Every scorer returns a value in the closed range [0, 10]. Scorers read their
inputs only through ``context`` and never mutate the post they score.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

import pendulum

from ..models import Post, UserPreferences

MAX_SCORE = 10.0
MS_PER_MINUTE = 60 * 1000
MS_PER_HOUR = 60 * MS_PER_MINUTE


def clamp(value: float, low: float = 0.0, high: float = MAX_SCORE) -> float:
    """Clamp a score into [low, high]."""
    return max(low, min(high, value))


def now_ms() -> int:
    """Current UTC time in epoch milliseconds."""
    return int(pendulum.now("UTC").timestamp() * 1000)


def _preferences(context: Optional[Dict]) -> UserPreferences:
    if context and context.get("preferences") is not None:
        return context["preferences"]
    return UserPreferences()


class BaseScorer(ABC):
    """Base class for per-post scoring components."""

    @abstractmethod
    def score(self, post: Post, context: Optional[Dict] = None) -> float:
        """
        Score a post from 0.0 to 10.0.

        Args:
            post: Post to score
            context: Scoring context (``preferences``, ``now_ms``)

        Returns:
            Score between 0.0 and 10.0
        """
        pass


class EngagementScorer(BaseScorer):
    """Score posts that already perform well, with a bonus for followed creators."""

    def __init__(self, following_bonus: float = 2.0) -> None:
        self.following_bonus = following_bonus

    def score(self, post: Post, context: Optional[Dict] = None) -> float:
        """Score based on engagement, virality and creator history."""
        prefs = _preferences(context)
        metrics = post.metrics

        bonus = self.following_bonus if post.creator.id in prefs.following_list else 0.0
        score = (
            metrics.engagement_rate
            + metrics.virality_score * 0.3
            + post.creator.engagement_rate * 0.2
            + bonus
        )
        return clamp(score)


class RelevanceScorer(BaseScorer):
    """Score based on how well a post matches the viewer's interests."""

    def _count_tag_matches(self, tags: List[str], interests: List[str]) -> int:
        """Count tags that contain, or are contained by, any interest."""
        matches = 0
        for tag in tags:
            tag_lower = tag.lower()
            if any(interest in tag_lower or tag_lower in interest for interest in interests):
                matches += 1
        return matches

    def score(self, post: Post, context: Optional[Dict] = None) -> float:
        """Score based on tags, category, media type and creator trust."""
        prefs = _preferences(context)
        interests = [i.lower() for i in prefs.interests]

        score = 0.0
        if post.tags:
            matches = self._count_tag_matches(post.tags, interests)
            score += (matches / len(post.tags)) * 4

        if post.category in prefs.preferred_categories:
            score += 3

        if prefs.prefers_content_type(post.media_type):
            score += 2

        score += post.creator.trust_score * 0.5

        return clamp(score)


class TrendingScorer(BaseScorer):
    """Score based on recency and like velocity, independent of the viewer."""

    def __init__(self, window_hours: float = 24.0) -> None:
        """
        Initialize trending scorer.

        Args:
            window_hours: Hours over which the recency bonus decays linearly to zero
        """
        self.window_hours = window_hours

    def score(self, post: Post, context: Optional[Dict] = None) -> float:
        """Score based on time decay, likes per minute and virality."""
        current = context.get("now_ms") if context else None
        if current is None:
            current = now_ms()

        age_ms = current - post.created_at_timestamp
        window_ms = self.window_hours * MS_PER_HOUR

        # Future timestamps never decay past full freshness
        time_decay = clamp(1 - age_ms / window_ms, 0.0, 1.0)
        velocity = post.metrics.likes_count / max(1.0, age_ms / MS_PER_MINUTE)

        score = time_decay * 3 + velocity * 0.01 + post.metrics.virality_score * 0.7
        return clamp(score)


class QualityScorer(BaseScorer):
    """Score based on creator trust, engagement quality and effort proxies."""

    def score(self, post: Post, context: Optional[Dict] = None) -> float:
        """Score based on trust, engagement, content length and media."""
        creator_score = post.creator.trust_score * 0.4
        engagement_quality = min(MAX_SCORE, post.metrics.engagement_rate * 0.8)
        # Longer content counts as more effort
        content_length = min(MAX_SCORE, len(post.content) / 50)
        media_bonus = 1.0 if post.has_media else 0.0

        return clamp(creator_score + engagement_quality + content_length + media_bonus)


class DiscoveryScorer(BaseScorer):
    """Score novel content: small creators and unfamiliar topics and formats."""

    def __init__(
        self,
        quality_scorer: Optional[QualityScorer] = None,
        small_creator_threshold: int = 10000,
    ) -> None:
        """
        Initialize discovery scorer.

        Args:
            quality_scorer: Scorer used for the quality component
            small_creator_threshold: Creators below this follower count get a boost
        """
        self.quality_scorer = quality_scorer or QualityScorer()
        self.small_creator_threshold = small_creator_threshold

    def score(self, post: Post, context: Optional[Dict] = None) -> float:
        """Score based on creator size, topic novelty and format novelty."""
        prefs = _preferences(context)

        creator_novelty = 3.0 if post.creator.follower_count < self.small_creator_threshold else 0.0
        category_novelty = 2.0 if post.category not in prefs.preferred_categories else 0.0
        content_novelty = (
            1.0 if post.media_type is not None and not prefs.prefers_content_type(post.media_type) else 0.0
        )
        engagement_potential = post.metrics.engagement_rate * 0.5
        quality = self.quality_scorer.score(post, context) * 0.3

        return clamp(
            creator_novelty + category_novelty + content_novelty + engagement_potential + quality
        )


class DiversityScorer:
    """Score the variety of a whole candidate batch.

    The result describes the batch, not any single post, and is shared by
    every post in a ranking pass.
    """

    def score(self, posts: List[Post], prefs: Optional[UserPreferences] = None) -> float:
        """Score category, creator and content-type variety of a batch."""
        if len(posts) <= 1:
            return MAX_SCORE

        prefs = prefs or UserPreferences()

        categories = {p.category for p in posts}
        creators = {p.creator.id for p in posts}
        content_types = {p.media_type for p in posts if p.media_type is not None}

        category_base = min(len(posts), len(prefs.preferred_categories))
        category_diversity = len(categories) / category_base if category_base else 0.0
        creator_diversity = len(creators) / len(posts)
        type_base = len(prefs.preferred_content_types)
        content_type_diversity = len(content_types) / type_base if type_base else 0.0

        average = (category_diversity + creator_diversity + content_type_diversity) / 3
        return clamp(average * MAX_SCORE)
