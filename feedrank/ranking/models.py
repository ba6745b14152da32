"""Ranking models."""

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..models import Post


class FeedMode(str, Enum):
    """Selectable ranking strategy."""

    INTELLIGENT = "intelligent"
    TRENDING = "trending"
    FOLLOWING = "following"
    DISCOVER = "discover"


class ScoredPost(BaseModel):
    """A ranked post with its score breakdown.

    The wrapped post is the caller's object, untouched; scores computed in a
    ranking pass live here instead.
    """

    post: Post = Field(..., description="Ranked post")
    final_score: float = Field(..., description="Score the feed was ordered by", ge=0.0)
    engagement_score: Optional[float] = Field(None, description="Engagement score", ge=0.0, le=10.0)
    relevance_score: Optional[float] = Field(None, description="Relevance score", ge=0.0, le=10.0)
    trending_score: Optional[float] = Field(None, description="Trending score", ge=0.0, le=10.0)
    quality_score: Optional[float] = Field(None, description="Quality score", ge=0.0, le=10.0)
    diversity_score: Optional[float] = Field(None, description="Batch diversity score", ge=0.0, le=10.0)
    discovery_score: Optional[float] = Field(None, description="Discovery score", ge=0.0, le=10.0)
    reason: str = Field("", description="Human-readable scoring reason")

    def annotated(self) -> Dict:
        """Post in API shape with the transient scores of this pass attached."""
        data = self.post.to_api()
        data["finalScore"] = self.final_score
        if self.trending_score is not None:
            data["trendingScore"] = self.trending_score
        if self.quality_score is not None:
            data["qualityScore"] = self.quality_score
        if self.discovery_score is not None:
            data["discoveryScore"] = self.discovery_score
        return data


class RankingResult(BaseModel):
    """Result of ranking a candidate batch."""

    mode: FeedMode = Field(..., description="Strategy used")
    total_posts: int = Field(..., description="Candidate posts considered")
    ranked_posts: List[ScoredPost] = Field(..., description="Ranked posts with scores")
    ranking_timestamp: datetime = Field(..., description="When ranking was performed")
    config_used: Dict = Field(..., description="Ranking configuration used")

    @property
    def posts(self) -> List[Post]:
        """Ranked posts without scores."""
        return [scored.post for scored in self.ranked_posts]
