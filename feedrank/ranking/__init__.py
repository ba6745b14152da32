"""Feed ranking and scoring."""

from .models import FeedMode, RankingResult, ScoredPost
from .ranker import FeedRanker, print_ranking_summary
from .scorers import (
    DiscoveryScorer,
    DiversityScorer,
    EngagementScorer,
    QualityScorer,
    RelevanceScorer,
    TrendingScorer,
)

__all__ = [
    "FeedMode",
    "FeedRanker",
    "RankingResult",
    "ScoredPost",
    "EngagementScorer",
    "RelevanceScorer",
    "TrendingScorer",
    "QualityScorer",
    "DiversityScorer",
    "DiscoveryScorer",
    "print_ranking_summary",
]
