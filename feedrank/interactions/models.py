"""Interaction models."""

from enum import Enum
from typing import Optional

from pydantic import Field

from ..models.base import FeedModel


class InteractionType(str, Enum):
    """Viewer actions on a post."""

    LIKE = "like"
    BOOKMARK = "bookmark"
    COMMENT = "comment"
    SHARE = "share"
    VIEW = "view"


# Engagement history list each action is recorded in
HISTORY_FIELDS = {
    InteractionType.LIKE: "liked_posts",
    InteractionType.BOOKMARK: "bookmarked_posts",
    InteractionType.COMMENT: "commented_posts",
    InteractionType.SHARE: "shared_posts",
    InteractionType.VIEW: "viewed_posts",
}


class UserInteractions(FeedModel):
    """Viewer flags reported by the interaction endpoint."""

    is_liked: bool = False
    is_bookmarked: bool = False
    is_viewed: bool = False


class InteractionCounts(FeedModel):
    """Counters reported by the interaction endpoint."""

    likes: int = Field(0, ge=0)
    bookmarks: int = Field(0, ge=0)
    views: int = Field(0, ge=0)


class InteractionResponse(FeedModel):
    """Body of ``POST /api/posts/{id}/interact``."""

    success: bool = Field(..., description="Whether the interaction was stored")
    action: InteractionType = Field(..., description="Action that was applied")
    user_interactions: UserInteractions = Field(default_factory=UserInteractions)
    counts: InteractionCounts = Field(default_factory=InteractionCounts)

    @property
    def active(self) -> bool:
        """Whether the action is in effect after the call (e.g. liked, not un-liked)."""
        if self.action == InteractionType.LIKE:
            return self.user_interactions.is_liked
        if self.action == InteractionType.BOOKMARK:
            return self.user_interactions.is_bookmarked
        if self.action == InteractionType.VIEW:
            return self.user_interactions.is_viewed
        return True

    @property
    def count(self) -> Optional[int]:
        """Server-side counter for the action, where the endpoint reports one."""
        if self.action == InteractionType.LIKE:
            return self.counts.likes
        if self.action == InteractionType.VIEW:
            return self.counts.views
        return None
