"""Viewer preference profile consumed by the ranker."""

from enum import Enum
from typing import Dict, List

from pydantic import Field, field_validator

from .base import FeedModel


class ContentType(str, Enum):
    """Content formats a viewer can prefer."""

    IMAGE = "image"
    VIDEO = "video"
    TEXT = "text"


class PostLength(str, Enum):
    """Preferred post length."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class EngagementHistory(FeedModel):
    """Post IDs the viewer interacted with, one list per interaction kind."""

    liked_posts: List[str] = Field(default_factory=list)
    commented_posts: List[str] = Field(default_factory=list)
    shared_posts: List[str] = Field(default_factory=list)
    viewed_posts: List[str] = Field(default_factory=list)
    bookmarked_posts: List[str] = Field(default_factory=list)

    @field_validator("*", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        return [] if v is None else v


class ActivityPattern(FeedModel):
    """When the viewer tends to be active."""

    peak_hours: List[int] = Field(default_factory=list, description="Hours of day (0-23)")
    average_session_length: float = Field(0.0, description="Average session length in minutes", ge=0.0)
    preferred_days: List[str] = Field(default_factory=list, description="Lower-case weekday names")


class UserPreferences(FeedModel):
    """Viewer preference profile.

    ``blocked_users``, ``preferred_post_length``, ``activity_pattern`` and
    ``time_spent_on_posts`` are accepted and persisted but no scoring formula
    reads them.
    """

    interests: List[str] = Field(default_factory=list, description="Free-text topics")
    preferred_categories: List[str] = Field(default_factory=list)
    engagement_history: EngagementHistory = Field(default_factory=EngagementHistory)
    time_spent_on_posts: Dict[str, float] = Field(
        default_factory=dict,
        description="Seconds spent per post ID",
    )
    following_list: List[str] = Field(default_factory=list, description="Followed creator IDs")
    blocked_users: List[str] = Field(default_factory=list, description="Blocked user IDs")
    preferred_content_types: List[ContentType] = Field(default_factory=list)
    preferred_post_length: PostLength = Field(PostLength.MEDIUM)
    activity_pattern: ActivityPattern = Field(default_factory=ActivityPattern)

    @field_validator(
        "interests",
        "preferred_categories",
        "following_list",
        "blocked_users",
        "preferred_content_types",
        mode="before",
    )
    @classmethod
    def null_list(cls, v):
        return [] if v is None else v

    @field_validator("engagement_history", "activity_pattern", "time_spent_on_posts", mode="before")
    @classmethod
    def null_mapping(cls, v):
        return {} if v is None else v

    def prefers_content_type(self, media_type) -> bool:
        """Check a post media type against the preferred content types."""
        if media_type is None:
            return False
        value = getattr(media_type, "value", media_type)
        return any(c.value == value for c in self.preferred_content_types)
