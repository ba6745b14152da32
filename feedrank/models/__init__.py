"""Data models for the feed ranking engine."""

from .post import MediaType, Post, PostMetrics, Privacy
from .preferences import (
    ActivityPattern,
    ContentType,
    EngagementHistory,
    PostLength,
    UserPreferences,
)
from .profile import UserProfile

__all__ = [
    "ActivityPattern",
    "ContentType",
    "EngagementHistory",
    "MediaType",
    "Post",
    "PostLength",
    "PostMetrics",
    "Privacy",
    "UserPreferences",
    "UserProfile",
]
