"""Post and engagement metric models."""

from enum import Enum
from typing import List, Optional

import pendulum
from pydantic import Field, field_validator, model_validator

from .base import FeedModel
from .profile import UserProfile


class MediaType(str, Enum):
    """Attached media kind."""

    IMAGE = "image"
    VIDEO = "video"
    GIF = "gif"


class Privacy(str, Enum):
    """Post visibility."""

    PUBLIC = "public"
    FOLLOWERS = "followers"
    PAID = "paid"
    PRIVATE = "private"


class PostMetrics(FeedModel):
    """Engagement counters and pre-computed 0-10 scores carried on a post."""

    likes_count: int = Field(0, description="Number of likes", ge=0)
    comments_count: int = Field(0, description="Number of comments", ge=0)
    shares_count: int = Field(0, description="Number of shares", ge=0)
    views_count: int = Field(0, description="Number of views", ge=0)
    engagement_rate: float = Field(0.0, description="Post engagement rate", ge=0.0)
    virality_score: float = Field(0.0, description="Virality score", ge=0.0)
    freshness_score: float = Field(0.0, description="Freshness score", ge=0.0)
    relevance_score: float = Field(0.0, description="Relevance score", ge=0.0)

    @field_validator("*", mode="before")
    @classmethod
    def null_as_zero(cls, v):
        """The posts API reports unset counters as null."""
        return 0 if v is None else v


class Post(FeedModel):
    """A feed post."""

    id: str = Field(..., description="Post ID")
    creator: UserProfile = Field(default_factory=UserProfile, description="Post author")
    content: str = Field("", description="Post text")
    media_url: Optional[str] = Field(None, description="Attached media URL")
    media_type: Optional[MediaType] = Field(None, description="Attached media kind")
    is_paid: bool = Field(False, description="Whether the post is paywalled")
    price: Optional[float] = Field(None, description="Unlock price", ge=0.0)
    privacy: Privacy = Field(Privacy.PUBLIC, description="Post visibility")
    metrics: PostMetrics = Field(default_factory=PostMetrics)
    created_at: str = Field("", description="Display creation time")
    created_at_timestamp: int = Field(0, description="Creation time in epoch milliseconds")
    tags: List[str] = Field(default_factory=list, description="Post tags")
    category: str = Field("general", description="Primary topic")
    is_liked: bool = Field(False, description="Viewer liked this post")
    is_bookmarked: bool = Field(False, description="Viewer bookmarked this post")
    is_favorited: bool = Field(False, description="Viewer favorited this post")
    is_viewed: bool = Field(False, description="Viewer opened this post")
    quality_score: float = Field(0.0, description="Last computed quality score")
    trending_score: float = Field(0.0, description="Last computed trending score")

    @field_validator("id", mode="before")
    @classmethod
    def id_as_str(cls, v):
        """Database-backed posts may carry integer IDs."""
        return str(v) if isinstance(v, int) else v

    @field_validator("creator", "metrics", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        return {} if v is None else v

    @field_validator("tags", mode="before")
    @classmethod
    def null_tags(cls, v):
        return [] if v is None else v

    @field_validator("content", "created_at", mode="before")
    @classmethod
    def null_text(cls, v):
        return "" if v is None else v

    @field_validator("category", mode="before")
    @classmethod
    def null_category(cls, v):
        return v or "general"

    @field_validator("media_type", mode="before")
    @classmethod
    def blank_media_type(cls, v):
        return v or None

    @field_validator("privacy", mode="before")
    @classmethod
    def null_privacy(cls, v):
        return v or Privacy.PUBLIC

    @field_validator("quality_score", "trending_score", mode="before")
    @classmethod
    def null_score(cls, v):
        return 0.0 if v is None else v

    @model_validator(mode="before")
    @classmethod
    def derive_timestamp(cls, data):
        """Fill createdAtTimestamp from an ISO createdAt when it is missing."""
        if not isinstance(data, dict):
            return data

        for key in ("createdAtTimestamp", "created_at_timestamp"):
            if data.get(key) is not None:
                return data

        created_at = data.get("createdAt") or data.get("created_at")
        if not isinstance(created_at, str) or not created_at:
            return data

        try:
            parsed = pendulum.parse(created_at)
        except (ValueError, TypeError):
            # Relative display strings like "2h" carry no absolute time
            return data

        if isinstance(parsed, pendulum.DateTime):
            data = dict(data)
            data["createdAtTimestamp"] = int(parsed.timestamp() * 1000)
        return data

    @property
    def has_media(self) -> bool:
        """Whether the post carries an attachment."""
        return bool(self.media_url)
