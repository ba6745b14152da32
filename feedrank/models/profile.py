"""Creator profile model as seen by the ranker."""

from typing import List, Optional

from pydantic import Field, ValidationInfo, field_validator

from .base import FeedModel


class UserProfile(FeedModel):
    """Post author."""

    id: str = Field("", description="Creator user ID")
    username: str = Field("", description="Creator handle")
    display_name: str = Field("", description="Creator display name")
    avatar_url: Optional[str] = Field(None, description="Avatar image URL")
    is_verified: bool = Field(False, description="Whether the creator is verified")
    follower_count: int = Field(0, description="Number of followers", ge=0)
    engagement_rate: float = Field(0.0, description="Historical engagement rate (percent)", ge=0.0)
    category: List[str] = Field(default_factory=list, description="Creator niche tags")
    trust_score: float = Field(0.0, description="Platform reputation score", ge=0.0, le=10.0)
    is_following: bool = Field(
        False,
        description="Viewer follows this creator (informational, not used for filtering)",
    )

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, v, info: ValidationInfo):
        """Profiles from the posts API may carry null for unset fields."""
        if v is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return v
