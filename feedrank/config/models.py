"""Configuration models."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class SourceConfig(BaseModel):
    """Where candidate posts come from."""

    posts_url: str = Field(
        "http://localhost:3000/api/posts",
        description="Posts listing endpoint",
    )
    interact_url: str = Field(
        "http://localhost:3000/api/posts/{post_id}/interact",
        description="Post interaction endpoint template",
    )
    timeout: float = Field(10.0, description="HTTP timeout in seconds", gt=0.0)
    api_token_env: Optional[str] = Field(None, description="Environment variable for API token")
    api_token: Optional[str] = Field(None, description="API token (prefer api_token_env)")
    fallback_to_sample: bool = Field(
        True,
        description="Use the built-in sample posts when the API is unavailable",
    )


class RankingConfig(BaseModel):
    """Ranking configuration."""

    engagement_weight: float = Field(0.3, ge=0.0, le=1.0)
    relevance_weight: float = Field(0.25, ge=0.0, le=1.0)
    trending_weight: float = Field(0.2, ge=0.0, le=1.0)
    quality_weight: float = Field(0.15, ge=0.0, le=1.0)
    diversity_weight: float = Field(0.1, ge=0.0, le=1.0)
    following_bonus: float = Field(2.0, description="Engagement bonus for followed creators", ge=0.0)
    trending_window_hours: float = Field(24.0, description="Recency decay window", gt=0.0)
    small_creator_threshold: int = Field(
        10000,
        description="Follower count below which discovery boosts a creator",
        ge=0,
    )

    @model_validator(mode="after")
    def validate_weights(self) -> "RankingConfig":
        """Validate that weights sum to 1.0."""
        total = (
            self.engagement_weight
            + self.relevance_weight
            + self.trending_weight
            + self.quality_weight
            + self.diversity_weight
        )
        if abs(total - 1.0) > 0.001:
            raise ValueError(f"Weights must sum to 1.0, got {total}")
        return self


class FeedConfig(BaseModel):
    """Feed display defaults."""

    default_mode: str = Field("intelligent", description="Ranking mode when none is given")
    limit: int = Field(20, description="Posts shown by the CLI", ge=1, le=500)

    @field_validator("default_mode")
    @classmethod
    def validate_mode(cls, v: str) -> str:
        """Validate the mode name."""
        modes = {"intelligent", "trending", "following", "discover"}
        if v not in modes:
            raise ValueError(f"Unknown feed mode '{v}', expected one of {sorted(modes)}")
        return v


class ConfigModel(BaseModel):
    """Main configuration model."""

    preferences_file: str = Field(
        "preferences.yaml",
        description="Viewer preferences file, relative to the config directory",
    )
    source: SourceConfig = Field(default_factory=SourceConfig)
    ranking: RankingConfig = Field(default_factory=RankingConfig)
    feed: FeedConfig = Field(default_factory=FeedConfig)
