"""Configuration management for the feed ranker."""

from .loader import Config, load_config, load_preferences, save_config, save_preferences
from .models import ConfigModel, FeedConfig, RankingConfig, SourceConfig

__all__ = [
    "Config",
    "ConfigModel",
    "FeedConfig",
    "RankingConfig",
    "SourceConfig",
    "load_config",
    "load_preferences",
    "save_config",
    "save_preferences",
]
