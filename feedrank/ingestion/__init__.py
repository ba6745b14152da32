"""Candidate post ingestion."""

from .fixtures import default_preferences, sample_posts
from .models import FetchResult
from .post_source import PostSource, load_posts_file, parse_posts

__all__ = [
    "PostSource",
    "FetchResult",
    "default_preferences",
    "load_posts_file",
    "parse_posts",
    "sample_posts",
]
