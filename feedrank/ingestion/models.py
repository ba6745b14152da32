"""Data models for post ingestion."""

from typing import List, Optional

from pydantic import BaseModel, Field

from ..models import Post


class FetchResult(BaseModel):
    """Result of loading a candidate post set."""

    source: str = Field(..., description="Where the posts came from (URL, file or 'sample')")
    success: bool = Field(..., description="Whether the primary source answered")
    posts: List[Post] = Field(default_factory=list, description="Candidate posts")
    used_fallback: bool = Field(False, description="Whether the sample posts were substituted")
    skipped: int = Field(0, description="Malformed posts dropped while parsing")
    error: Optional[str] = Field(None, description="Error message if the primary source failed")
