"""Base model class for all feed models."""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class FeedModel(BaseModel):
    """Base model for feed data exchanged with the platform API."""

    class Config:
        """Pydantic config."""

        alias_generator = to_camel
        populate_by_name = True

    def to_api(self) -> dict:
        """Dump using the camelCase field names of the platform API."""
        return self.model_dump(by_alias=True, mode="json")
