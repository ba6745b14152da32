"""Viewer interaction recording."""

from .client import InteractionClient, InteractionError
from .models import InteractionResponse, InteractionType
from .recorder import apply_interaction, record_interaction

__all__ = [
    "InteractionClient",
    "InteractionError",
    "InteractionResponse",
    "InteractionType",
    "apply_interaction",
    "record_interaction",
]
