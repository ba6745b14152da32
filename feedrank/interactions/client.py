"""Client for the post interaction endpoint."""

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from .models import InteractionResponse, InteractionType

logger = logging.getLogger(__name__)

# Actions the endpoint stores; shares and comments are tracked client-side only
REMOTE_ACTIONS = {InteractionType.LIKE, InteractionType.BOOKMARK, InteractionType.VIEW}


class InteractionError(Exception):
    """Raised when the interaction endpoint rejects or fails a request."""


class InteractionClient:
    """Send viewer interactions to the platform."""

    def __init__(
        self,
        interact_url: str,
        timeout: float = 10.0,
        api_token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize interaction client.

        Args:
            interact_url: Endpoint template containing ``{post_id}``
            timeout: HTTP timeout in seconds
            api_token: Bearer token sent with each request
            transport: Custom httpx transport
        """
        self.interact_url = interact_url
        self.timeout = timeout
        self.api_token = api_token
        self.transport = transport

    @classmethod
    def from_config(cls, source_config: Dict[str, Any], **kwargs) -> "InteractionClient":
        """Create a client from a resolved source configuration dict."""
        return cls(
            interact_url=source_config["interact_url"],
            timeout=source_config.get("timeout", 10.0),
            api_token=source_config.get("api_token"),
            **kwargs,
        )

    async def send(self, post_id: str, action: InteractionType) -> InteractionResponse:
        """Post an interaction and return the server's view of it."""
        action = InteractionType(action)
        if action not in REMOTE_ACTIONS:
            raise InteractionError(f"Action '{action.value}' is not stored by the server")

        url = self.interact_url.format(post_id=post_id)
        headers = {"Content-Type": "application/json"}
        if self.api_token:
            headers["Authorization"] = f"Bearer {self.api_token}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(url, json={"action": action.value}, headers=headers)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            raise InteractionError(f"Interaction '{action.value}' on post {post_id} failed: {e}") from e
        except ValueError as e:
            raise InteractionError(f"Invalid JSON response: {e}") from e

        try:
            result = InteractionResponse.model_validate(data)
        except ValidationError as e:
            raise InteractionError(f"Unexpected interaction response: {e}") from e

        if not result.success:
            raise InteractionError(f"Interaction '{action.value}' on post {post_id} was rejected")

        logger.debug("Recorded %s on post %s (active=%s)", action.value, post_id, result.active)
        return result
