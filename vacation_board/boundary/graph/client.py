"""
Microsoft Graph client.

Thin async wrapper over the handful of Graph endpoints the board needs:
the signed-in user's profile and photo, another user's photo, and another
user's vacation events. Every call forwards the caller's bearer token and
returns the remote payload untouched.

Dependencies: httpx
System role: Directory and calendar API boundary
"""

import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import httpx

from vacation_board.boundary.graph.errors import RemoteAPIError

logger = logging.getLogger(__name__)

DEFAULT_PHOTO_CONTENT_TYPE = "image/jpeg"


@dataclass(frozen=True)
class PhotoPayload:
    """Binary photo as returned by Graph."""

    content: bytes
    content_type: str


def decode_json_body(response: httpx.Response) -> Any:
    """Decode a JSON body, returning None for empty or non-JSON payloads."""
    try:
        return response.json()
    except ValueError:
        return None


class GraphClient:
    """Bearer-token pass-through client for Microsoft Graph."""

    def __init__(self, http_client: httpx.AsyncClient, base_url: str = "https://graph.microsoft.com/v1.0") -> None:
        """
        Initialize Graph client.

        Args:
            http_client: Shared async HTTP client (owned by the caller)
            base_url: Graph API version root
        """
        self._http = http_client
        self._base_url = base_url.rstrip("/")

    async def _get(self, token: str, path: str) -> httpx.Response:
        url = f"{self._base_url}{path}"
        response = await self._http.get(url, headers={"Authorization": f"Bearer {token}"})
        if response.is_error:
            logger.warning(
                "Graph request failed",
                extra={"path": path, "status_code": response.status_code},
            )
            raise RemoteAPIError(response.status_code, decode_json_body(response), response.reason_phrase)
        return response

    async def _get_photo(self, token: str, path: str) -> PhotoPayload:
        response = await self._get(token, path)
        return PhotoPayload(
            content=response.content,
            content_type=response.headers.get("Content-Type") or DEFAULT_PHOTO_CONTENT_TYPE,
        )

    async def get_me(self, token: str) -> Any:
        """
        Fetch the signed-in user's profile.

        Args:
            token: Caller's access token

        Returns:
            Decoded JSON profile

        Raises:
            RemoteAPIError: Graph answered with a non-2xx status
            httpx.HTTPError: Transport failure
        """
        response = await self._get(token, "/me")
        return response.json()

    async def get_my_photo(self, token: str) -> PhotoPayload:
        """
        Fetch the signed-in user's profile photo.

        Args:
            token: Caller's access token

        Returns:
            PhotoPayload with raw bytes and the remote content type
        """
        return await self._get_photo(token, "/me/photo/$value")

    async def get_user_photo(self, token: str, user_id: str) -> PhotoPayload:
        """
        Fetch another user's profile photo.

        Args:
            token: Caller's access token
            user_id: Graph user id or user principal name (email)

        Returns:
            PhotoPayload with raw bytes and the remote content type
        """
        return await self._get_photo(token, f"/users/{quote(user_id, safe='')}/photo/$value")

    async def get_user_events(self, token: str, email: str, subject: str) -> Any:
        """
        Fetch calendar events of a user whose subject equals ``subject``.

        Args:
            token: Caller's access token
            email: User principal name whose calendar is read
            subject: Exact event subject to filter on

        Returns:
            Decoded JSON event collection
        """
        filter_expr = quote(f"subject eq '{subject}'", safe="'")
        response = await self._get(
            token,
            f"/users/{quote(email, safe='')}/calendar/events?$filter={filter_expr}",
        )
        return response.json()
