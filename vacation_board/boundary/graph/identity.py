"""
Identity provider token exchange.

Redeems an authorization code plus PKCE verifier at the tenant token
endpoint. The client secret stays on the server; the browser only ever sees
the resulting token payload.

Dependencies: httpx, vacation_board.configs
System role: OAuth2 authorization-code + PKCE boundary
"""

import logging
from typing import Any

import httpx

from vacation_board.boundary.graph.client import decode_json_body
from vacation_board.boundary.graph.errors import RemoteAPIError
from vacation_board.configs.identity import IdentitySettings

logger = logging.getLogger(__name__)


class IdentityClient:
    """Token endpoint client for the authorization-code grant."""

    def __init__(self, http_client: httpx.AsyncClient, settings: IdentitySettings) -> None:
        """
        Initialize identity client.

        Args:
            http_client: Shared async HTTP client (owned by the caller)
            settings: Client registration (id, secret, redirect URI, tenant)
        """
        self._http = http_client
        self._settings = settings

    async def exchange_code(self, code: str, code_verifier: str) -> Any:
        """
        Exchange an authorization code for tokens.

        Args:
            code: Authorization code returned to the redirect URI
            code_verifier: PKCE verifier matching the original challenge

        Returns:
            Decoded token payload (access_token, id_token, expires_in, ...)

        Raises:
            RemoteAPIError: Token endpoint rejected the exchange
            httpx.HTTPError: Transport failure
        """
        form = {
            "client_id": self._settings.client_id or "",
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": self._settings.redirect_uri or "",
            "code_verifier": code_verifier,
            "client_secret": self._settings.client_secret or "",
        }
        response = await self._http.post(self._settings.token_endpoint, data=form)
        body = decode_json_body(response)
        if response.is_error:
            logger.warning(
                "Token exchange rejected",
                extra={"status_code": response.status_code},
            )
            raise RemoteAPIError(response.status_code, body, response.reason_phrase)
        return body
