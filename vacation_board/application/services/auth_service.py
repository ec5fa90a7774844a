"""
Authentication service.

Exposes the browser-safe part of the OAuth client configuration and redeems
authorization codes through the identity client.

Dependencies: vacation_board.boundary.graph, vacation_board.configs
System role: Sign-in use case orchestration
"""

import logging
from typing import Any

from vacation_board.application.errors import ClientInputError
from vacation_board.boundary.graph.identity import IdentityClient
from vacation_board.configs.identity import IdentitySettings

logger = logging.getLogger(__name__)


class AuthService:
    """OAuth client configuration and PKCE code redemption."""

    def __init__(self, identity: IdentityClient, settings: IdentitySettings) -> None:
        self.identity = identity
        self.settings = settings

    def client_config(self) -> dict[str, Any]:
        """
        Get the configuration the browser needs to start sign-in.

        The client secret is never part of it.
        """
        return {
            "clientId": self.settings.client_id,
            "redirectUri": self.settings.redirect_uri,
            "scope": self.settings.scope or "User.Read",
            "tenantId": self.settings.tenant_id,
        }

    async def exchange_code(self, code: str | None, code_verifier: str | None) -> Any:
        """
        Redeem an authorization code with its PKCE verifier.

        Raises:
            ClientInputError: Code or verifier missing
            RemoteAPIError: Identity provider rejected the exchange
        """
        if not code or not code_verifier:
            raise ClientInputError("Missing code or code_verifier in request body")

        payload = await self.identity.exchange_code(code, code_verifier)
        logger.info("Authorization code redeemed")
        return payload
