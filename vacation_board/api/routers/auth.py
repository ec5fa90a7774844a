"""
Authentication API endpoints.

Routes:
- GET /api/config - OAuth client configuration for the browser
- POST /auth/token - Redeem authorization code + PKCE verifier

Dependencies: vacation_board.application.services, vacation_board.models
System role: Sign-in HTTP API
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends

from vacation_board.api.deps import get_auth_service
from vacation_board.api.errors import handle_route_errors
from vacation_board.application.services import AuthService
from vacation_board.models.auth import ClientConfigResponse, TokenRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.get("/api/config", response_model=ClientConfigResponse)
async def get_client_config(
    auth_service: AuthService = Depends(get_auth_service),
) -> ClientConfigResponse:
    """Expose client id, redirect URI, scope and tenant; never the secret."""
    return ClientConfigResponse(**auth_service.client_config())


@router.post("/auth/token")
@handle_route_errors("Error getting token")
async def exchange_token(
    request: TokenRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> Any:
    """
    Exchange an authorization code for tokens.

    Args:
        request: TokenRequest with code and code_verifier
        auth_service: Injected AuthService

    Returns:
        Identity provider token payload, verbatim

    Raises:
        ClientInputError(400): code or code_verifier missing
        UpstreamError: Provider status and body relayed
        UnexpectedError(500): Exchange failed
    """
    logger.info("Exchanging authorization code")
    return await auth_service.exchange_code(request.code, request.code_verifier)
