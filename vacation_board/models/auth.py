"""
Authentication schemas.

Dependencies: pydantic
System role: OAuth configuration and token exchange contracts
"""

from pydantic import BaseModel, Field


class ClientConfigResponse(BaseModel):
    """Non-secret OAuth client configuration for the browser."""

    clientId: str | None
    redirectUri: str | None
    scope: str
    tenantId: str | None


class TokenRequest(BaseModel):
    """Authorization code redemption request."""

    code: str | None = Field(None, description="Authorization code")
    code_verifier: str | None = Field(None, description="PKCE code verifier")
