"""
Identity provider configuration settings.

OAuth client registration used for the authorization-code + PKCE exchange.
Variable names match the ones the frontend deployment already sets
(CLIENT_ID, CLIENT_SECRET, REDIRECT_URI, SCOPE, TENANT_ID).

Dependencies: pydantic_settings
System role: OAuth client configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class IdentitySettings(BaseSettings):
    """Microsoft identity platform client configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    client_id: str | None = Field(default=None, description="Application (client) ID")
    client_secret: str | None = Field(default=None, description="Client secret, never sent to browsers")
    redirect_uri: str | None = Field(default=None, description="Registered redirect URI")
    scope: str = Field(default="User.Read", description="Requested OAuth scope")
    tenant_id: str | None = Field(default=None, description="Directory (tenant) ID")
    authority_host: str = Field(
        default="https://login.microsoftonline.com",
        description="Identity provider authority host",
    )

    @property
    def token_endpoint(self) -> str:
        """
        Construct the tenant token endpoint.

        Returns:
            str: OAuth2 v2.0 token endpoint URL for the configured tenant
        """
        return f"{self.authority_host.rstrip('/')}/{self.tenant_id}/oauth2/v2.0/token"
