"""
HTTP server configuration settings.

Dependencies: pydantic_settings
System role: Uvicorn and CORS configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseSettings):
    """Uvicorn bind address and CORS policy."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SERVER_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(
        default=3000,
        validation_alias=AliasChoices("SERVER_PORT", "PORT"),
        description="Bind port",
    )
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")
