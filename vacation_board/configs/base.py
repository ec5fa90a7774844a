"""
Shared settings base.

Holds the `.env` loading policy and the log level used by the API and the
schema bootstrap script.

Dependencies: pydantic_settings
System role: Parent of the database settings and the aggregated Settings
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Settings base reading `.env` with case-insensitive names."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level passed to configure_logging (LOG_LEVEL)",
    )
