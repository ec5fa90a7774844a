"""
Microsoft Graph configuration settings.

Dependencies: pydantic_settings
System role: Directory and calendar API configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphSettings(BaseSettings):
    """Microsoft Graph API configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GRAPH_",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(
        default="https://graph.microsoft.com/v1.0",
        description="Graph API base URL",
    )
    timeout_seconds: float = Field(
        default=10.0,
        description="Outbound request timeout in seconds",
    )
    vacation_subject: str = Field(
        default="Vacaciones",
        description="Calendar event subject that marks a vacation day",
    )
