"""
Database configuration settings.

Manages the SQLite store location and write retry policy.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for the employee store
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from vacation_board.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """SQLite database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SQLITE_",
        case_sensitive=False,
        extra="ignore",
    )

    path: str = Field(default="employees.db", description="SQLite database file path")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    write_retry_attempts: int = Field(
        default=5,
        ge=1,
        description="Total attempts for a write hitting a busy/locked database",
    )
    write_retry_delay_ms: int = Field(
        default=200,
        ge=0,
        description="Fixed delay between write attempts in milliseconds",
    )

    @property
    def database_url(self) -> str:
        """
        Construct async SQLite connection URL.

        Returns:
            str: SQLAlchemy async-compatible database URL (aiosqlite driver)
        """
        return f"sqlite+aiosqlite:///{self.path}"
