"""
Write retry for a busy SQLite store.

WAL mode still allows only one writer at a time, so a write issued while
another connection holds the write lock fails with "database is locked".
Writes that go through execute_with_retry are re-attempted a bounded number
of times with a fixed delay between attempts.

Dependencies: sqlalchemy, tenacity
System role: Transient write contention mitigation
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Mapping, Sequence

from sqlalchemy import Executable, Result
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_fixed,
)

from vacation_board.configs import get_settings

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 5
DEFAULT_DELAY_MS = 200

_BUSY_MARKERS = ("database is locked", "database is busy", "database table is locked")
_BUSY_ERROR_NAMES = {"SQLITE_BUSY", "SQLITE_LOCKED"}


def is_transient_store_error(exc: BaseException) -> bool:
    """
    Classify an exception as a busy/locked store condition.

    Args:
        exc: Exception raised by a statement

    Returns:
        bool: True only for OperationalErrors caused by write-lock contention
    """
    if not isinstance(exc, OperationalError):
        return False
    original = exc.orig
    if getattr(original, "sqlite_errorname", None) in _BUSY_ERROR_NAMES:
        return True
    message = str(original if original is not None else exc).lower()
    return any(marker in message for marker in _BUSY_MARKERS)


async def execute_with_retry(
    session: AsyncSession,
    statement: Executable,
    parameters: Mapping[str, Any] | Sequence[Mapping[str, Any]] | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    delay_ms: int = DEFAULT_DELAY_MS,
) -> Result:
    """
    Execute one write statement, retrying while the store is busy.

    Args:
        session: Async database session
        statement: SQLAlchemy insert/update/delete statement
        parameters: Bind parameters for the statement
        max_attempts: Total attempts, including the first one
        delay_ms: Fixed wait between attempts in milliseconds

    Returns:
        Result: Result of the successful attempt

    Raises:
        OperationalError: Last busy/locked failure once attempts are exhausted
        Exception: Any other failure, immediately and without retry
    """
    retrying = AsyncRetrying(
        retry=retry_if_exception(is_transient_store_error),
        stop=stop_after_attempt(max_attempts),
        wait=wait_fixed(delay_ms / 1000),
        before_sleep=lambda retry_state: logger.warning(
            f"{__name__}:execute_with_retry - Store busy, retry "
            f"{retry_state.attempt_number}/{max_attempts}"
        ),
        reraise=True,
    )
    return await retrying(session.execute, statement, parameters)


@dataclass(frozen=True)
class WritePolicy:
    """Retry parameters applied to every guarded write."""

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    delay_ms: int = DEFAULT_DELAY_MS

    async def execute(
        self,
        session: AsyncSession,
        statement: Executable,
        parameters: Mapping[str, Any] | Sequence[Mapping[str, Any]] | None = None,
    ) -> Result:
        """Run execute_with_retry with this policy's attempts and delay."""
        return await execute_with_retry(
            session,
            statement,
            parameters,
            max_attempts=self.max_attempts,
            delay_ms=self.delay_ms,
        )


@lru_cache
def get_write_policy() -> WritePolicy:
    """
    Get the write policy configured through SQLITE_WRITE_RETRY_* variables.

    Returns:
        WritePolicy: Cached policy built from settings
    """
    db_config = get_settings().database
    return WritePolicy(
        max_attempts=db_config.write_retry_attempts,
        delay_ms=db_config.write_retry_delay_ms,
    )
