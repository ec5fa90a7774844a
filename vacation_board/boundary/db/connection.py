"""
Database connection management.

Provides the process-wide store accessor (one lazily created async engine
over the SQLite file), its session factory, and the FastAPI dependency for
session injection.

Dependencies: sqlalchemy, aiosqlite, vacation_board.configs
System role: Database connection lifecycle management
"""

import logging
from typing import Any, AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from vacation_board.boundary.db.base import Base

logger = logging.getLogger(__name__)


def _enable_write_ahead_log(dbapi_connection: Any, connection_record: Any) -> None:
    """Switch every new SQLite connection to WAL journaling with FK enforcement."""
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
    finally:
        cursor.close()


class StoreAccessor:
    """
    Owner of the single shared handle to the relational store.

    The engine is created on first use and reused for the lifetime of the
    process. Request handlers never build engines themselves; they receive
    sessions from this accessor through dependency injection.
    """

    def __init__(self, database_url: str, echo: bool = False, **engine_kwargs: Any) -> None:
        """
        Initialize accessor without opening any connection.

        Args:
            database_url: SQLAlchemy async URL (sqlite+aiosqlite:///path)
            echo: Echo SQL statements to logs
            **engine_kwargs: Extra create_async_engine arguments (e.g. poolclass)
        """
        self._database_url = database_url
        self._echo = echo
        self._engine_kwargs = engine_kwargs
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker | None = None

    @property
    def database_url(self) -> str:
        """Configured database URL."""
        return self._database_url

    @property
    def engine(self) -> AsyncEngine:
        """
        Get the shared engine, creating and configuring it on first access.

        Returns:
            AsyncEngine: Engine whose connections run in WAL mode
        """
        if self._engine is None:
            self._engine = create_async_engine(
                self._database_url,
                echo=self._echo,
                **self._engine_kwargs,
            )
            event.listen(self._engine.sync_engine, "connect", _enable_write_ahead_log)
            logger.info("Store engine created", extra={"database_url": self._database_url})
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker:
        """
        Get async session factory bound to the shared engine.

        autocommit/autoflush disabled for explicit transaction control;
        expire_on_commit disabled so returned rows stay readable.

        Returns:
            async_sessionmaker: Session factory for the store
        """
        if self._session_factory is None:
            self._session_factory = async_sessionmaker(
                bind=self.engine,
                autoflush=False,
                expire_on_commit=False,
            )
        return self._session_factory

    def session(self) -> AsyncSession:
        """
        Open a new session on the shared engine.

        Usage:
            async with store.session() as session:
                await session.execute(...)
                await session.commit()
        """
        return self.session_factory()

    async def initialize(self) -> None:
        """
        Create missing tables before serving traffic.

        Idempotent: existing tables and their rows are left untouched.
        """
        # Register every model with Base.metadata
        from vacation_board.boundary.db import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Store initialized", extra={"database_url": self._database_url})

    async def ping(self) -> bool:
        """
        Round-trip a trivial query.

        Returns:
            bool: True when the store answers
        """
        async with self.engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            return result.scalar_one() == 1

    async def dispose(self) -> None:
        """Release pooled connections; the accessor can be reused afterwards."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Store engine disposed")


async def session_scope(store: StoreAccessor) -> AsyncGenerator[AsyncSession, None]:
    """
    Yield a session that is always closed, rolling back uncommitted work.

    Args:
        store: Store accessor owning the engine

    Yields:
        AsyncSession: Session scoped to the caller
    """
    async with store.session() as session:
        yield session
