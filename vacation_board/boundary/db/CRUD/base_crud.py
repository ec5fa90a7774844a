"""
Base CRUD operations for SQLAlchemy models.

Provides generic Create, Read, Delete operations that can be inherited and
extended by model-specific CRUD classes. Every write goes through the
store's WritePolicy so a busy database is retried instead of failing.

Dependencies: sqlalchemy, vacation_board.boundary.db.retry
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from vacation_board.boundary.db.base import Base
from vacation_board.boundary.db.retry import WritePolicy, get_write_policy

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Provides standard database operations that work with any model keyed by
    an integer ``id`` column. Subclasses specify the model class and add
    model-specific queries.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT], write_policy: WritePolicy | None = None) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
            write_policy: Retry policy for writes (defaults to configured policy)
        """
        self.model = model
        self._write_policy = write_policy

    @property
    def write_policy(self) -> WritePolicy:
        """Retry policy used for inserts, updates and deletes."""
        return self._write_policy or get_write_policy()

    async def create(self, session: AsyncSession, **kwargs: Any) -> int:
        """
        Insert a new row.

        Args:
            session: Async database session
            **kwargs: Column values

        Returns:
            int: Store-assigned primary key
        """
        stmt = insert(self.model.__table__).values(**kwargs)
        result = await self.write_policy.execute(session, stmt)
        return result.inserted_primary_key[0]

    async def get_by_id(self, session: AsyncSession, id: int) -> ModelT | None:
        """
        Retrieve a single record by primary key.

        Args:
            session: Async database session
            id: Integer primary key

        Returns:
            Model instance if found, None otherwise
        """
        stmt = select(self.model).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_by_id(self, session: AsyncSession, id: int) -> bool:
        """
        Delete a record by primary key.

        Args:
            session: Async database session
            id: Integer primary key

        Returns:
            True if record was deleted, False if not found
        """
        stmt = delete(self.model).where(self.model.id == id)
        result = await self.write_policy.execute(session, stmt)
        return result.rowcount > 0

    async def exists(self, session: AsyncSession, id: int) -> bool:
        """
        Check if a record exists by primary key.

        Args:
            session: Async database session
            id: Integer primary key

        Returns:
            True if record exists, False otherwise
        """
        stmt = select(self.model.id).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None
