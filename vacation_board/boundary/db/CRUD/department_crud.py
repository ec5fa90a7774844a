"""
Department CRUD operations.

Dependencies: sqlalchemy, vacation_board.boundary.db.models
System role: Department persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vacation_board.boundary.db.CRUD.base_crud import BaseCRUD
from vacation_board.boundary.db.models.department_model import DepartmentModel
from vacation_board.boundary.db.retry import WritePolicy


class DepartmentCRUD(BaseCRUD[DepartmentModel]):
    """CRUD operations for DepartmentModel."""

    def __init__(self, write_policy: WritePolicy | None = None) -> None:
        """Initialize DepartmentCRUD with DepartmentModel."""
        super().__init__(DepartmentModel, write_policy)

    async def get_id_by_name(self, session: AsyncSession, name: str) -> int | None:
        """
        Resolve a department name to its id by exact match.

        Args:
            session: Async database session
            name: Department name

        Returns:
            Department id, or None when no department has that name
        """
        stmt = select(DepartmentModel.id).where(DepartmentModel.department == name)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all_by_name(self, session: AsyncSession) -> Sequence[DepartmentModel]:
        """
        Retrieve all departments ordered alphabetically.

        Args:
            session: Async database session

        Returns:
            Sequence of DepartmentModel ordered by name
        """
        stmt = select(DepartmentModel).order_by(DepartmentModel.department)
        result = await session.execute(stmt)
        return result.scalars().all()


department_crud = DepartmentCRUD()
