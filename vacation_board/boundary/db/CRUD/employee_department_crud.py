"""
Employee/department association CRUD operations.

Association rows have no id of their own, so this class does not extend
BaseCRUD; it only links, unlinks and lists pairs.

Dependencies: sqlalchemy, vacation_board.boundary.db.models
System role: Association row persistence
"""

from typing import Sequence

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from vacation_board.boundary.db.models.employee_department_model import EmployeeDepartmentModel
from vacation_board.boundary.db.retry import WritePolicy, get_write_policy


class EmployeeDepartmentCRUD:
    """Link/unlink operations on the EmployeesDepartments table."""

    def __init__(self, write_policy: WritePolicy | None = None) -> None:
        self._write_policy = write_policy

    @property
    def write_policy(self) -> WritePolicy:
        """Retry policy used for inserts and deletes."""
        return self._write_policy or get_write_policy()

    async def link(self, session: AsyncSession, employee_id: int, department_id: int) -> None:
        """
        Insert one association row.

        Args:
            session: Async database session
            employee_id: Employee primary key
            department_id: Department primary key
        """
        stmt = insert(EmployeeDepartmentModel.__table__).values(
            id_employee=employee_id,
            id_department=department_id,
        )
        await self.write_policy.execute(session, stmt)

    async def unlink_all(self, session: AsyncSession, employee_id: int) -> int:
        """
        Delete every association row of an employee.

        Args:
            session: Async database session
            employee_id: Employee primary key

        Returns:
            int: Number of rows removed
        """
        stmt = delete(EmployeeDepartmentModel).where(
            EmployeeDepartmentModel.id_employee == employee_id
        )
        result = await self.write_policy.execute(session, stmt)
        return result.rowcount

    async def get_department_ids(self, session: AsyncSession, employee_id: int) -> Sequence[int]:
        """
        List department ids linked to an employee.

        Args:
            session: Async database session
            employee_id: Employee primary key

        Returns:
            Sequence of department ids
        """
        stmt = (
            select(EmployeeDepartmentModel.id_department)
            .where(EmployeeDepartmentModel.id_employee == employee_id)
            .order_by(EmployeeDepartmentModel.id_department)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


employee_department_crud = EmployeeDepartmentCRUD()
