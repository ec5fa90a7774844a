"""
Employee CRUD operations.

Extends BaseCRUD with email lookups, partial updates and the
employee/department join used by the listing endpoint.

Dependencies: sqlalchemy, vacation_board.boundary.db.models
System role: Employee persistence operations
"""

from typing import Any, Sequence

from sqlalchemy import Row, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from vacation_board.boundary.db.CRUD.base_crud import BaseCRUD
from vacation_board.boundary.db.models.department_model import DepartmentModel
from vacation_board.boundary.db.models.employee_department_model import EmployeeDepartmentModel
from vacation_board.boundary.db.models.employee_model import EmployeeModel
from vacation_board.boundary.db.retry import WritePolicy


class EmployeeCRUD(BaseCRUD[EmployeeModel]):
    """CRUD operations for EmployeeModel."""

    def __init__(self, write_policy: WritePolicy | None = None) -> None:
        """Initialize EmployeeCRUD with EmployeeModel."""
        super().__init__(EmployeeModel, write_policy)

    async def get_by_email(self, session: AsyncSession, email: str) -> EmployeeModel | None:
        """
        Retrieve an employee by exact email.

        Args:
            session: Async database session
            email: Work email address

        Returns:
            EmployeeModel if found, None otherwise
        """
        stmt = select(EmployeeModel).where(EmployeeModel.email == email)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_fields(self, session: AsyncSession, id: int, **values: Any) -> bool:
        """
        Update the given columns of one employee.

        Args:
            session: Async database session
            id: Employee primary key
            **values: Columns to overwrite

        Returns:
            True if a row was updated
        """
        if not values:
            return await self.exists(session, id)
        stmt = update(EmployeeModel).where(EmployeeModel.id == id).values(**values)
        result = await self.write_policy.execute(session, stmt)
        return result.rowcount > 0

    async def get_all_with_departments(self, session: AsyncSession) -> Sequence[Row]:
        """
        Fetch every employee joined with its department names.

        LEFT OUTER joins keep employees that have no association rows; for
        those the department column is NULL. Rows are ordered by employee id
        then department name so callers can fold them in one pass.

        Args:
            session: Async database session

        Returns:
            Sequence of rows (employee_id, name, email, admin, department)
        """
        stmt = (
            select(
                EmployeeModel.id.label("employee_id"),
                EmployeeModel.name,
                EmployeeModel.email,
                EmployeeModel.admin,
                DepartmentModel.department,
            )
            .outerjoin(
                EmployeeDepartmentModel,
                EmployeeDepartmentModel.id_employee == EmployeeModel.id,
            )
            .outerjoin(
                DepartmentModel,
                DepartmentModel.id == EmployeeDepartmentModel.id_department,
            )
            .order_by(EmployeeModel.id, DepartmentModel.department)
        )
        result = await session.execute(stmt)
        return result.all()


employee_crud = EmployeeCRUD()
