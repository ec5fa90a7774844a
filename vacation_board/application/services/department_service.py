"""
Department service orchestrator.

Creates and lists departments and links single employee/department pairs.

Dependencies: vacation_board.boundary.db.CRUD
System role: Department use case orchestration
"""

import logging
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from vacation_board.application.errors import (
    ClientInputError,
    DepartmentNotFoundError,
    EmployeeNotFoundError,
)
from vacation_board.boundary.db.CRUD.department_crud import department_crud
from vacation_board.boundary.db.CRUD.employee_crud import employee_crud
from vacation_board.boundary.db.CRUD.employee_department_crud import employee_department_crud
from vacation_board.boundary.db.models.department_model import DepartmentModel

logger = logging.getLogger(__name__)


class DepartmentService:
    """Department service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def create_department(self, department: str | None) -> int:
        """
        Create a department.

        Args:
            department: Department name (required, unique)

        Returns:
            int: New department id

        Raises:
            ClientInputError: Name missing
            IntegrityError: Name already used (after rollback)
        """
        if not department:
            raise ClientInputError("Department is required")

        try:
            department_id = await department_crud.create(self.db, department=department)
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to create department",
                extra={"error": str(e), "department": department},
            )
            raise

        logger.info("Department created", extra={"department_id": department_id})
        return department_id

    async def list_departments(self) -> Sequence[DepartmentModel]:
        """List all departments ordered by name."""
        return await department_crud.get_all_by_name(self.db)

    async def link_employee_department(
        self,
        employee_id: int | None,
        department_id: int | None,
    ) -> None:
        """
        Add one employee/department association.

        Args:
            employee_id: Employee id (required)
            department_id: Department id (required)

        Raises:
            ClientInputError: Either id missing
            EmployeeNotFoundError: Unknown employee
            DepartmentNotFoundError: Unknown department
            IntegrityError: Pair already linked (after rollback)
        """
        if employee_id is None or department_id is None:
            raise ClientInputError("id_employee or id_department is required")

        try:
            if not await employee_crud.exists(self.db, employee_id):
                raise EmployeeNotFoundError(employee_id)
            if not await department_crud.exists(self.db, department_id):
                raise DepartmentNotFoundError(department_id)

            await employee_department_crud.link(self.db, employee_id, department_id)
            await self.db.commit()
        except (EmployeeNotFoundError, DepartmentNotFoundError):
            await self.db.rollback()
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to link employee to department",
                extra={"error": str(e), "employee_id": employee_id, "department_id": department_id},
            )
            raise

        logger.info(
            "Employee linked to department",
            extra={"employee_id": employee_id, "department_id": department_id},
        )
