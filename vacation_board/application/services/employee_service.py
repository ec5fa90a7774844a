"""
Employee service orchestrator.

Coordinates employee lifecycle operations. Each mutation runs in one
transaction: row changes and department synchronization are committed
together or rolled back together.

Dependencies: vacation_board.boundary.db.CRUD, vacation_board.application.services.department_sync
System role: Employee use case orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from vacation_board.application.errors import ClientInputError, EmployeeNotFoundError
from vacation_board.application.services.department_sync import (
    DepartmentSynchronizer,
    SyncResult,
    department_synchronizer,
)
from vacation_board.boundary.db.CRUD.employee_crud import employee_crud
from vacation_board.boundary.db.CRUD.employee_department_crud import employee_department_crud

logger = logging.getLogger(__name__)


class EmployeeService:
    """Employee service orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        synchronizer: DepartmentSynchronizer = department_synchronizer,
    ) -> None:
        """
        Initialize employee service with async database session.

        Args:
            db: Async SQLAlchemy session
            synchronizer: Department link synchronizer
        """
        self.db = db
        self.synchronizer = synchronizer

    async def create_employee(
        self,
        email: str | None,
        name: str | None = None,
        admin: bool | None = False,
        departments: list[str] | str | None = None,
    ) -> tuple[int, SyncResult]:
        """
        Create an employee and link the requested departments.

        Args:
            email: Work email (required)
            name: Display name (optional)
            admin: Administrator flag
            departments: Department name(s) to link (optional)

        Returns:
            tuple[int, SyncResult]: New employee id and synchronization outcome

        Raises:
            ClientInputError: Email missing
            IntegrityError: Email already used (after rollback)
        """
        if not email:
            raise ClientInputError("Email is required")

        try:
            employee_id = await employee_crud.create(
                self.db,
                email=email,
                name=name or None,
                admin=bool(admin),
            )
            sync = await self.synchronizer.sync_departments(self.db, employee_id, departments)
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to create employee",
                extra={"error": str(e), "email": email},
            )
            raise

        logger.info(
            "Employee created",
            extra={"employee_id": employee_id, "linked": sync.linked, "skipped": sync.skipped},
        )
        return employee_id, sync

    async def list_employees(self) -> list[dict]:
        """
        List every employee with its department names.

        Folds the employee/department outer join into one dict per employee;
        employees without departments get an empty list.

        Returns:
            list[dict]: Employees ordered by id
        """
        rows = await employee_crud.get_all_with_departments(self.db)

        employees: dict[int, dict] = {}
        for row in rows:
            employee = employees.get(row.employee_id)
            if employee is None:
                employee = {
                    "id": row.employee_id,
                    "name": row.name,
                    "email": row.email,
                    "admin": bool(row.admin),
                    "departments": [],
                }
                employees[row.employee_id] = employee
            if row.department is not None:
                employee["departments"].append(row.department)

        return list(employees.values())

    async def update_employee(
        self,
        employee_id: int,
        email: str | None = None,
        name: str | None = None,
        admin: bool | None = None,
        departments: list[str] | str | None = None,
    ) -> SyncResult:
        """
        Partially update an employee.

        None means "keep the stored value" for every field. For departments,
        None leaves links untouched while an empty list removes them all.

        Args:
            employee_id: Employee id
            email: New email (optional)
            name: New display name (optional)
            admin: New administrator flag (optional)
            departments: Replacement department name(s) (optional)

        Returns:
            SyncResult: Synchronization outcome (applied=False when omitted)

        Raises:
            EmployeeNotFoundError: Unknown employee id
        """
        try:
            current = await employee_crud.get_by_id(self.db, employee_id)
            if current is None:
                raise EmployeeNotFoundError(employee_id)

            await employee_crud.update_fields(
                self.db,
                employee_id,
                email=email if email is not None else current.email,
                name=name if name is not None else current.name,
                admin=admin if admin is not None else current.admin,
            )
            sync = await self.synchronizer.sync_departments(self.db, employee_id, departments)
            await self.db.commit()
        except EmployeeNotFoundError:
            await self.db.rollback()
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to update employee",
                extra={"error": str(e), "employee_id": employee_id},
            )
            raise

        logger.info(
            "Employee updated",
            extra={"employee_id": employee_id, "departments_replaced": sync.applied},
        )
        return sync

    async def delete_employee(self, employee_id: int) -> None:
        """
        Delete an employee after removing its department links.

        Args:
            employee_id: Employee id

        Raises:
            EmployeeNotFoundError: Unknown employee id
        """
        try:
            if not await employee_crud.exists(self.db, employee_id):
                raise EmployeeNotFoundError(employee_id)

            removed = await employee_department_crud.unlink_all(self.db, employee_id)
            await employee_crud.delete_by_id(self.db, employee_id)
            await self.db.commit()
        except EmployeeNotFoundError:
            await self.db.rollback()
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to delete employee",
                extra={"error": str(e), "employee_id": employee_id},
            )
            raise

        logger.info("Employee deleted", extra={"employee_id": employee_id, "links_removed": removed})

    async def get_employee_name(self, employee_id: int) -> str:
        """
        Get the stored display name of an employee.

        Raises:
            EmployeeNotFoundError: Unknown id or employee without a name
        """
        employee = await employee_crud.get_by_id(self.db, employee_id)
        if employee is None or not employee.name:
            raise EmployeeNotFoundError(employee_id)
        return employee.name

    async def get_employee_email(self, employee_id: int) -> str:
        """
        Get the stored email of an employee.

        Raises:
            EmployeeNotFoundError: Unknown id or employee without an email
        """
        employee = await employee_crud.get_by_id(self.db, employee_id)
        if employee is None or not employee.email:
            raise EmployeeNotFoundError(employee_id)
        return employee.email

    async def is_admin(self, email: str | None) -> bool:
        """
        Check whether the employee with this email is an administrator.

        Args:
            email: Work email

        Returns:
            bool: False for unknown emails

        Raises:
            ClientInputError: Email missing
        """
        if not email:
            raise ClientInputError("Email is required")
        employee = await employee_crud.get_by_email(self.db, email)
        return bool(employee is not None and employee.admin)
