"""
Employee/department synchronizer.

Replaces the full set of departments an employee belongs to. The caller
owns the transaction: the delete and every insert run inside it, so
committing once (or rolling back on failure) makes the replacement atomic.

Dependencies: sqlalchemy, vacation_board.boundary.db.CRUD
System role: Association set replacement
"""

import logging
from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncSession

from vacation_board.application.errors import EmployeeNotFoundError
from vacation_board.boundary.db.CRUD.department_crud import DepartmentCRUD, department_crud
from vacation_board.boundary.db.CRUD.employee_crud import EmployeeCRUD, employee_crud
from vacation_board.boundary.db.CRUD.employee_department_crud import (
    EmployeeDepartmentCRUD,
    employee_department_crud,
)

logger = logging.getLogger(__name__)


@dataclass
class SyncResult:
    """
    Outcome of one synchronization call.

    Attributes:
        applied: False when no department list was supplied and nothing changed
        linked: Department names now linked, in request order
        skipped: Requested names that matched no department
    """

    applied: bool = False
    linked: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def normalize_department_names(requested: list[str] | str | None) -> list[str] | None:
    """
    Normalize a single name or a list of names to a list.

    Args:
        requested: Department name, list of names, or None when absent

    Returns:
        list[str] | None: None stays None (field absent); [] stays [] (clear)
    """
    if requested is None:
        return None
    if isinstance(requested, str):
        return [requested]
    return list(requested)


class DepartmentSynchronizer:
    """Replace-all synchronization of employee department links."""

    def __init__(
        self,
        employees: EmployeeCRUD = employee_crud,
        departments: DepartmentCRUD = department_crud,
        links: EmployeeDepartmentCRUD = employee_department_crud,
    ) -> None:
        """
        Args:
            employees: Employee CRUD used for the existence check
            departments: Department CRUD used to resolve names
            links: Association CRUD used for deletes and inserts
        """
        self._employees = employees
        self._departments = departments
        self._links = links

    async def sync_departments(
        self,
        session: AsyncSession,
        employee_id: int,
        requested: list[str] | str | None = None,
    ) -> SyncResult:
        """
        Make the employee's departments exactly the requested ones.

        Names are matched exactly; unknown names are skipped and reported,
        never raised. Repeated names are linked once.

        Args:
            session: Async session holding the caller's transaction
            employee_id: Employee whose links are replaced
            requested: Department name(s); None leaves links untouched

        Returns:
            SyncResult: What was linked and what was skipped

        Raises:
            EmployeeNotFoundError: Employee does not exist (checked before any write)
        """
        if not await self._employees.exists(session, employee_id):
            raise EmployeeNotFoundError(employee_id)

        names = normalize_department_names(requested)
        if names is None:
            return SyncResult(applied=False)

        result = SyncResult(applied=True)
        await self._links.unlink_all(session, employee_id)

        linked_ids: set[int] = set()
        for name in names:
            department_id = await self._departments.get_id_by_name(session, name)
            if department_id is None:
                result.skipped.append(name)
                continue
            if department_id in linked_ids:
                continue
            await self._links.link(session, employee_id, department_id)
            linked_ids.add(department_id)
            result.linked.append(name)

        if result.skipped:
            logger.info(
                "Skipped unknown departments",
                extra={"employee_id": employee_id, "skipped": result.skipped},
            )
        return result


department_synchronizer = DepartmentSynchronizer()
