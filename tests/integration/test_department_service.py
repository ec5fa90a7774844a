"""
Test suite for DepartmentService against a real SQLite file.

System role: Verification of department use cases
"""

import pytest
from sqlalchemy.exc import IntegrityError

from vacation_board.application.errors import (
    ClientInputError,
    DepartmentNotFoundError,
    EmployeeNotFoundError,
)
from vacation_board.application.services.department_service import DepartmentService
from vacation_board.application.services.employee_service import EmployeeService


class TestCreateDepartment:
    """Test suite for DepartmentService.create_department()."""

    @pytest.mark.asyncio
    async def test_departments_are_listed_by_name(self, db_session) -> None:
        # Arrange
        service = DepartmentService(db=db_session)

        # Act
        ops_id = await service.create_department("Ops")
        eng_id = await service.create_department("Eng")
        departments = await service.list_departments()

        # Assert
        assert [(d.id, d.department) for d in departments] == [(eng_id, "Eng"), (ops_id, "Ops")]

    @pytest.mark.asyncio
    async def test_missing_name_is_rejected(self, db_session) -> None:
        service = DepartmentService(db=db_session)

        with pytest.raises(ClientInputError, match="Department is required"):
            await service.create_department(None)

    @pytest.mark.asyncio
    async def test_duplicate_name_raises_integrity_error(self, db_session, departments) -> None:
        service = DepartmentService(db=db_session)

        with pytest.raises(IntegrityError):
            await service.create_department("Eng")


class TestLinkEmployeeDepartment:
    """Test suite for DepartmentService.link_employee_department()."""

    @pytest.mark.asyncio
    async def test_link_shows_up_in_listing(self, db_session, departments) -> None:
        # Arrange
        employees = EmployeeService(db=db_session)
        employee_id, _ = await employees.create_employee(email="a@x.com")

        # Act
        await DepartmentService(db=db_session).link_employee_department(
            employee_id, departments["Sales"]
        )

        # Assert
        assert (await employees.list_employees())[0]["departments"] == ["Sales"]

    @pytest.mark.asyncio
    async def test_missing_ids_are_rejected(self, db_session) -> None:
        service = DepartmentService(db=db_session)

        with pytest.raises(ClientInputError, match="id_employee or id_department is required"):
            await service.link_employee_department(1, None)

    @pytest.mark.asyncio
    async def test_unknown_employee_raises(self, db_session, departments) -> None:
        service = DepartmentService(db=db_session)

        with pytest.raises(EmployeeNotFoundError):
            await service.link_employee_department(99, departments["Eng"])

    @pytest.mark.asyncio
    async def test_unknown_department_raises(self, db_session) -> None:
        employee_id, _ = await EmployeeService(db=db_session).create_employee(email="a@x.com")
        service = DepartmentService(db=db_session)

        with pytest.raises(DepartmentNotFoundError):
            await service.link_employee_department(employee_id, 99)
