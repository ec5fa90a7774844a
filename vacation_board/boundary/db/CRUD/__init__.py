"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from vacation_board.boundary.db.CRUD import employee_crud, department_crud

    # Use singleton instances
    employee = await employee_crud.get_by_id(db, employee_id)

    # Or instantiate classes directly for a custom retry policy
    from vacation_board.boundary.db.CRUD import EmployeeCRUD
    custom_crud = EmployeeCRUD(write_policy=WritePolicy(max_attempts=2))
"""

from vacation_board.boundary.db.CRUD.base_crud import BaseCRUD
from vacation_board.boundary.db.CRUD.employee_crud import EmployeeCRUD, employee_crud
from vacation_board.boundary.db.CRUD.department_crud import DepartmentCRUD, department_crud
from vacation_board.boundary.db.CRUD.employee_department_crud import (
    EmployeeDepartmentCRUD,
    employee_department_crud,
)

__all__ = [
    "BaseCRUD",
    "EmployeeCRUD",
    "employee_crud",
    "DepartmentCRUD",
    "department_crud",
    "EmployeeDepartmentCRUD",
    "employee_department_crud",
]
