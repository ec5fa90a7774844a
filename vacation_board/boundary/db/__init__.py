"""
Database boundary layer: ORM models, CRUD operations, write retry and
connection management.

Exports:
  - Base: Model building block
  - StoreAccessor: Process-wide handle to the SQLite store
  - execute_with_retry, WritePolicy, is_transient_store_error: Busy-store retry
  - EmployeeModel, DepartmentModel, EmployeeDepartmentModel: Domain entities
  - employee_crud, department_crud, employee_department_crud: CRUD singletons

Dependencies: sqlalchemy, aiosqlite, tenacity, vacation_board.configs
System role: Database adapter providing persistent storage for employees,
departments and their associations.
"""

from vacation_board.boundary.db.base import Base
from vacation_board.boundary.db.connection import StoreAccessor, session_scope
from vacation_board.boundary.db.retry import (
    WritePolicy,
    execute_with_retry,
    get_write_policy,
    is_transient_store_error,
)
from vacation_board.boundary.db.models import (
    DepartmentModel,
    EmployeeDepartmentModel,
    EmployeeModel,
)
from vacation_board.boundary.db.CRUD import (
    BaseCRUD,
    DepartmentCRUD,
    EmployeeCRUD,
    EmployeeDepartmentCRUD,
    department_crud,
    employee_crud,
    employee_department_crud,
)

__all__ = [
    # Base classes
    "Base",
    # Connection
    "StoreAccessor",
    "session_scope",
    # Retry
    "WritePolicy",
    "execute_with_retry",
    "get_write_policy",
    "is_transient_store_error",
    # Models
    "EmployeeModel",
    "DepartmentModel",
    "EmployeeDepartmentModel",
    # CRUD classes
    "BaseCRUD",
    "EmployeeCRUD",
    "DepartmentCRUD",
    "EmployeeDepartmentCRUD",
    # CRUD singletons
    "employee_crud",
    "department_crud",
    "employee_department_crud",
]
