"""
Application services.

Use case orchestrators sitting between the API routers and the boundary
adapters (SQLite store, Graph and identity clients).
"""

from vacation_board.application.services.auth_service import AuthService
from vacation_board.application.services.department_service import DepartmentService
from vacation_board.application.services.department_sync import (
    DepartmentSynchronizer,
    SyncResult,
    department_synchronizer,
    normalize_department_names,
)
from vacation_board.application.services.directory_service import DirectoryService
from vacation_board.application.services.employee_service import EmployeeService

__all__ = [
    "AuthService",
    "DepartmentService",
    "DepartmentSynchronizer",
    "DirectoryService",
    "EmployeeService",
    "SyncResult",
    "department_synchronizer",
    "normalize_department_names",
]
