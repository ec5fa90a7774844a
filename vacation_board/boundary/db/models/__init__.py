"""
Database models package.

Exports:
  - EmployeeModel: Employee ORM model
  - DepartmentModel: Department ORM model
  - EmployeeDepartmentModel: Association table model

Dependencies: sqlalchemy, vacation_board.boundary.db.base
System role: Database model definitions for domain entities
"""

from vacation_board.boundary.db.models.employee_model import EmployeeModel
from vacation_board.boundary.db.models.department_model import DepartmentModel
from vacation_board.boundary.db.models.employee_department_model import EmployeeDepartmentModel

__all__ = [
    "EmployeeModel",
    "DepartmentModel",
    "EmployeeDepartmentModel",
]
