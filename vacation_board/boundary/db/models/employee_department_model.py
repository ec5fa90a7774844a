"""
Employee/department association ORM model.

Dependencies: sqlalchemy, vacation_board.boundary.db.base
System role: Join table between employees and departments
"""

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from vacation_board.boundary.db.base import Base


class EmployeeDepartmentModel(Base):
    """
    Association row linking one employee to one department.

    No independent identity; the (employee, department) pair is the key.
    """

    __tablename__ = "EmployeesDepartments"

    id_employee: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("Employees.id"),
        primary_key=True,
    )
    id_department: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("Departments.id"),
        primary_key=True,
    )
