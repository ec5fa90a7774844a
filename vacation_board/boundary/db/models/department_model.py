"""
Department ORM model.

Dependencies: sqlalchemy, vacation_board.boundary.db.base
System role: Department persistence
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from vacation_board.boundary.db.base import Base


class DepartmentModel(Base):
    """
    Department ORM model.

    Attributes:
        id: Store-assigned integer primary key
        department: Unique department name
    """

    __tablename__ = "Departments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    department: Mapped[str] = mapped_column(
        String,
        nullable=False,
        unique=True,
        doc="Department name",
    )
