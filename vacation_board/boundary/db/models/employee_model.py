"""
Employee ORM model.

Represents a person listed on the vacation board. The email address is the
key used to look the person up in Microsoft Graph.

Dependencies: sqlalchemy, vacation_board.boundary.db.base
System role: Employee persistence
"""

from sqlalchemy import Boolean, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from vacation_board.boundary.db.base import Base


class EmployeeModel(Base):
    """
    Employee ORM model.

    Attributes:
        id: Store-assigned integer primary key
        email: Work email, unique per employee
        name: Optional display name
        admin: Administrator flag (stored as 0/1)
    """

    __tablename__ = "Employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    email: Mapped[str] = mapped_column(
        String,
        nullable=False,
        unique=True,
        doc="Work email address",
    )

    name: Mapped[str | None] = mapped_column(
        String,
        nullable=True,
        default=None,
        doc="Display name",
    )

    admin: Mapped[bool] = mapped_column(
        Boolean(create_constraint=False),
        nullable=False,
        default=False,
        server_default=text("0"),
        doc="Administrator flag",
    )
