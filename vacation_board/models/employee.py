"""
Employee domain models and schemas.

Request/response schemas for employee operations. Department membership can
be sent as ``departments`` (list or single name) or, for older clients, as
``department``.

Dependencies: pydantic
System role: Employee API contracts
"""

from pydantic import BaseModel, Field

from vacation_board.models.common import MessageResponse

DepartmentNames = list[str] | str


class CreateEmployeeRequest(BaseModel):
    """Request schema for creating an employee."""

    email: str | None = Field(None, description="Work email (required)")
    name: str | None = Field(None, description="Display name")
    admin: bool | None = Field(False, description="Administrator flag")
    departments: DepartmentNames | None = Field(None, description="Department names to link")
    department: DepartmentNames | None = Field(None, description="Legacy alias of departments")

    @property
    def requested_departments(self) -> DepartmentNames | None:
        """Department names from whichever field the client used."""
        return self.departments if self.departments is not None else self.department


class UpdateEmployeeRequest(BaseModel):
    """
    Request schema for a partial employee update.

    Omitted (or null) fields keep their stored value. Omitting the
    department list leaves memberships untouched; an empty list clears them.
    """

    email: str | None = Field(None, description="Work email")
    name: str | None = Field(None, description="Display name")
    admin: bool | None = Field(None, description="Administrator flag")
    departments: DepartmentNames | None = Field(None, description="Replacement department names")
    department: DepartmentNames | None = Field(None, description="Legacy alias of departments")

    @property
    def requested_departments(self) -> DepartmentNames | None:
        """Department names from whichever field the client used."""
        return self.departments if self.departments is not None else self.department


class EmployeeResponse(BaseModel):
    """Employee with the names of its departments."""

    id: int
    name: str | None
    email: str
    admin: bool
    departments: list[str] = Field(default_factory=list)


class EmployeeMutationResponse(MessageResponse):
    """Mutation body reporting department names that matched nothing."""

    skipped_departments: list[str] | None = Field(
        None,
        description="Requested department names with no matching department",
    )


class IsAdminResponse(BaseModel):
    """Administrator lookup result."""

    isAdmin: bool


class UserNameResponse(BaseModel):
    """Stored display name of an employee."""

    name: str
