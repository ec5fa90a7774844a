"""
Department schemas.

Dependencies: pydantic
System role: Department and membership API contracts
"""

from pydantic import BaseModel, Field


class CreateDepartmentRequest(BaseModel):
    """Request schema for creating a department."""

    department: str | None = Field(None, description="Department name (required)")


class DepartmentResponse(BaseModel):
    """Department row."""

    id: int
    department: str


class CreateEmployeeDepartmentRequest(BaseModel):
    """Request schema for linking an employee to a department."""

    id_employee: int | None = Field(None, description="Employee id (required)")
    id_department: int | None = Field(None, description="Department id (required)")
