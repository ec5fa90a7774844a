"""
Employee response mapping utilities.

Transforms service results into Pydantic response models.

Dependencies: vacation_board.models.employee
System role: Employee response transformation
"""

from typing import Any

from vacation_board.application.services.department_sync import SyncResult
from vacation_board.models.employee import EmployeeMutationResponse, EmployeeResponse


def map_employee_to_response(employee_data: dict[str, Any]) -> EmployeeResponse:
    """
    Transform employee data dictionary into EmployeeResponse.

    Args:
        employee_data: Dictionary with id, name, email, admin, departments

    Returns:
        EmployeeResponse: Pydantic model for API response
    """
    return EmployeeResponse(**employee_data)


def map_employees_to_response(employees_data: list[dict[str, Any]]) -> list[EmployeeResponse]:
    """Transform list of employee dictionaries into list of EmployeeResponse."""
    return [map_employee_to_response(employee) for employee in employees_data]


def map_mutation_to_response(message: str, sync: SyncResult | None = None) -> EmployeeMutationResponse:
    """
    Build the body of a create/update response.

    ``skipped_departments`` is only set when a department list was applied.
    """
    skipped = list(sync.skipped) if sync is not None and sync.applied else None
    return EmployeeMutationResponse(message=message, skipped_departments=skipped)
