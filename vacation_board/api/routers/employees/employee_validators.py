"""
Employee validation utilities.

Business rules not covered by the Pydantic models. Department names are not
checked here: names matching no department are skipped during
synchronization and reported back to the client.

Dependencies: vacation_board.models.employee
System role: Employee request validation
"""

from vacation_board.application.errors import ClientInputError
from vacation_board.models.employee import CreateEmployeeRequest, UpdateEmployeeRequest


def validate_employee_creation(request: CreateEmployeeRequest) -> None:
    """
    Validate employee creation request.

    Raises:
        ClientInputError: Email missing or blank
    """
    if not request.email or not request.email.strip():
        raise ClientInputError("Email is required")


def validate_employee_update(request: UpdateEmployeeRequest) -> None:
    """
    Validate employee update request.

    Raises:
        ClientInputError: Email present but blank
    """
    if request.email is not None and not request.email.strip():
        raise ClientInputError("Email cannot be empty")
