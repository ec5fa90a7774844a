"""
Error taxonomy shared by services and routers.

Each class carries the HTTP status the API layer renders it with.

Dependencies: fastapi (status constants)
System role: Domain error types
"""

from typing import Any

from fastapi import status


class ApiError(Exception):
    """Base class for errors rendered as a JSON error object."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ClientInputError(ApiError):
    """Missing or malformed request input."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(ApiError):
    """Bearer token absent."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "No token provided") -> None:
        super().__init__(message)


class NotFoundError(ApiError):
    """Referenced row does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class EmployeeNotFoundError(NotFoundError):
    """Raised when an employee id matches no row."""

    def __init__(self, employee_id: int | str, message: str = "Employee not found") -> None:
        self.employee_id = employee_id
        super().__init__(message)


class DepartmentNotFoundError(NotFoundError):
    """Raised when a department id matches no row."""

    def __init__(self, department_id: int | str, message: str = "Department not found") -> None:
        self.department_id = department_id
        super().__init__(message)


class UnexpectedError(ApiError):
    """Anything not covered above; message is the route's generic text."""


class UpstreamError(ApiError):
    """Non-success answer from a remote API, relayed to the client."""

    def __init__(self, status_code: int, body: Any = None, message: str = "Upstream request failed") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    def content(self) -> Any:
        """Remote body when there was one, else a JSON error object."""
        return self.body if self.body is not None else {"error": self.message}
