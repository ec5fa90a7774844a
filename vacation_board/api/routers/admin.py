"""
Administrator lookup endpoint.

Routes: GET /api/isAdmin?email=

Dependencies: vacation_board.application.services
System role: Authorization lookup HTTP API
"""

from fastapi import APIRouter, Depends

from vacation_board.api.deps import get_employee_service
from vacation_board.api.errors import handle_route_errors
from vacation_board.application.services import EmployeeService
from vacation_board.models.employee import IsAdminResponse

router = APIRouter(prefix="/api", tags=["admin"])


@router.get("/isAdmin", response_model=IsAdminResponse)
@handle_route_errors("Error checking admin")
async def is_admin(
    email: str | None = None,
    employee_service: EmployeeService = Depends(get_employee_service),
) -> IsAdminResponse:
    """Report whether the employee with ``email`` is an administrator."""
    return IsAdminResponse(isAdmin=await employee_service.is_admin(email))
