"""
Department and membership API endpoints.

Routes:
- POST /departments - Create department
- GET /departments - List departments
- POST /employees_departments - Link one employee to one department

Dependencies: vacation_board.application.services, vacation_board.models
System role: Department management HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from vacation_board.api.deps import get_department_service
from vacation_board.api.errors import handle_route_errors
from vacation_board.application.services import DepartmentService
from vacation_board.models.common import MessageResponse
from vacation_board.models.department import (
    CreateDepartmentRequest,
    CreateEmployeeDepartmentRequest,
    DepartmentResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["departments"])


@router.get("/departments", response_model=list[DepartmentResponse])
@handle_route_errors("Error getting departments")
async def list_departments(
    department_service: DepartmentService = Depends(get_department_service),
) -> list[DepartmentResponse]:
    """List departments ordered by name."""
    departments = await department_service.list_departments()
    return [DepartmentResponse(id=d.id, department=d.department) for d in departments]


@router.post("/departments", response_model=MessageResponse, status_code=201)
@handle_route_errors("Error adding department")
async def create_department(
    request: CreateDepartmentRequest,
    department_service: DepartmentService = Depends(get_department_service),
) -> MessageResponse:
    """
    Create a department.

    Raises:
        ClientInputError(400): Name missing or already used
        UnexpectedError(500): Creation failed
    """
    department_id = await department_service.create_department(request.department)

    logger.info(
        "Department created successfully",
        extra={"department_id": department_id, "department": request.department},
    )
    return MessageResponse(message="Department added")


@router.post("/employees_departments", response_model=MessageResponse, status_code=201)
@handle_route_errors("Error adding employees_departments")
async def create_employee_department(
    request: CreateEmployeeDepartmentRequest,
    department_service: DepartmentService = Depends(get_department_service),
) -> MessageResponse:
    """
    Link one employee to one department.

    Raises:
        ClientInputError(400): Either id missing, or pair already linked
        NotFoundError(404): Unknown employee or department
        UnexpectedError(500): Insert failed
    """
    await department_service.link_employee_department(request.id_employee, request.id_department)
    return MessageResponse(message="employees_departments added")
