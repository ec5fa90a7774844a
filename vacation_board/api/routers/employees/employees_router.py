"""
Employee API endpoints.

Routes:
- POST /employees - Create employee and link departments
- GET /employees - List employees with their department names
- PUT /employees/{id} - Partially update employee
- DELETE /employees/{id} - Delete employee and its department links

Dependencies: vacation_board.application.services, vacation_board.models
System role: Employee management HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from vacation_board.api.deps import get_employee_service
from vacation_board.api.errors import handle_route_errors
from vacation_board.application.services import EmployeeService
from vacation_board.models.common import MessageResponse
from vacation_board.models.employee import (
    CreateEmployeeRequest,
    EmployeeMutationResponse,
    EmployeeResponse,
    UpdateEmployeeRequest,
)

from .employee_responses import map_employees_to_response, map_mutation_to_response
from .employee_validators import validate_employee_creation, validate_employee_update

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


@router.post("", response_model=EmployeeMutationResponse, status_code=201)
@handle_route_errors("Error adding employee")
async def create_employee(
    request: CreateEmployeeRequest,
    employee_service: EmployeeService = Depends(get_employee_service),
) -> EmployeeMutationResponse:
    """
    Create an employee and link the requested departments.

    Args:
        request: CreateEmployeeRequest with email, name, admin, departments
        employee_service: Injected EmployeeService

    Returns:
        EmployeeMutationResponse: "Employee added" plus skipped department names

    Raises:
        ClientInputError(400): Email missing or already used
        UnexpectedError(500): Creation failed
    """
    # Business validation
    validate_employee_creation(request)

    logger.info(
        "Creating employee",
        extra={"email": request.email, "has_departments": request.requested_departments is not None},
    )

    employee_id, sync = await employee_service.create_employee(
        email=request.email,
        name=request.name,
        admin=request.admin,
        departments=request.requested_departments,
    )

    logger.info("Employee created successfully", extra={"employee_id": employee_id})

    return map_mutation_to_response("Employee added", sync)


@router.get("", response_model=list[EmployeeResponse])
@handle_route_errors("Error getting employees")
async def list_employees(
    employee_service: EmployeeService = Depends(get_employee_service),
) -> list[EmployeeResponse]:
    """
    List every employee with its department names.

    Raises:
        UnexpectedError(500): Retrieval failed
    """
    employees = await employee_service.list_employees()

    logger.info("Employees retrieved successfully", extra={"count": len(employees)})

    return map_employees_to_response(employees)


@router.put("/{employee_id}", response_model=EmployeeMutationResponse)
@handle_route_errors("Error updating employee")
async def update_employee(
    employee_id: int,
    request: UpdateEmployeeRequest,
    employee_service: EmployeeService = Depends(get_employee_service),
) -> EmployeeMutationResponse:
    """
    Partially update an employee.

    Omitted fields keep their stored values. Omitting the department list
    leaves memberships untouched; an empty list removes them all.

    Args:
        employee_id: Employee id
        request: UpdateEmployeeRequest with optional fields
        employee_service: Injected EmployeeService

    Returns:
        EmployeeMutationResponse: "Employee updated" plus skipped department names

    Raises:
        EmployeeNotFoundError(404): Unknown employee
        ClientInputError(400): Invalid input or email already used
        UnexpectedError(500): Update failed
    """
    # Business validation
    validate_employee_update(request)

    logger.info(
        "Updating employee",
        extra={
            "employee_id": employee_id,
            "updating_email": request.email is not None,
            "updating_departments": request.requested_departments is not None,
        },
    )

    sync = await employee_service.update_employee(
        employee_id=employee_id,
        email=request.email,
        name=request.name,
        admin=request.admin,
        departments=request.requested_departments,
    )

    logger.info("Employee updated successfully", extra={"employee_id": employee_id})

    return map_mutation_to_response("Employee updated", sync)


@router.delete("/{employee_id}", response_model=MessageResponse)
@handle_route_errors("Error deleting employee")
async def delete_employee(
    employee_id: int,
    employee_service: EmployeeService = Depends(get_employee_service),
) -> MessageResponse:
    """
    Delete an employee; its department links are removed first.

    Raises:
        EmployeeNotFoundError(404): Unknown employee
        UnexpectedError(500): Deletion failed
    """
    logger.info("Deleting employee", extra={"employee_id": employee_id})

    await employee_service.delete_employee(employee_id)

    logger.info("Employee deleted successfully", extra={"employee_id": employee_id})

    return MessageResponse(message="Employee deleted")
