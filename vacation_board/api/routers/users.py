"""
Directory and calendar API endpoints.

Every route requires ``Authorization: Bearer <token>``; the token is
forwarded to Microsoft Graph untouched.

Routes:
- GET /user/profile - Signed-in user's profile
- GET /user/profile_pic - Signed-in user's photo
- GET /user/{userId} - Stored display name of an employee
- GET /user/{userId}/photo - Photo of a directory user
- GET /user/{userId}/events - Vacation events of an employee

Dependencies: vacation_board.application.services, vacation_board.boundary.graph
System role: Directory/calendar proxy HTTP API
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Response

from vacation_board.api.deps import (
    get_bearer_token,
    get_directory_service,
    get_employee_service,
)
from vacation_board.api.errors import NotFoundError, UpstreamError, handle_route_errors
from vacation_board.application.services import DirectoryService, EmployeeService
from vacation_board.boundary.graph import RemoteAPIError
from vacation_board.models.employee import UserNameResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/user", tags=["users"])


@router.get("/profile")
@handle_route_errors("Error getting user profile")
async def get_profile(
    token: str = Depends(get_bearer_token),
    directory: DirectoryService = Depends(get_directory_service),
) -> Any:
    """Relay the signed-in user's Graph profile."""
    return await directory.get_profile(token)


@router.get("/profile_pic")
@handle_route_errors("Error getting user profile")
async def get_profile_pic(
    token: str = Depends(get_bearer_token),
    directory: DirectoryService = Depends(get_directory_service),
) -> Response:
    """
    Relay the signed-in user's photo bytes.

    Raises:
        UpstreamError: Remote status with {"error": "Failed to fetch photo"}
    """
    try:
        photo = await directory.get_profile_photo(token)
    except RemoteAPIError as e:
        raise UpstreamError(e.status_code, message="Failed to fetch photo") from e
    return Response(content=photo.content, media_type=photo.content_type)


@router.get("/{userId}", response_model=UserNameResponse)
@handle_route_errors("Error getting user")
async def get_user_name(
    userId: int,
    token: str = Depends(get_bearer_token),
    employee_service: EmployeeService = Depends(get_employee_service),
) -> UserNameResponse:
    """
    Get the stored display name of an employee.

    Raises:
        EmployeeNotFoundError(404): Unknown id or no stored name
    """
    name = await employee_service.get_employee_name(userId)
    return UserNameResponse(name=name)


@router.get("/{userId}/photo")
@handle_route_errors("Error getting user photo")
async def get_user_photo(
    userId: str,
    token: str = Depends(get_bearer_token),
    directory: DirectoryService = Depends(get_directory_service),
) -> Response:
    """
    Relay a directory user's photo bytes.

    Args:
        userId: Graph user id or user principal name

    Raises:
        NotFoundError(404): Remote lookup failed for any reason
    """
    try:
        photo = await directory.get_user_photo(token, userId)
    except RemoteAPIError as e:
        logger.info(
            "No profile picture",
            extra={"user_id": userId, "status_code": e.status_code},
        )
        raise NotFoundError("No profile picture found") from e
    return Response(content=photo.content, media_type=photo.content_type)


@router.get("/{userId}/events")
@handle_route_errors("Error getting user events")
async def get_user_events(
    userId: int,
    token: str = Depends(get_bearer_token),
    employee_service: EmployeeService = Depends(get_employee_service),
    directory: DirectoryService = Depends(get_directory_service),
) -> Any:
    """
    Relay the vacation events of an employee's calendar.

    The employee id is resolved to its stored email, which addresses the
    calendar remotely.

    Raises:
        EmployeeNotFoundError(404): Unknown id or no stored email
        UpstreamError: Remote status and body relayed
    """
    email = await employee_service.get_employee_email(userId)
    events = await directory.get_vacation_events(token, email)

    logger.info("Vacation events retrieved", extra={"employee_id": userId})
    return events
