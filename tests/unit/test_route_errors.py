"""
Test suite for handle_route_errors translation rules.

System role: Verification of route-level error mapping
"""

import sqlite3

import pytest
from sqlalchemy.exc import IntegrityError

from vacation_board.api.errors import (
    ClientInputError,
    EmployeeNotFoundError,
    UnexpectedError,
    UpstreamError,
    handle_route_errors,
)
from vacation_board.boundary.graph import RemoteAPIError


def _route_raising(exc: Exception):
    @handle_route_errors("Error adding employee")
    async def route():
        raise exc

    return route


class TestHandleRouteErrors:
    """Test suite for the per-route error decorator."""

    @pytest.mark.asyncio
    async def test_result_passes_through(self) -> None:
        @handle_route_errors("Error getting employees")
        async def route(value: int) -> int:
            return value * 2

        assert await route(21) == 42

    @pytest.mark.asyncio
    async def test_api_errors_are_not_wrapped(self) -> None:
        with pytest.raises(EmployeeNotFoundError, match="Employee not found"):
            await _route_raising(EmployeeNotFoundError(5))()

    @pytest.mark.asyncio
    async def test_remote_error_becomes_upstream_error(self) -> None:
        # Act
        with pytest.raises(UpstreamError) as exc_info:
            await _route_raising(RemoteAPIError(403, {"error": "Forbidden"}))()

        # Assert
        assert exc_info.value.status_code == 403
        assert exc_info.value.content() == {"error": "Forbidden"}

    @pytest.mark.asyncio
    async def test_integrity_error_becomes_client_error(self) -> None:
        duplicate = IntegrityError("stmt", {}, sqlite3.IntegrityError("UNIQUE constraint failed"))

        with pytest.raises(ClientInputError) as exc_info:
            await _route_raising(duplicate)()
        assert exc_info.value.status_code == 400
        assert exc_info.value.message.startswith("Error adding employee")

    @pytest.mark.asyncio
    async def test_unexpected_error_gets_route_message(self) -> None:
        with pytest.raises(UnexpectedError) as exc_info:
            await _route_raising(RuntimeError("boom"))()
        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Error adding employee"

    def test_upstream_error_without_body_renders_message(self) -> None:
        error = UpstreamError(404, message="Failed to fetch photo")
        assert error.content() == {"error": "Failed to fetch photo"}
