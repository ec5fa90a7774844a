"""
API error taxonomy and handlers.

Every failure a client can see is rendered as ``{"error": "<message>"}``
with one of 400/401/404/500, except upstream failures whose remote status
and body are relayed as-is.

Provides:
- Re-exports of the error taxonomy from vacation_board.application.errors
- handle_route_errors decorator that logs and wraps unexpected failures
  with a per-route message
- register_exception_handlers to install the JSON renderers on the app

Dependencies: fastapi, sqlalchemy
System role: Uniform error responses
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from vacation_board.application.errors import (
    ApiError,
    AuthenticationError,
    ClientInputError,
    DepartmentNotFoundError,
    EmployeeNotFoundError,
    NotFoundError,
    UnexpectedError,
    UpstreamError,
)
from vacation_board.boundary.graph.errors import RemoteAPIError

__all__ = [
    "ApiError",
    "AuthenticationError",
    "ClientInputError",
    "DepartmentNotFoundError",
    "EmployeeNotFoundError",
    "NotFoundError",
    "UnexpectedError",
    "UpstreamError",
    "handle_route_errors",
    "register_exception_handlers",
]

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_route_errors(failure_message: str) -> Callable[[F], F]:
    """
    Decorator factory translating failures of an async route.

    ApiErrors pass through untouched. Upstream failures become UpstreamError.
    Integrity violations (duplicate email or department name) become 400.
    Everything else is logged with its traceback and replaced by an
    UnexpectedError carrying ``failure_message``.

    Args:
        failure_message: Generic text returned with a 500

    Returns:
        Decorator preserving the route signature for FastAPI
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)

            except ApiError as e:
                if e.status_code >= 500:
                    logger.error(failure_message, extra={"error": e.message})
                else:
                    logger.warning(failure_message, extra={"error": e.message, "status_code": e.status_code})
                raise

            except RemoteAPIError as e:
                logger.warning(
                    "Upstream request failed",
                    extra={"status_code": e.status_code, "route_error": failure_message},
                )
                raise UpstreamError(e.status_code, e.body, failure_message) from e

            except IntegrityError as e:
                logger.warning("Constraint violation", extra={"error": str(e.orig)})
                raise ClientInputError(f"{failure_message}: duplicate or invalid reference") from e

            except Exception as e:
                logger.exception(failure_message, extra={"error": str(e)})
                raise UnexpectedError(failure_message) from e

        return wrapper  # type: ignore

    return decorator


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if isinstance(exc, UpstreamError):
        return JSONResponse(status_code=exc.status_code, content=exc.content())
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    detail = first.get("msg", "Invalid request")
    message = f"{location}: {detail}" if location else detail
    logger.warning("Request validation failed", extra={"error": message, "path": request.url.path})
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", extra={"path": request.url.path})
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Install JSON error renderers on the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
