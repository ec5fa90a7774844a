"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    ServiceCache,
    get_async_db,
    get_auth_service,
    get_bearer_token,
    get_department_service,
    get_directory_service,
    get_employee_service,
    get_service_cache,
    get_store,
)

__all__ = [
    "ServiceCache",
    "get_async_db",
    "get_auth_service",
    "get_bearer_token",
    "get_department_service",
    "get_directory_service",
    "get_employee_service",
    "get_service_cache",
    "get_store",
]
