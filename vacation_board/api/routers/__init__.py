"""API routers."""

from .admin import router as admin_router
from .auth import router as auth_router
from .departments import router as departments_router
from .employees import router as employees_router  # employees/ package
from .health import router as health_router
from .users import router as users_router

__all__ = [
    "admin_router",
    "auth_router",
    "departments_router",
    "employees_router",
    "health_router",
    "users_router",
]
