"""
Employees router package.

Exports the router for employee management endpoints.
"""

from .employees_router import router

__all__ = ["router"]
