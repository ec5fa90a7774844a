"""
Dependency injection container.

Factory functions for FastAPI dependencies. Process-wide resources (the
store accessor and the outbound HTTP client) live in a ServiceCache and are
created on first use; request-scoped services are built per request around
a fresh session.

Dependencies: vacation_board.configs, vacation_board.application, vacation_board.boundary
System role: DI container for service injection
"""

from typing import AsyncGenerator

import httpx
from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from vacation_board.application.errors import AuthenticationError
from vacation_board.application.services import (
    AuthService,
    DepartmentService,
    DirectoryService,
    EmployeeService,
)
from vacation_board.boundary.db.connection import StoreAccessor, session_scope
from vacation_board.boundary.graph import GraphClient, IdentityClient
from vacation_board.configs import Settings, get_settings


class ServiceCache:
    """Container for cached process-wide instances."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self._store = None
        self._http_client = None
        self._graph_client = None
        self._identity_client = None

    @property
    def settings(self) -> Settings:
        """Settings the cached instances are built from."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def store(self) -> StoreAccessor:
        """Get cached store accessor."""
        if self._store is None:
            db_config = self.settings.database
            self._store = StoreAccessor(db_config.database_url, echo=db_config.echo_sql)
        return self._store

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Get cached outbound HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self.settings.graph.timeout_seconds)
        return self._http_client

    @property
    def graph_client(self) -> GraphClient:
        """Get cached Graph client."""
        if self._graph_client is None:
            self._graph_client = GraphClient(self.http_client, base_url=self.settings.graph.base_url)
        return self._graph_client

    @property
    def identity_client(self) -> IdentityClient:
        """Get cached identity client."""
        if self._identity_client is None:
            self._identity_client = IdentityClient(self.http_client, self.settings.identity)
        return self._identity_client

    async def close(self) -> None:
        """Release the HTTP client and the store engine."""
        if self._http_client is not None:
            await self._http_client.aclose()
        if self._store is not None:
            await self._store.dispose()
        self.clear()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._store = None
        self._http_client = None
        self._graph_client = None
        self._identity_client = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_store() -> StoreAccessor:
    """Get the process-wide store accessor."""
    return get_service_cache().store


async def get_async_db(
    store: StoreAccessor = Depends(get_store),
) -> AsyncGenerator[AsyncSession, None]:
    """
    Get a request-scoped database session.

    Yields:
        AsyncSession: Session closed (and rolled back if uncommitted) after the response
    """
    async for session in session_scope(store):
        yield session


def get_bearer_token(authorization: str | None = Header(None)) -> str:
    """
    Extract the access token from ``Authorization: Bearer <token>``.

    Raises:
        AuthenticationError: Header absent or carrying no token
    """
    if not authorization:
        raise AuthenticationError()
    parts = authorization.split(" ", 1)
    token = parts[1].strip() if len(parts) == 2 else ""
    if not token:
        raise AuthenticationError()
    return token


def get_employee_service(db: AsyncSession = Depends(get_async_db)) -> EmployeeService:
    """
    Get employee service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        EmployeeService: Employee service instance
    """
    return EmployeeService(db=db)


def get_department_service(db: AsyncSession = Depends(get_async_db)) -> DepartmentService:
    """
    Get department service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        DepartmentService: Department service instance
    """
    return DepartmentService(db=db)


def get_directory_service() -> DirectoryService:
    """
    Get directory service instance.

    Returns:
        DirectoryService: Graph pass-through sharing the cached HTTP client
    """
    cache = get_service_cache()
    return DirectoryService(
        graph=cache.graph_client,
        vacation_subject=cache.settings.graph.vacation_subject,
    )


def get_auth_service() -> AuthService:
    """
    Get authentication service instance.

    Returns:
        AuthService: Token exchange service sharing the cached HTTP client
    """
    cache = get_service_cache()
    return AuthService(identity=cache.identity_client, settings=cache.settings.identity)
