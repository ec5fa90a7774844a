"""
Shared test fixtures and configuration for entire test suite.

Provides: SQLite store fixtures on temporary files, seeded departments,
service mocks and the FastAPI test client factory
Dependencies: pytest, pytest-asyncio, sqlalchemy, fastapi
System role: Test infrastructure and fixture management
"""

import asyncio
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import NullPool


def _database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'employees.db'}"


@pytest.fixture
async def store(tmp_path):
    """
    Create a fresh SQLite store under tmp_path with all tables.

    Yields:
        StoreAccessor: Initialized accessor, disposed after the test
    """
    from vacation_board.boundary.db.connection import StoreAccessor

    accessor = StoreAccessor(_database_url(tmp_path), poolclass=NullPool)
    await accessor.initialize()
    yield accessor
    await accessor.dispose()


@pytest.fixture
async def db_session(store):
    """
    Open one session on the test store.

    Yields:
        AsyncSession: Session rolled back and closed after the test
    """
    async with store.session() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def departments(store) -> dict[str, int]:
    """
    Seed the Eng and Sales departments.

    Returns:
        dict[str, int]: Department name -> id
    """
    from vacation_board.boundary.db.CRUD.department_crud import department_crud

    seeded = {}
    async with store.session() as session:
        for name in ("Eng", "Sales"):
            seeded[name] = await department_crud.create(session, department=name)
        await session.commit()
    return seeded


@pytest.fixture
def sync_store(tmp_path):
    """
    Create an initialized store for TestClient-driven tests.

    NullPool keeps no connection alive between event loops, so the store can
    be prepared here and then used from the client's own loop.
    """
    from vacation_board.boundary.db.connection import StoreAccessor

    accessor = StoreAccessor(_database_url(tmp_path), poolclass=NullPool)
    asyncio.run(accessor.initialize())
    yield accessor
    asyncio.run(accessor.dispose())


@pytest.fixture
def app():
    """Create a fresh application (lifespan not run)."""
    from vacation_board.api.main import create_app

    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def mock_employee_service():
    """
    Create mock EmployeeService for testing.

    Returns:
        AsyncMock: Mocked EmployeeService with async methods
    """
    from vacation_board.application.services.department_sync import SyncResult

    service = AsyncMock()
    service.create_employee = AsyncMock(return_value=(1, SyncResult(applied=True, linked=["Eng"])))
    service.update_employee = AsyncMock(return_value=SyncResult(applied=False))
    service.delete_employee = AsyncMock(return_value=None)
    service.list_employees = AsyncMock(return_value=[])
    service.is_admin = AsyncMock(return_value=False)
    return service


@pytest.fixture
def mock_department_service():
    """
    Create mock DepartmentService for testing.

    Returns:
        AsyncMock: Mocked DepartmentService with async methods
    """
    service = AsyncMock()
    service.create_department = AsyncMock(return_value=1)
    service.list_departments = AsyncMock(return_value=[])
    service.link_employee_department = AsyncMock(return_value=None)
    return service


@pytest.fixture
def mock_directory_service():
    """Create mock DirectoryService for testing."""
    return AsyncMock()


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": "Bearer test-token"}
