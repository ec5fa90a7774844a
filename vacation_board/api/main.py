"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.
Routes are mounted at the root so existing browser clients keep working.

Dependencies: fastapi, vacation_board.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vacation_board.api.deps.dependencies import get_service_cache
from vacation_board.api.errors import register_exception_handlers
from vacation_board.configs import get_settings
from vacation_board.observability.logger import configure_logging
from vacation_board.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)
from .routers import (
    admin_router,
    auth_router,
    departments_router,
    employees_router,
    health_router,
    users_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Startup configures logging and creates missing tables; shutdown closes
    the outbound HTTP client and disposes the store engine.
    """
    # Startup
    configure_logging(get_settings().log_level)
    cache = get_service_cache()
    await cache.store.initialize()
    logger.info("Application startup complete")

    yield

    # Shutdown
    await cache.close()
    logger.info("Service cache closed")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()

    app = FastAPI(
        title="Vacation Board API",
        description="Employee/department directory with Microsoft Graph vacation lookups",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(admin_router)
    app.include_router(employees_router)
    app.include_router(departments_router)

    return app


app = create_app()


if __name__ == "__main__":
    server_config = get_settings().server
    uvicorn.run(
        "vacation_board.api.main:app",
        host=server_config.host,
        port=server_config.port,
    )
