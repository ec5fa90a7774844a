"""
Health check API endpoints.

Routes: GET /health, GET /health/db

Dependencies: vacation_board.boundary.db
System role: Health check HTTP API
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from vacation_board.api.deps import get_store
from vacation_board.boundary.db.connection import StoreAccessor

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/db", response_model=HealthResponse)
async def health_check_db(store: StoreAccessor = Depends(get_store)):
    """Database health check."""
    try:
        await store.ping()
    except Exception as e:
        logger.error("Database health check failed", extra={"error": str(e)})
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "message": "Database connection failed"},
        )
    return HealthResponse(status="healthy", message="Database connection OK")
