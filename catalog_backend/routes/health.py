"""
Health check route.

This endpoint is PUBLIC and does not touch the database. It reports that the
process is up, which implies the Supabase client was configured successfully.
"""

from fastapi import APIRouter

from catalog_backend.schemas.health import HealthResponse
from catalog_backend.utils.logging import get_logger

logger = get_logger(__name__)

# Mounted at root level in main.py
router = APIRouter(tags=["system"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    status_code=200,
)
async def health_check() -> HealthResponse:
    """Public health check endpoint."""
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok")
