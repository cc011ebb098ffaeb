"""Liveness endpoint."""

from datetime import UTC, datetime

from fastapi import APIRouter
from loguru import logger

from app.schemas.health import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Report that the process is up and serving requests.

    This is a liveness ping only: no dependencies are checked, so the
    status is always "healthy". The time is reported to whole seconds.
    """
    logger.debug("Health check passed")
    return HealthResponse(time=datetime.now(UTC).replace(microsecond=0))
