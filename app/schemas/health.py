"""Health check response schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict


class HealthResponse(BaseModel):
    """Response model for the /health endpoint."""

    model_config = ConfigDict(frozen=True)

    status: Literal["healthy"] = "healthy"
    time: datetime
