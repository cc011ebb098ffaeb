"""Greeting endpoint response schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

GREETING_MESSAGE = "Hello from Game Note Backend!"
GREETING_VERSION = "1.0.0"


class GreetingResponse(BaseModel):
    """Response model for the /hello endpoint."""

    model_config = ConfigDict(frozen=True)

    message: str = GREETING_MESSAGE
    timestamp: datetime
    version: str = GREETING_VERSION
