"""Greeting endpoint."""

from datetime import UTC, datetime

from fastapi import APIRouter

from app.schemas.hello import GreetingResponse

router = APIRouter(tags=["hello"])


@router.get("/hello", response_model=GreetingResponse)
async def hello() -> GreetingResponse:
    """Return the fixed greeting stamped with the current server time."""
    return GreetingResponse(timestamp=datetime.now(UTC))
