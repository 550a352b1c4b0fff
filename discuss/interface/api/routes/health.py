"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from discuss.adapter.realtime import ConnectionRegistry
from discuss.config import Settings
from discuss.util.clock import utc_now

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    environment: str
    realtime_sessions: int


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings], registry: FromDishka[ConnectionRegistry]
) -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status indicating the service is running
    """
    return HealthResponse(
        status="healthy",
        timestamp=utc_now(),
        version="0.1.0",
        environment=settings.environment,
        realtime_sessions=len(await registry.all_sessions()),
    )
