"""Health check routes."""

from datetime import datetime
from typing import Literal

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from foro.config import Settings
from foro.domain.error import PersistenceError
from foro.domain.repository import PostRepository
from foro.domain.value import utcnow

router = APIRouter(prefix="/health", tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Liveness report."""

    status: Literal["healthy"] = "healthy"
    timestamp: datetime
    environment: str
    git_sha: str


class ReadinessResponse(BaseModel):
    """Readiness report: the post store answered."""

    status: Literal["ready"] = "ready"
    active_posts: int


@router.get("", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is up."""
    return HealthResponse(
        timestamp=utcnow(),
        environment=settings.environment,
        git_sha=settings.git_sha,
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    post_repository: FromDishka[PostRepository],
) -> ReadinessResponse:
    """Report whether the post store can be queried.

    Returns 503 while the store is unreachable.
    """
    try:
        active_posts = await post_repository.count()
    except PersistenceError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"message": "Post store is unavailable"},
        ) from e
    return ReadinessResponse(active_posts=active_posts)
