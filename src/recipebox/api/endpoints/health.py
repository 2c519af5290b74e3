"""Health check endpoints.

Liveness and readiness probes for load balancers and orchestrators.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from recipebox.core.config import Settings, get_settings
from recipebox.database.connection import check_database_health


router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str = Field(..., description="Health status", examples=["healthy"])
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Deployment environment")


class ReadinessResponse(HealthResponse):
    """Readiness check response with dependency status."""

    dependencies: dict[str, str] = Field(default_factory=dict)


@router.get("/health", response_model=HealthResponse, summary="Liveness probe")
async def health_check(
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Report that the process is serving requests. Dependencies are not checked."""
    return HealthResponse(
        status="healthy",
        version=settings.app.version,
        environment=settings.APP_ENV,
    )


@router.get("/ready", response_model=ReadinessResponse, summary="Readiness probe")
async def readiness_check(
    settings: Annotated[Settings, Depends(get_settings)],
) -> ReadinessResponse:
    """Report whether the database is reachable."""
    dependencies = await check_database_health()
    ready = all(value == "healthy" for value in dependencies.values())

    return ReadinessResponse(
        status="ready" if ready else "degraded",
        version=settings.app.version,
        environment=settings.APP_ENV,
        dependencies=dependencies,
    )
