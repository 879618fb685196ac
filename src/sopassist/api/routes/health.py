"""Health check route."""

from __future__ import annotations

from fastapi import APIRouter

from sopassist.core.config import settings
from sopassist.core.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/api/v1/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Simple health check. Does not call the answering backend."""
    return HealthResponse(status="ok", app_name=settings.app_name)
