"""Pydantic v2 schemas shared across API endpoints."""

from __future__ import annotations

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response body."""

    code: str
    message: str
    detail: dict[str, object] | None = None


class HealthResponse(BaseModel):
    status: str
    app_name: str
