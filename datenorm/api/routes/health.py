"""GET /health — liveness check, plus a sanity count of loaded date shapes."""
from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from datenorm.core.settings import get_settings
from datenorm.normalization.date_formats import DATE_FORMATS

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    environment: str
    accepted_formats: int


@router.get("/health", response_model=HealthResponse, summary="Basic health check")
def health_check() -> HealthResponse:
    settings = get_settings()
    return HealthResponse(
        status="ok",
        service=settings.app_name,
        version=settings.app_version,
        environment=settings.app_env,
        accepted_formats=len(DATE_FORMATS),
    )
