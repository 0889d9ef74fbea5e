"""Endpoint de liveness."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter
from pydantic import BaseModel

from config.settings import get_server_settings

SERVICE_VERSION = "1.0.0"

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = SERVICE_VERSION


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — o processo está aceitando requisições."""
    return HealthResponse(
        status="healthy",
        service=get_server_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )
