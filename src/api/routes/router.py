"""Agregador de rotas.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.zapi.router import router as zapi_router


def create_api_router() -> APIRouter:
    """Cria router principal com health e endpoints Z-API na raiz."""
    api_router = APIRouter()

    api_router.include_router(health_router, tags=["health"])
    # Z-API aponta o webhook para /webhook, sem prefixo de canal
    api_router.include_router(zapi_router, tags=["zapi"])

    return api_router
