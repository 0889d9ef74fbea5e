"""Rotas HTTP da API — adapters de entrada.

Estrutura:
- routes/zapi/: webhook inbound e envio manual de teste
- routes/health/: liveness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
