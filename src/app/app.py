"""Entrypoint do roteador HappyPaws.

Expõe a aplicação ASGI (FastAPI) que recebe o webhook da Z-API.

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 3000

Uso (desenvolvimento):
    python -m app.app

Variáveis obrigatórias: ZAPI_INSTANCE_ID, ZAPI_TOKEN. Opcional: PORT (3000).
"""

from __future__ import annotations

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.observability import CORRELATION_ID_HEADER, request_scope
from config.settings import get_server_settings
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from fastapi import Response

# Inicializar logging ANTES de qualquer log
initialize_app()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup valida credenciais (falha impede o boot); shutdown só registra."""
    logger.info("app_starting", extra={"service": get_server_settings().service_name})
    validate_runtime_settings()

    yield

    logger.info("app_shutting_down", extra={"service": get_server_settings().service_name})


async def log_requests(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Abre o contexto da requisição e registra cada uma com status e latência."""
    with request_scope(
        request.headers.get(CORRELATION_ID_HEADER),
        method=request.method,
        path=request.url.path,
    ) as correlation_id:
        started_at = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            _log_request(status.HTTP_500_INTERNAL_SERVER_ERROR, started_at)
            raise

        response.headers[CORRELATION_ID_HEADER] = correlation_id
        _log_request(response.status_code, started_at)
        return response


def _log_request(status_code: int, started_at: float) -> None:
    logger.info(
        "http_request",
        extra={
            "status_code": status_code,
            "latency_ms": round((time.perf_counter() - started_at) * 1000, 2),
        },
    )


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """404 em JSON com método e caminho; demais HTTPException seguem o padrão."""
    if exc.status_code != status.HTTP_404_NOT_FOUND:
        return await http_exception_handler(request, exc)

    logger.warning("route_not_found")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": "Rota não encontrada",
            "method": request.method,
            "path": request.url.path,
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Converte exceção não tratada em 500; o servidor continua atendendo.

    Em produção o texto da exceção fica só no log.
    """
    # Roda fora do request_scope (ServerErrorMiddleware é o mais externo)
    logger.error(
        "unhandled_exception",
        exc_info=exc,
        extra={"http_method": request.method, "http_path": request.url.path},
    )
    content = {"error": "Erro interno do servidor"}
    if not get_server_settings().is_production:
        content["message"] = str(exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content,
    )


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI."""
    fastapi_app = FastAPI(
        title="HappyPaws Router",
        description="Roteamento de atendimento WhatsApp por setor via Z-API",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Liberado para dashboards externos
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    fastapi_app.middleware("http")(log_requests)

    fastapi_app.add_exception_handler(StarletteHTTPException, not_found_handler)
    fastapi_app.add_exception_handler(Exception, unhandled_exception_handler)

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": get_server_settings().service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta.

    uvicorn trata SIGINT/SIGTERM com shutdown gracioso e encerra com código 1
    se não conseguir abrir a porta.
    """
    import uvicorn

    try:
        validate_runtime_settings()
    except ConfigurationError as exc:
        logger.critical("app_refused_to_start", extra={"errors": exc.errors})
        sys.exit(1)

    settings = get_server_settings()
    logger.info(
        "server_starting",
        extra={"host": settings.host, "port": settings.port},
    )
    # log_config=None mantém o logging JSON configurado no bootstrap
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
