"""Configuração centralizada de logging.

Chamada uma única vez pelo bootstrap (`app.bootstrap.initialize_app`).
Todos os módulos usam `get_logger(__name__)` e registram eventos em
snake_case com contexto em `extra`.

Formato de saída (uma linha JSON por evento):
    {"level": "INFO", "logger": "api.connectors.zapi.http_client",
     "message": "zapi_send_succeeded", "correlation_id": "abc-123",
     "service": "happypaws_router", "http_method": "POST",
     "http_path": "/webhook", "timestamp": "2026-10-19T13:30:00.123456+00:00"}

`http_method` e `http_path` só aparecem em logs emitidos durante uma
requisição.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pythonjsonlogger.json import JsonFormatter

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "happypaws_router"

LOG_FIELDS: tuple[str, ...] = (
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

REQUEST_CONTEXT_FIELDS: tuple[str, ...] = ("http_method", "http_path")


class RequestContextFilter(logging.Filter):
    """Copia o contexto da requisição corrente para o record.

    Sempre define `correlation_id` e `service`; `http_method` e `http_path`
    só quando há requisição em andamento. Valores passados via `extra`
    têm precedência sobre o contexto.

    Args:
        service_name: Nome do serviço em todo record.
        context_getter: Devolve o contexto corrente, com chaves
            `correlation_id`, `http_method` e `http_path`.
    """

    def __init__(
        self,
        service_name: str,
        context_getter: Callable[[], Mapping[str, str]] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_context = context_getter or dict

    def filter(self, record: logging.LogRecord) -> bool:
        context = self._get_context()

        record.correlation_id = getattr(record, "correlation_id", None) or context.get(
            "correlation_id", ""
        )
        for field in REQUEST_CONTEXT_FIELDS:
            value = context.get(field)
            if value and not getattr(record, field, None):
                setattr(record, field, value)

        record.service = self._service_name
        return True


def create_json_formatter() -> JsonFormatter:
    """Formatter JSON com timestamp ISO-8601 em UTC e acentos preservados."""
    return JsonFormatter(
        " ".join(f"%({field})s" for field in LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
        timestamp=True,
        json_ensure_ascii=False,
    )


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    context_getter: Callable[[], Mapping[str, str]] | None = None,
) -> logging.Handler:
    """Instala um único handler JSON no logger raiz.

    Args:
        level: Nível de log (case insensitive).
        service_name: Nome do serviço injetado em cada record.
        context_getter: Função que devolve o contexto da requisição corrente.

    Returns:
        O handler instalado.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(RequestContextFilter(service_name, context_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substitui handlers existentes (inclusive os do uvicorn no reload)
    root.handlers = [handler]

    # uvicorn instala handlers próprios; propaga para o raiz em JSON
    for name in ("uvicorn", "uvicorn.error"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers = []
        uvicorn_logger.propagate = True
    # O middleware de request já registra cada acesso
    logging.getLogger("uvicorn.access").disabled = True

    return handler


def get_logger(name: str) -> logging.Logger:
    """Retorna logger do módulo; service e contexto vêm do filter."""
    return logging.getLogger(name)
