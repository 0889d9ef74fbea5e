"""Observabilidade: contexto da requisição propagado para os logs.

Uso:
    from app.observability import get_log_context, request_scope
"""

from app.observability.correlation import (
    CORRELATION_ID_HEADER,
    generate_correlation_id,
    get_correlation_id,
    get_log_context,
    request_scope,
    reset_correlation_id,
    set_correlation_id,
)

__all__ = [
    "CORRELATION_ID_HEADER",
    "generate_correlation_id",
    "get_correlation_id",
    "get_log_context",
    "request_scope",
    "reset_correlation_id",
    "set_correlation_id",
]
