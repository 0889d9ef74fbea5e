"""Contexto por requisição (correlation_id, método, caminho) em ContextVar.

O middleware HTTP abre um escopo por requisição; os logs emitidos dentro
dele recebem esses campos via `RequestContextFilter`, sem `extra` manual.

Uso:
    with request_scope(request.headers.get("x-correlation-id"),
                       method=request.method, path=request.url.path) as cid:
        ...
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

CORRELATION_ID_HEADER = "x-correlation-id"

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")
_http_method: ContextVar[str] = ContextVar("http_method", default="")
_http_path: ContextVar[str] = ContextVar("http_path", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id corrente ou string vazia."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id; gera UUID v4 quando None/vazio."""
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    return str(uuid.uuid4())


def get_log_context() -> dict[str, str]:
    """Campos da requisição corrente para os logs; vazios são omitidos."""
    context = {"correlation_id": _correlation_id.get()}
    if method := _http_method.get():
        context["http_method"] = method
    if path := _http_path.get():
        context["http_path"] = path
    return context


@contextmanager
def request_scope(
    correlation_id: str | None = None,
    *,
    method: str = "",
    path: str = "",
) -> Iterator[str]:
    """Define o contexto durante o bloco e restaura o anterior ao sair.

    Yields:
        O correlation_id em uso (recebido ou gerado).
    """
    correlation_token = set_correlation_id(correlation_id)
    method_token = _http_method.set(method)
    path_token = _http_path.set(path)
    try:
        yield get_correlation_id()
    finally:
        _http_path.reset(path_token)
        _http_method.reset(method_token)
        reset_correlation_id(correlation_token)
