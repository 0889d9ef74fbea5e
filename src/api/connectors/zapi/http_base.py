"""Cliente HTTP base para conectores da camada API.

Uma única tentativa por chamada, com timeout limitado. Não há retry nem
backoff: quem chama decide o que fazer com a falha.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP.

    `transport` permite injetar um `httpx.MockTransport` em testes.
    """

    timeout_seconds: float = 10.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    transport: httpx.AsyncBaseTransport | None = None


class HttpError(Exception):
    """Falha de requisição HTTP (rede, timeout ou status não-2xx)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class HttpClient:
    """Cliente HTTP assíncrono simples para chamadas externas."""

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa POST JSON em uma única tentativa.

        Args:
            url: URL completa do endpoint.
            json: Corpo serializado como JSON.
            headers: Headers extras; sobrescrevem os `default_headers`.

        Returns:
            Resposta 2xx.

        Raises:
            HttpError: Timeout, erro de conexão ou status fora de 2xx.
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                transport=self._config.transport,
            ) as client:
                response = await client.post(
                    url,
                    json=json,
                    headers=merged_headers,
                    timeout=self._config.timeout_seconds,
                )
        except httpx.TimeoutException as exc:
            raise HttpError(f"http_timeout: {exc!r}") from exc
        except httpx.HTTPError as exc:
            raise HttpError(f"http_connection_error: {exc!r}") from exc

        if not response.is_success:
            raise HttpError(
                "http_error_status",
                status_code=response.status_code,
                response_body=_safe_body(response),
            )
        return response


def _safe_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text
