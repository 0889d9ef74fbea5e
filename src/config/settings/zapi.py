"""Settings do gateway Z-API.

As credenciais da instância (ID e token) fazem parte da própria URL da API:
    https://api.z-api.io/instances/{instance_id}/token/{token}/send-text
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

ZAPI_BASE_URL: str = "https://api.z-api.io"
DEFAULT_REQUEST_TIMEOUT_SECONDS: float = 10.0
SEND_TEXT_PATH: str = "send-text"


@dataclass(frozen=True)
class ZApiSettings:
    """Configurações do gateway Z-API.

    Attributes:
        instance_id: Identificador da instância (ZAPI_INSTANCE_ID)
        token: Token de acesso da instância (ZAPI_TOKEN)
        base_url: URL base do gateway
        request_timeout_seconds: Timeout do envio
    """

    instance_id: str = ""
    token: str = ""
    base_url: str = ZAPI_BASE_URL
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS

    @property
    def api_endpoint(self) -> str:
        """URL base da instância (contém o token)."""
        return f"{self.base_url.rstrip('/')}/instances/{self.instance_id}/token/{self.token}"

    @property
    def send_text_endpoint(self) -> str:
        return f"{self.api_endpoint}/{SEND_TEXT_PATH}"

    @property
    def masked_endpoint(self) -> str:
        """Endpoint de envio com o token mascarado, seguro para logs."""
        return (
            f"{self.base_url.rstrip('/')}/instances/{self.instance_id}"
            f"/token/{_mask(self.token)}/{SEND_TEXT_PATH}"
        )

    def validate(self) -> list[str]:
        errors: list[str] = []

        if not self.instance_id:
            errors.append("ZAPI_INSTANCE_ID não configurado")

        if not self.token:
            errors.append("ZAPI_TOKEN não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("ZAPI_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _mask(secret: str) -> str:
    if len(secret) <= 4:
        return "***"
    return f"{secret[:4]}***"


def _parse_timeout(raw: str | None) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_REQUEST_TIMEOUT_SECONDS
    try:
        return float(raw)
    except ValueError:
        return 0.0


def _load_from_env() -> ZApiSettings:
    """Carrega ZApiSettings a partir de variáveis de ambiente."""
    return ZApiSettings(
        instance_id=os.getenv("ZAPI_INSTANCE_ID", "").strip(),
        token=os.getenv("ZAPI_TOKEN", "").strip(),
        base_url=os.getenv("ZAPI_BASE_URL", ZAPI_BASE_URL),
        request_timeout_seconds=_parse_timeout(os.getenv("ZAPI_REQUEST_TIMEOUT_SECONDS")),
    )


@lru_cache(maxsize=1)
def get_zapi_settings() -> ZApiSettings:
    """Retorna instância cacheada de ZApiSettings."""
    return _load_from_env()
