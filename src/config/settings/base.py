"""Settings do servidor HTTP (porta, ambiente, logging)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

from config.logging.config import VALID_LOG_LEVELS

Environment = Literal["development", "staging", "production"]

DEFAULT_PORT = 3000
DEFAULT_MAX_BODY_BYTES = 10 * 1024 * 1024  # 10MB


@dataclass(frozen=True)
class ServerSettings:
    """Configurações do processo HTTP.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço nos logs
        host: Interface de escuta
        port: Porta de escuta
        log_level: Nível do logger raiz
        max_body_bytes: Tamanho máximo aceito no corpo do webhook
    """

    environment: Environment = "development"
    service_name: str = "happypaws_router"
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    max_body_bytes: int = DEFAULT_MAX_BODY_BYTES

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Retorna lista de erros (vazia = OK)."""
        errors: list[str] = []

        if not 0 < self.port < 65536:
            errors.append(f"PORT inválida: {self.port}")

        if self.log_level not in VALID_LOG_LEVELS:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")

        if self.max_body_bytes <= 0:
            errors.append("MAX_BODY_BYTES deve ser > 0")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        return errors


def _parse_environment(env_str: str) -> Environment:
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _parse_int(raw: str | None, default: int) -> int:
    # Valor inválido vira 0 para ser reportado por validate()
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return 0


def _load_server_from_env() -> ServerSettings:
    return ServerSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "happypaws_router"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_parse_int(os.getenv("PORT"), DEFAULT_PORT),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        max_body_bytes=_parse_int(os.getenv("MAX_BODY_BYTES"), DEFAULT_MAX_BODY_BYTES),
    )


@lru_cache(maxsize=1)
def get_server_settings() -> ServerSettings:
    """Retorna instância cacheada de ServerSettings."""
    return _load_server_from_env()
