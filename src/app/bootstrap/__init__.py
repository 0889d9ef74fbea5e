"""Bootstrap da aplicação — inicialização e wiring.

Composition root: carrega `.env`, configura logging, valida settings
obrigatórias e expõe os singletons usados pelas rotas.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings()  # levanta ConfigurationError
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from app.observability import get_log_context
from config.logging import VALID_LOG_LEVELS, configure_logging
from config.settings import get_server_settings, get_zapi_settings
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from app.protocols.gateway_client import GatewayClientProtocol
    from app.use_cases.whatsapp import RouteInboundMessageUseCase

SERVICE_NAME = "happypaws_router"

logger = logging.getLogger(__name__)


def load_environment() -> bool:
    """Carrega `.env` do diretório corrente sem sobrescrever o ambiente real."""
    return load_dotenv(override=False)


def initialize_app() -> None:
    """Carrega ambiente e configura logging estruturado.

    Deve ser chamada uma vez, antes de criar a aplicação.
    """
    load_environment()
    # settings podem ter sido lidas antes do .env existir
    get_server_settings.cache_clear()
    get_zapi_settings.cache_clear()

    configure_logging(
        level=_bootstrap_log_level(get_server_settings().log_level),
        service_name=SERVICE_NAME,
        context_getter=get_log_context,
    )


def _bootstrap_log_level(level: str) -> str:
    # Nível inválido é reportado por validate_runtime_settings; até lá, INFO
    return level if level in VALID_LOG_LEVELS else "INFO"


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    As credenciais Z-API são exigidas em qualquer ambiente: sem elas o
    serviço não consegue responder ninguém.

    Raises:
        ConfigurationError: Com a lista de todos os problemas encontrados.
    """
    zapi = get_zapi_settings()
    server = get_server_settings()

    logger.info(
        "settings_loaded",
        extra={
            "component": "bootstrap",
            "port": server.port,
            "environment": server.environment,
            "zapi_instance_id_present": bool(zapi.instance_id),
            "zapi_token_present": bool(zapi.token),
        },
    )

    errors: list[str] = []
    errors.extend(f"zapi: {error}" for error in zapi.validate())
    errors.extend(f"server: {error}" for error in server.validate())

    if not errors:
        logger.info("settings_validated", extra={"component": "bootstrap", "result": "ok"})
        return

    logger.error(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "error_count": len(errors),
            "errors": errors,
        },
    )
    raise ConfigurationError(errors)


@lru_cache(maxsize=1)
def get_gateway_client() -> GatewayClientProtocol:
    """Cliente Z-API do processo (singleton)."""
    from app.bootstrap.zapi_factory import create_gateway_client

    return create_gateway_client()


@lru_cache(maxsize=1)
def get_route_inbound_use_case() -> RouteInboundMessageUseCase:
    """Use case de roteamento do processo (singleton)."""
    from app.bootstrap.zapi_factory import create_route_inbound_use_case

    return create_route_inbound_use_case(get_gateway_client())
