"""Factory de wiring para Z-API (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.zapi import ZApiHttpClient, create_zapi_http_client
from app.use_cases.whatsapp import RouteInboundMessageUseCase

if TYPE_CHECKING:
    from app.protocols.gateway_client import GatewayClientProtocol
    from config.settings import ZApiSettings


def create_gateway_client(settings: ZApiSettings | None = None) -> ZApiHttpClient:
    """Cria o cliente de envio (implementa GatewayClientProtocol)."""
    return create_zapi_http_client(settings)


def create_route_inbound_use_case(
    sender: GatewayClientProtocol | None = None,
) -> RouteInboundMessageUseCase:
    """Cria o use case de roteamento com o cliente injetado."""
    return RouteInboundMessageUseCase(sender=sender or create_gateway_client())
