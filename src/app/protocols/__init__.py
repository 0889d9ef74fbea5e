"""Protocolos e contratos do core da aplicação."""

from .gateway_client import GatewayClientProtocol
from .models import InboundEvent, OutboundMessage

__all__ = [
    "GatewayClientProtocol",
    "InboundEvent",
    "OutboundMessage",
]
