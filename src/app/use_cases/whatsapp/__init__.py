"""Use cases específicos de WhatsApp."""

from .route_inbound_message import (
    MissingFieldsError,
    RouteInboundMessageUseCase,
    RoutingResult,
)

__all__ = [
    "MissingFieldsError",
    "RouteInboundMessageUseCase",
    "RoutingResult",
]
