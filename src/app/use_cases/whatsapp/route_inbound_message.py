"""Use case de roteamento de mensagens recebidas para setores.

Fluxo de uma mensagem (sem estado entre requisições):
    Received -> Validated -> Classified -> Replied
    Received -> Rejected (telefone ou texto ausente)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.protocols.models import InboundEvent, OutboundMessage
from app.services.menu_router import MenuReply, classify_message

if TYPE_CHECKING:
    from app.protocols.gateway_client import GatewayClientProtocol

logger = logging.getLogger(__name__)


class MissingFieldsError(ValueError):
    """Telefone ou mensagem ausentes no evento recebido."""


@dataclass(frozen=True, slots=True)
class RoutingResult:
    """Resultado do processamento de um evento."""

    reply: MenuReply
    sent: bool


class RouteInboundMessageUseCase:
    """Classifica a mensagem recebida e responde via gateway."""

    def __init__(self, sender: GatewayClientProtocol) -> None:
        self._sender = sender

    async def execute(self, event: InboundEvent) -> RoutingResult:
        """Processa um evento: valida, classifica e responde ao remetente.

        Args:
            event: Telefone e texto extraídos do webhook.

        Returns:
            RoutingResult com a resposta escolhida e se o gateway confirmou
            o envio. Falha de envio não vira exceção.

        Raises:
            MissingFieldsError: Se telefone ou texto estiverem vazios.
                Nenhum envio é feito nesse caso.
        """
        sender = self._validate(event)
        reply = classify_message(event.text)
        message = OutboundMessage(recipient=sender, body=reply.body)

        logger.info(
            "inbound_message_classified",
            extra={
                "reply_kind": reply.kind,
                "option_code": reply.option_code,
                "department": reply.department,
            },
        )

        sent = await self._sender.send_text(message.recipient, message.body)
        if not sent:
            # Falha de envio não é propagada: o webhook ainda responde 200
            logger.error(
                "reply_send_failed",
                extra={"phone": message.recipient, "reply_kind": reply.kind},
            )

        return RoutingResult(reply=reply, sent=sent)

    @staticmethod
    def _validate(event: InboundEvent) -> str:
        sender = (event.sender or "").strip()
        text = (event.text or "").strip()
        if not sender or not text:
            raise MissingFieldsError("phone_or_message_missing")
        return sender
