"""Contrato do cliente de envio do gateway de mensagens."""

from __future__ import annotations

from typing import Protocol


class GatewayClientProtocol(Protocol):
    """Envia texto e informa apenas sucesso/falha.

    Implementações nunca levantam exceção por falha de envio: registram o
    erro em log e retornam False.
    """

    async def send_text(self, phone: str, message: str) -> bool: ...
