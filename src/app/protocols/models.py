"""Modelos transitórios trocados entre api e app."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class InboundEvent:
    """Evento recebido no webhook; existe apenas durante a requisição.

    Campos ausentes ou não-string no payload viram None.
    """

    sender: str | None
    text: str | None


@dataclass(frozen=True, slots=True)
class OutboundMessage:
    """Mensagem de texto a enviar pelo gateway."""

    recipient: str
    body: str
