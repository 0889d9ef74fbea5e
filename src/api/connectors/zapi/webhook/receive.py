"""Parse inicial do webhook de mensagens recebidas da Z-API."""

from __future__ import annotations

import json
from typing import Any

from app.protocols.models import InboundEvent


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidJsonError(WebhookRequestError):
    """JSON inválido no payload do webhook."""


class PayloadTooLargeError(WebhookRequestError):
    """Corpo do webhook acima do limite configurado."""


def parse_webhook_request(
    raw_body: bytes,
    max_body_bytes: int | None = None,
) -> dict[str, Any]:
    """Parseia o corpo do webhook como objeto JSON.

    JSON válido que não é objeto (lista, string, número) vira `{}`: o evento
    segue sem telefone nem mensagem e é rejeitado como campos ausentes.

    Raises:
        PayloadTooLargeError: Se o corpo exceder `max_body_bytes`
        InvalidJsonError: Se o corpo não for JSON válido
    """
    if max_body_bytes is not None and len(raw_body) > max_body_bytes:
        raise PayloadTooLargeError("payload_too_large")

    try:
        payload = json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    return payload if isinstance(payload, dict) else {}


def extract_inbound_event(payload: dict[str, Any]) -> InboundEvent:
    """Extrai remetente e texto; demais campos do payload são ignorados."""
    text_block = payload.get("text")
    message = text_block.get("message") if isinstance(text_block, dict) else None
    return InboundEvent(
        sender=_as_str(payload.get("phone")),
        text=_as_str(message),
    )


def _as_str(value: object) -> str | None:
    return value if isinstance(value, str) else None
