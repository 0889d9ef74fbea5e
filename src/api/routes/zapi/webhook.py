"""Endpoint do webhook de mensagens recebidas da Z-API.

POST /webhook
- 400: JSON malformado, ou telefone/mensagem ausentes (nenhum envio é feito)
- 413: corpo acima do limite (checado antes e durante a leitura)
- 500: falha inesperada no processamento
- 200: mensagem classificada e resposta tentada, com ou sem sucesso no envio

A Z-API reenvia o evento se não receber resposta rápida de sucesso; por
isso falhas de envio aparecem apenas nos logs.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response, status

from api.connectors.zapi.webhook.receive import (
    InvalidJsonError,
    PayloadTooLargeError,
    extract_inbound_event,
    parse_webhook_request,
)
from app.bootstrap import get_route_inbound_use_case
from app.use_cases.whatsapp import MissingFieldsError
from config.settings import get_server_settings

logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_FIELDS_BODY = "Telefone ou mensagem ausentes"
INTERNAL_ERROR_BODY = "Erro interno no servidor"


def _text_response(content: str, status_code: int) -> Response:
    return Response(content=content, media_type="text/plain", status_code=status_code)


async def _read_body(request: Request, max_body_bytes: int) -> bytes:
    """Lê o corpo sem nunca acumular mais que `max_body_bytes`.

    Raises:
        PayloadTooLargeError: Se `content-length` ou o stream passarem do limite.
    """
    declared = request.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > max_body_bytes:
        raise PayloadTooLargeError("payload_too_large")

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > max_body_bytes:
            raise PayloadTooLargeError("payload_too_large")
    return bytes(body)


@router.post("/webhook")
async def receive_webhook(request: Request) -> Response:
    """Recebe evento, classifica a mensagem e responde ao remetente.

    Returns:
        Resposta text/plain. O status reflete só a validação do evento,
        nunca o resultado do envio pela Z-API.
    """
    try:
        max_body_bytes = get_server_settings().max_body_bytes
        raw_body = await _read_body(request, max_body_bytes)
        payload = parse_webhook_request(raw_body, max_body_bytes=max_body_bytes)
        event = extract_inbound_event(payload)

        logger.info(
            "webhook_received",
            extra={
                "channel": "zapi",
                "payload_size": len(raw_body),
                "has_phone": bool(event.sender),
                "has_text": bool(event.text),
            },
        )

        result = await get_route_inbound_use_case().execute(event)

    except PayloadTooLargeError as exc:
        logger.warning("webhook_payload_too_large", extra={"error": str(exc)})
        return _text_response("Payload Too Large", status.HTTP_413_REQUEST_ENTITY_TOO_LARGE)

    except InvalidJsonError as exc:
        logger.warning("webhook_json_invalid", extra={"error": str(exc)})
        return _text_response("Bad Request", status.HTTP_400_BAD_REQUEST)

    except MissingFieldsError as exc:
        logger.warning("webhook_missing_fields", extra={"error": str(exc)})
        return _text_response(MISSING_FIELDS_BODY, status.HTTP_400_BAD_REQUEST)

    except Exception:
        logger.exception("webhook_processing_failed", extra={"channel": "zapi"})
        return _text_response(INTERNAL_ERROR_BODY, status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.info(
        "webhook_processed",
        extra={"reply_kind": result.reply.kind, "sent": result.sent},
    )
    return _text_response("OK", status.HTTP_200_OK)
