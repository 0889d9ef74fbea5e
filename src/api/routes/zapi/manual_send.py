"""Endpoint manual para testar o envio pela Z-API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Response, status
from pydantic import BaseModel

from app.bootstrap import get_gateway_client
from app.constants.departments import TEST_MESSAGE

logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_PHONE_BODY = 'Parâmetro "phone" obrigatório'


class ManualSendResponse(BaseModel):
    """Resultado do envio manual."""

    sucesso: bool


@router.get("/test-send", response_model=None)
async def send_test_message(phone: str | None = None) -> Response | ManualSendResponse:
    """Envia a mensagem fixa de teste para `phone`."""
    if not phone:
        return Response(
            content=MISSING_PHONE_BODY,
            media_type="text/plain",
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    ok = await get_gateway_client().send_text(phone, TEST_MESSAGE)
    logger.info("manual_send_completed", extra={"sent": ok})
    return ManualSendResponse(sucesso=ok)
