"""Cliente HTTP da Z-API para envio de mensagens de texto.

Contrato: `send_text(phone, message) -> bool`. Qualquer falha (rede,
timeout, status não-2xx, corpo malformado ou `sent` diferente de True) é
registrada em log com contexto e convertida em False. Nada é reenviado.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.zapi.http_base import HttpClient, HttpClientConfig, HttpError
from app.services.phone_normalizer import format_phone_number

if TYPE_CHECKING:
    import httpx

    from config.settings import ZApiSettings

logger: logging.Logger = logging.getLogger(__name__)


class ZApiResponseError(HttpError):
    """Resposta 2xx que não confirma o envio."""


class ZApiHttpClient(HttpClient):
    """Cliente do endpoint `send-text` de uma instância Z-API."""

    def __init__(
        self,
        settings: ZApiSettings,
        config: HttpClientConfig | None = None,
    ) -> None:
        super().__init__(
            config
            or HttpClientConfig(
                timeout_seconds=settings.request_timeout_seconds,
                default_headers={"Content-Type": "application/json"},
            )
        )
        self._settings = settings

    async def send_text(self, phone: str, message: str) -> bool:
        """Envia texto para o telefone (normalizado para E.164).

        Uma única tentativa. O telefone só aparece no log de falha, onde é
        necessário para reenvio manual.

        Args:
            phone: Telefone do destinatário em qualquer formatação.
            message: Texto a enviar.

        Returns:
            True somente se a Z-API responder com `sent: true`; False para
            qualquer falha (já registrada em `zapi_send_failed`).
        """
        formatted_phone = format_phone_number(phone)
        logger.info(
            "zapi_send_attempt",
            extra={"message_length": len(message)},
        )

        try:
            response = await self.post(
                self._settings.send_text_endpoint,
                json={"phone": formatted_phone, "message": message},
            )
            response_data = self._parse_response(response)
        except HttpError as exc:
            logger.error(
                "zapi_send_failed",
                extra={
                    "endpoint": self._settings.masked_endpoint,
                    "phone": formatted_phone,
                    "error": str(exc),
                    "status_code": exc.status_code,
                    "response_body": exc.response_body,
                },
            )
            return False

        logger.info(
            "zapi_send_succeeded",
            extra={"message_id": response_data.get("messageId")},
        )
        return True

    @staticmethod
    def _parse_response(response: httpx.Response) -> dict[str, Any]:
        try:
            response_data = response.json()
        except ValueError as exc:
            raise ZApiResponseError(
                "zapi_invalid_json",
                status_code=response.status_code,
                response_body=response.text,
            ) from exc

        if not isinstance(response_data, dict) or response_data.get("sent") is not True:
            raise ZApiResponseError(
                "zapi_unexpected_response",
                status_code=response.status_code,
                response_body=response_data,
            )
        return response_data


def create_zapi_http_client(settings: ZApiSettings | None = None) -> ZApiHttpClient:
    """Factory do cliente Z-API com settings do ambiente."""
    # Import local para evitar dependência circular
    from config.settings import get_zapi_settings

    return ZApiHttpClient(settings or get_zapi_settings())
