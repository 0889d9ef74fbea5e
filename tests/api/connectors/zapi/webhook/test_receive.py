"""Testes para parse e extração do webhook Z-API."""

from __future__ import annotations

import pytest

from api.connectors.zapi.webhook import (
    InvalidJsonError,
    PayloadTooLargeError,
    extract_inbound_event,
    parse_webhook_request,
)
from app.protocols.models import InboundEvent


class TestParseWebhookRequest:
    def test_parses_object(self) -> None:
        assert parse_webhook_request(b'{"phone": "1"}') == {"phone": "1"}

    def test_empty_body_is_empty_object(self) -> None:
        assert parse_webhook_request(b"") == {}

    @pytest.mark.parametrize("raw", [b"{invalid}", b"\xff\xfe", b"{"])
    def test_invalid_payload_raises(self, raw: bytes) -> None:
        with pytest.raises(InvalidJsonError):
            parse_webhook_request(raw)

    @pytest.mark.parametrize("raw", [b"[1, 2]", b'"texto"', b"42", b"null"])
    def test_non_object_json_becomes_empty_object(self, raw: bytes) -> None:
        assert parse_webhook_request(raw) == {}

    def test_body_over_limit_raises(self) -> None:
        with pytest.raises(PayloadTooLargeError):
            parse_webhook_request(b'{"phone": "11987654321"}', max_body_bytes=10)


class TestExtractInboundEvent:
    def test_extracts_phone_and_message(self) -> None:
        payload = {
            "phone": "11987654321",
            "text": {"message": " 2 "},
            "senderName": "Maria",
            "fromMe": False,
        }

        assert extract_inbound_event(payload) == InboundEvent(
            sender="11987654321", text=" 2 "
        )

    @pytest.mark.parametrize(
        ("payload", "expected"),
        [
            ({"text": {"message": "1"}}, InboundEvent(sender=None, text="1")),
            ({"phone": "11987654321"}, InboundEvent(sender="11987654321", text=None)),
            ({"phone": "1", "text": "oi"}, InboundEvent(sender="1", text=None)),
            ({"phone": 11987654321, "text": {"message": 1}}, InboundEvent(sender=None, text=None)),
            ({}, InboundEvent(sender=None, text=None)),
        ],
    )
    def test_missing_or_wrong_types_become_none(
        self, payload: dict[str, object], expected: InboundEvent
    ) -> None:
        assert extract_inbound_event(payload) == expected
