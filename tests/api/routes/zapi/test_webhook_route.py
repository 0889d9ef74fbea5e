"""Testes para o endpoint POST /webhook."""

from __future__ import annotations

import json
import logging
from types import SimpleNamespace

import httpx
import pytest
from starlette.requests import Request

from api.connectors.zapi import HttpClientConfig, ZApiHttpClient
from api.routes.zapi import webhook
from app.constants.departments import MENU_MESSAGE
from app.use_cases.whatsapp import RouteInboundMessageUseCase
from config.settings import ZApiSettings


def _build_request(body: bytes, headers: dict[str, str] | None = None) -> Request:
    raw_headers = [
        (k.lower().encode("utf-8"), v.encode("utf-8")) for k, v in (headers or {}).items()
    ]
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "POST",
        "path": "/webhook",
        "raw_path": b"/webhook",
        "query_string": b"",
        "headers": raw_headers,
    }
    sent = False

    async def _receive() -> dict[str, object]:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


def _json_request(payload: object) -> Request:
    return _build_request(json.dumps(payload).encode("utf-8"))


@pytest.fixture
def use_gateway(monkeypatch: pytest.MonkeyPatch):
    def _install(gateway: object) -> None:
        use_case = RouteInboundMessageUseCase(sender=gateway)
        monkeypatch.setattr(webhook, "get_route_inbound_use_case", lambda: use_case)

    return _install


@pytest.mark.asyncio
async def test_option_code_replies_with_department(use_gateway, fake_gateway) -> None:
    use_gateway(fake_gateway)

    response = await webhook.receive_webhook(
        _json_request({"phone": "11987654321", "text": {"message": " 2 "}})
    )

    assert response.status_code == 200
    assert fake_gateway.calls == [
        ("11987654321", "🔁 Conectando você com *Creche e Hotel*...")
    ]


@pytest.mark.asyncio
async def test_free_text_replies_with_menu(use_gateway, fake_gateway) -> None:
    use_gateway(fake_gateway)

    response = await webhook.receive_webhook(
        _json_request({"phone": "351912345678", "text": {"message": "oi"}})
    )

    assert response.status_code == 200
    assert fake_gateway.calls == [("351912345678", MENU_MESSAGE)]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"text": {"message": "1"}},
        {"phone": "11987654321"},
        {"phone": "11987654321", "text": {"message": "  "}},
        {"phone": "", "text": {"message": "1"}},
        {},
    ],
)
async def test_missing_fields_return_400_without_send(
    use_gateway, fake_gateway, payload: dict[str, object]
) -> None:
    use_gateway(fake_gateway)

    response = await webhook.receive_webhook(_json_request(payload))

    assert response.status_code == 400
    assert response.body == "Telefone ou mensagem ausentes".encode("utf-8")
    assert fake_gateway.calls == []


@pytest.mark.asyncio
async def test_send_failure_still_acknowledged(use_gateway, failing_gateway) -> None:
    use_gateway(failing_gateway)

    response = await webhook.receive_webhook(
        _json_request({"phone": "11987654321", "text": {"message": "4"}})
    )

    assert response.status_code == 200
    assert len(failing_gateway.calls) == 1


@pytest.mark.asyncio
async def test_invalid_json_returns_400(use_gateway, fake_gateway) -> None:
    use_gateway(fake_gateway)

    response = await webhook.receive_webhook(_build_request(b"{invalid}"))

    assert response.status_code == 400
    assert response.body == b"Bad Request"
    assert fake_gateway.calls == []


@pytest.mark.asyncio
async def test_payload_over_limit_returns_413(
    monkeypatch: pytest.MonkeyPatch, use_gateway, fake_gateway
) -> None:
    use_gateway(fake_gateway)
    monkeypatch.setattr(
        webhook, "get_server_settings", lambda: SimpleNamespace(max_body_bytes=16)
    )

    response = await webhook.receive_webhook(
        _json_request({"phone": "11987654321", "text": {"message": "1"}})
    )

    assert response.status_code == 413
    assert fake_gateway.calls == []


@pytest.mark.asyncio
async def test_unexpected_error_returns_500(monkeypatch: pytest.MonkeyPatch) -> None:
    class _BrokenUseCase:
        async def execute(self, event: object) -> None:
            raise RuntimeError("boom")

    monkeypatch.setattr(webhook, "get_route_inbound_use_case", lambda: _BrokenUseCase())

    response = await webhook.receive_webhook(
        _json_request({"phone": "11987654321", "text": {"message": "1"}})
    )

    assert response.status_code == 500
    assert response.body == "Erro interno no servidor".encode("utf-8")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "gateway_response",
    [
        httpx.Response(200, json={"sent": True}),
        httpx.Response(200, json={"sent": False}),
    ],
)
async def test_end_to_end_normalizes_phone_and_always_acknowledges(
    monkeypatch: pytest.MonkeyPatch, gateway_response: httpx.Response
) -> None:
    sent_bodies: list[dict[str, object]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        sent_bodies.append(json.loads(request.content))
        return gateway_response

    client = ZApiHttpClient(
        ZApiSettings(instance_id="inst", token="token"),
        config=HttpClientConfig(transport=httpx.MockTransport(handler)),
    )
    use_case = RouteInboundMessageUseCase(sender=client)
    monkeypatch.setattr(webhook, "get_route_inbound_use_case", lambda: use_case)

    response = await webhook.receive_webhook(
        _json_request({"phone": "11987654321", "text": {"message": " 2 "}})
    )

    assert response.status_code == 200
    assert sent_bodies == [
        {"phone": "5511987654321", "message": "🔁 Conectando você com *Creche e Hotel*..."}
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [b"[1, 2]", b'"11987654321"', b"null"])
async def test_non_object_json_returns_missing_fields(
    use_gateway, fake_gateway, body: bytes
) -> None:
    use_gateway(fake_gateway)

    response = await webhook.receive_webhook(_build_request(body))

    assert response.status_code == 400
    assert response.body == "Telefone ou mensagem ausentes".encode("utf-8")
    assert fake_gateway.calls == []


@pytest.mark.asyncio
async def test_declared_length_over_limit_is_rejected_before_reading(
    monkeypatch: pytest.MonkeyPatch, use_gateway, fake_gateway
) -> None:
    use_gateway(fake_gateway)
    monkeypatch.setattr(
        webhook, "get_server_settings", lambda: SimpleNamespace(max_body_bytes=16)
    )
    scope = {
        "type": "http",
        "method": "POST",
        "path": "/webhook",
        "headers": [(b"content-length", b"20000000")],
    }

    async def _receive() -> dict[str, object]:
        raise AssertionError("corpo não deveria ser lido")

    response = await webhook.receive_webhook(Request(scope, _receive))

    assert response.status_code == 413
    assert fake_gateway.calls == []


@pytest.mark.asyncio
async def test_streamed_body_stops_at_limit(
    monkeypatch: pytest.MonkeyPatch, use_gateway, fake_gateway
) -> None:
    use_gateway(fake_gateway)
    monkeypatch.setattr(
        webhook, "get_server_settings", lambda: SimpleNamespace(max_body_bytes=16)
    )
    chunks_read = 0

    async def _receive() -> dict[str, object]:
        nonlocal chunks_read
        chunks_read += 1
        return {"type": "http.request", "body": b"x" * 10, "more_body": True}

    response = await webhook.receive_webhook(
        Request({"type": "http", "method": "POST", "path": "/webhook", "headers": []}, _receive)
    )

    assert response.status_code == 413
    assert chunks_read == 2


@pytest.mark.asyncio
async def test_received_log_omits_phone(
    use_gateway, fake_gateway, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO)
    use_gateway(fake_gateway)

    await webhook.receive_webhook(
        _json_request({"phone": "11987654321", "text": {"message": "1"}})
    )

    received = next(r for r in caplog.records if r.getMessage() == "webhook_received")
    assert received.has_phone is True
    assert not hasattr(received, "phone")
