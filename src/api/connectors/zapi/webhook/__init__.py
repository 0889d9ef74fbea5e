"""Webhook inbound da Z-API."""

from .receive import (
    InvalidJsonError,
    PayloadTooLargeError,
    WebhookRequestError,
    extract_inbound_event,
    parse_webhook_request,
)

__all__ = [
    "InvalidJsonError",
    "PayloadTooLargeError",
    "WebhookRequestError",
    "extract_inbound_event",
    "parse_webhook_request",
]
