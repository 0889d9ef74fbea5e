"""Connector Z-API — gateway de WhatsApp usado para envio e recebimento."""

from .http_base import HttpClient, HttpClientConfig, HttpError
from .http_client import ZApiHttpClient, ZApiResponseError, create_zapi_http_client

__all__ = [
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "ZApiHttpClient",
    "ZApiResponseError",
    "create_zapi_http_client",
]
