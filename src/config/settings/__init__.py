"""Agregador de settings do roteador HappyPaws."""

from __future__ import annotations

from config.settings.base import (
    Environment,
    ServerSettings,
    get_server_settings,
)
from config.settings.zapi import (
    ZAPI_BASE_URL,
    ZApiSettings,
    get_zapi_settings,
)

__all__ = [
    "ZAPI_BASE_URL",
    "Environment",
    "ServerSettings",
    "ZApiSettings",
    "get_server_settings",
    "get_zapi_settings",
]
