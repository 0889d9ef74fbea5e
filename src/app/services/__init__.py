"""Serviços de aplicação (sem IO direto)."""

from app.services.menu_router import MenuReply, classify_message
from app.services.phone_normalizer import format_phone_number

__all__ = [
    "MenuReply",
    "classify_message",
    "format_phone_number",
]
