"""Normalização de telefones para o formato aceito pela Z-API (E.164 sem '+')."""

from __future__ import annotations

import re

from app.constants.phone import (
    BRAZIL_COUNTRY_CODE,
    DOMESTIC_MOBILE_LENGTH,
    INTERNATIONAL_PREFIXES,
    VALID_DDDS,
)

# Só 0-9: dígitos Unicode (fullwidth, arábicos) também são descartados
_NON_DIGITS = re.compile(r"[^0-9]")


def format_phone_number(phone: str | None) -> str:
    """Converte um telefone em qualquer formatação para somente dígitos E.164.

    Regras, em ordem:
    1. Remove tudo que não for dígito.
    2. Já começa com código de país conhecido (351, 55): devolve como está.
    3. Tem 11 dígitos e começa com DDD válido: prefixa "55".
    4. Caso contrário devolve os dígitos sem alteração.

    Args:
        phone: Telefone como digitado ou recebido do webhook (pode ser None).

    Returns:
        Somente dígitos ASCII; string vazia se não restar nenhum. Aplicar
        duas vezes dá o mesmo resultado.

    Nunca levanta exceção.
    """
    digits = _NON_DIGITS.sub("", phone or "")

    if digits.startswith(INTERNATIONAL_PREFIXES):
        return digits

    if len(digits) == DOMESTIC_MOBILE_LENGTH and digits[:2] in VALID_DDDS:
        return BRAZIL_COUNTRY_CODE + digits

    return digits
