"""Diretório de setores e textos fixos do menu do PetShop HappyPaws.

Configuração estática carregada no import; nunca é alterada em runtime.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

DEPARTMENTS: Mapping[str, str] = MappingProxyType(
    {
        "1": "Recepção",
        "2": "Creche e Hotel",
        "3": "Banho e Tosa",
        "4": "Veterinária",
        "5": "Financeiro",
        "6": "Diretoria",
    }
)

MENU_OPTION_CODES: frozenset[str] = frozenset({"1", "2", "3", "4", "5", "6"})

MENU_MESSAGE = (
    "🐾 *PetShop HappyPaws* 🐾\n\n"
    "Por favor, escolha uma opção:\n"
    "1️⃣ Recepção\n"
    "2️⃣ Creche e Hotel\n"
    "3️⃣ Banho e Tosa\n"
    "4️⃣ Veterinária\n"
    "5️⃣ Financeiro\n"
    "6️⃣ Diretoria\n\n"
    "Digite apenas o número correspondente"
)

ROUTING_MESSAGE_TEMPLATE = "🔁 Conectando você com *{department}*..."

INVALID_OPTION_MESSAGE = "❌ Opção inválida. Por favor, tente novamente."

TEST_MESSAGE = "🚀 Teste de envio manual"


def get_department(
    option_code: str,
    directory: Mapping[str, str] = DEPARTMENTS,
) -> str | None:
    """Retorna o nome do setor para o código, ou None se não existir."""
    return directory.get(option_code)
