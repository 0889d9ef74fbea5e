"""Classificação do texto recebido contra o menu de setores."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from app.constants.departments import (
    DEPARTMENTS,
    INVALID_OPTION_MESSAGE,
    MENU_MESSAGE,
    MENU_OPTION_CODES,
    ROUTING_MESSAGE_TEMPLATE,
    get_department,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

ReplyKind = Literal["menu", "routed", "invalid_option"]


@dataclass(frozen=True, slots=True)
class MenuReply:
    """Resposta escolhida para uma mensagem recebida.

    Atributos:
        kind: menu (texto fora das opções), routed (setor encontrado) ou
            invalid_option (código aceito sem setor configurado).
        body: Texto a ser enviado ao remetente.
        option_code: Código digitado, quando for uma opção aceita.
        department: Nome do setor, quando encontrado.
    """

    kind: ReplyKind
    body: str
    option_code: str | None = None
    department: str | None = None


def normalize_option(text: str | None) -> str:
    """Remove espaços nas pontas e aplica case folding."""
    return (text or "").strip().casefold()


def classify_message(
    text: str | None,
    directory: Mapping[str, str] = DEPARTMENTS,
) -> MenuReply:
    """Escolhe a resposta para o texto do usuário.

    Args:
        text: Texto recebido; espaços nas pontas e caixa são ignorados.
        directory: Tabela código -> setor. Padrão: `DEPARTMENTS`.

    Returns:
        MenuReply `routed` para código com setor, `invalid_option` para
        código aceito sem setor na tabela, `menu` para qualquer outro texto.
    """
    option = normalize_option(text)
    if option not in MENU_OPTION_CODES:
        return MenuReply(kind="menu", body=MENU_MESSAGE)

    department = get_department(option, directory)
    if department is None:
        return MenuReply(kind="invalid_option", body=INVALID_OPTION_MESSAGE, option_code=option)

    return MenuReply(
        kind="routed",
        body=ROUTING_MESSAGE_TEMPLATE.format(department=department),
        option_code=option,
        department=department,
    )
