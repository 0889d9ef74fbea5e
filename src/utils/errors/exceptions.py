"""Exceções compartilhadas entre camadas."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Configuração obrigatória ausente ou inválida; impede o boot."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        details = "\n".join(f"- {error}" for error in self.errors)
        super().__init__(f"Configuração inválida:\n{details}")
