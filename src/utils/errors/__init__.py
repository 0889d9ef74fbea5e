"""Exceções utilitárias compartilhadas."""

from .exceptions import ConfigurationError

__all__ = ["ConfigurationError"]
