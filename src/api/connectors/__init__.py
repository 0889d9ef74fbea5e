"""Connectors — adapters de borda para APIs externas.

Estrutura:
- zapi/: gateway Z-API (envio de texto e webhook inbound)
"""

__all__: list[str] = []
