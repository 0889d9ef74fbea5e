"""API — camada de borda com o gateway Z-API.

Responsabilidades:
- Receber o webhook de mensagens e extrair remetente/texto
- Enviar respostas pelo endpoint send-text da Z-API
- Expor endpoints HTTP (webhook, envio manual de teste, health)

Subpastas:
- connectors/: adapters HTTP por gateway
- routes/: endpoints HTTP

NÃO PODE conter: regras de classificação do menu nem textos de resposta.
"""
