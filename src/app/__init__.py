"""App — orquestração do roteamento de atendimento.

Subpastas:
- bootstrap/: composition root (inicialização, validação, wiring)
- use_cases/: casos de uso (roteamento de mensagem recebida)
- services/: regras puras (normalização de telefone, classificação do menu)
- protocols/: contratos e modelos trocados com a camada api
- observability/: correlation_id dos logs
- constants/: diretório de setores, textos fixos e DDDs

Padrão: app executa; api adapta; config configura; utils apoia.
"""
