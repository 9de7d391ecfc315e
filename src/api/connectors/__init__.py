"""Connectors: adapters de borda para APIs externas.

Estrutura:
- slack/: assinatura de requests, parse de payloads e Web API do Slack
"""

__all__: list[str] = []
