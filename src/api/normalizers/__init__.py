"""Normalizers: conversão de payloads externos para modelos internos.

Estrutura:
- slack/: payloads da Events API, slash commands e interações
"""

from .slack import SlackEventNormalizer, normalize

__all__ = [
    "SlackEventNormalizer",
    "normalize",
]
