"""Exceções de infraestrutura compartilhadas entre stores e clientes."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class RedisConnectionError(InfrastructureError):
    """Falha de conexão/timeout ao consultar credenciais no Redis."""
