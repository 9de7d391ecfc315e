"""Stores: implementações concretas de persistência.

Módulos disponíveis:
    - redis_credential_store: bot tokens por workspace em Redis
    - memory_stores: Stores em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.memory_stores import MemoryCredentialStore
from app.infra.stores.redis_credential_store import RedisCredentialStore

__all__ = [
    # Memory (dev/test)
    "MemoryCredentialStore",
    # Redis
    "RedisCredentialStore",
]
