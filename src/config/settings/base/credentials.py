"""Settings do store de credenciais (bot token por team_id)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

CredentialBackend = Literal["memory", "redis"]


@dataclass(frozen=True)
class CredentialSettings:
    """Configurações do store de credenciais.

    Attributes:
        backend: Backend de lookup (memory|redis)
        seed_tokens: Tokens iniciais do store em memória (team_id -> bot token)
    """

    backend: CredentialBackend = "memory"
    seed_tokens: dict[str, str] = field(default_factory=dict)

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações de credenciais.

        Args:
            base: BaseSettings para verificar ambiente.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.backend not in ("memory", "redis"):
            errors.append(f"SLACK_CREDENTIAL_BACKEND inválido: {self.backend}")

        if self.backend == "memory" and not base.is_development:
            errors.append(
                "SLACK_CREDENTIAL_BACKEND=memory proibido em staging/production. "
                "Use Redis."
            )

        if self.backend == "redis" and not base.redis_url:
            errors.append("SLACK_CREDENTIAL_BACKEND=redis requer REDIS_URL configurado")

        return errors


def parse_seed_tokens(raw: str) -> dict[str, str]:
    """Converte `T1:xoxb-1,T2:xoxb-2` em mapa team_id -> token.

    Entradas sem `:` ou com lado vazio são ignoradas.
    """
    tokens: dict[str, str] = {}
    for item in raw.split(","):
        team_id, sep, token = item.strip().partition(":")
        if sep and team_id and token:
            tokens[team_id] = token
    return tokens


def _load_credentials_from_env() -> CredentialSettings:
    """Carrega CredentialSettings de variáveis de ambiente."""
    backend_str = os.getenv("SLACK_CREDENTIAL_BACKEND", "memory").lower()
    backend: CredentialBackend = backend_str if backend_str in ("memory", "redis") else "memory"
    return CredentialSettings(
        backend=backend,
        seed_tokens=parse_seed_tokens(os.getenv("SLACK_BOT_TOKENS", "")),
    )


@lru_cache(maxsize=1)
def get_credential_settings() -> CredentialSettings:
    """Retorna instância cacheada de CredentialSettings."""
    return _load_credentials_from_env()
