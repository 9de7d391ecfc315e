"""Agregador de settings base.

Re-exporta todas as settings base para uso externo.
"""

from __future__ import annotations

from config.settings.base.core import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.base.credentials import (
    CredentialBackend,
    CredentialSettings,
    get_credential_settings,
    parse_seed_tokens,
)

__all__ = [
    # Core
    "BaseSettings",
    # Credenciais
    "CredentialBackend",
    "CredentialSettings",
    # Types
    "Environment",
    "get_base_settings",
    "get_credential_settings",
    "parse_seed_tokens",
]
