"""Agregador de settings do serviço de eventos Slack.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    CredentialBackend,
    CredentialSettings,
    Environment,
    get_base_settings,
    get_credential_settings,
    parse_seed_tokens,
)

# Slack settings
from config.settings.slack import (
    DEFAULT_REQUEST_MAX_AGE_SECONDS,
    SLACK_API_BASE_URL,
    SlackSettings,
    get_slack_settings,
)

__all__ = [
    # Constants
    "DEFAULT_REQUEST_MAX_AGE_SECONDS",
    "SLACK_API_BASE_URL",
    # Base
    "BaseSettings",
    "CredentialBackend",
    "CredentialSettings",
    "Environment",
    # Slack
    "SlackSettings",
    "get_base_settings",
    "get_credential_settings",
    "get_slack_settings",
    "parse_seed_tokens",
]
