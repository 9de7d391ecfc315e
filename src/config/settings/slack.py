"""Settings específicas do Slack.

Configurações de verificação de requests, Web API e dispatch assíncrono.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da Web API
SLACK_API_BASE_URL: str = "https://slack.com/api"

# Janela de frescor do header X-Slack-Request-Timestamp (anti-replay)
DEFAULT_REQUEST_MAX_AGE_SECONDS: int = 300


@dataclass(frozen=True)
class SlackSettings:
    """Configurações do app Slack.

    Attributes:
        signing_secret: Secret para validação HMAC dos requests
        request_max_age_seconds: Idade máxima aceita do timestamp do request
        api_base_url: URL base da Web API
        request_timeout_seconds: Timeout para chamadas HTTP à Web API
        max_retries: Máximo de tentativas em 429/5xx
        app_module: Caminho `pacote.modulo:atributo` do SlackApp da aplicação
        async_max_concurrency: Limite de dispatches assíncronos simultâneos
        async_drain_timeout_seconds: Espera por tasks pendentes no shutdown
    """

    signing_secret: str = ""
    request_max_age_seconds: int = DEFAULT_REQUEST_MAX_AGE_SECONDS

    # Web API
    api_base_url: str = SLACK_API_BASE_URL
    request_timeout_seconds: float = 30.0
    max_retries: int = 3

    # Registro de handlers
    app_module: str = ""

    # Dispatch assíncrono
    async_max_concurrency: int = 100
    async_drain_timeout_seconds: float = 30.0

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Slack.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.signing_secret:
            errors.append("SLACK_SIGNING_SECRET não configurado")

        if self.request_max_age_seconds <= 0:
            errors.append("SLACK_REQUEST_MAX_AGE_SECONDS deve ser > 0")

        if self.request_timeout_seconds <= 0:
            errors.append("SLACK_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("SLACK_MAX_RETRIES deve ser >= 0")

        if self.async_max_concurrency <= 0:
            errors.append("SLACK_ASYNC_MAX_CONCURRENCY deve ser > 0")

        if self.app_module and ":" not in self.app_module:
            errors.append("SLACK_APP_MODULE deve ter o formato 'pacote.modulo:atributo'")

        return errors


def _load_from_env() -> SlackSettings:
    """Carrega SlackSettings a partir de variáveis de ambiente."""
    return SlackSettings(
        signing_secret=os.getenv("SLACK_SIGNING_SECRET", ""),
        request_max_age_seconds=int(
            os.getenv("SLACK_REQUEST_MAX_AGE_SECONDS", str(DEFAULT_REQUEST_MAX_AGE_SECONDS))
        ),
        api_base_url=os.getenv("SLACK_API_BASE_URL", SLACK_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("SLACK_REQUEST_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("SLACK_MAX_RETRIES", "3")),
        app_module=os.getenv("SLACK_APP_MODULE", ""),
        async_max_concurrency=int(os.getenv("SLACK_ASYNC_MAX_CONCURRENCY", "100")),
        async_drain_timeout_seconds=float(
            os.getenv("SLACK_ASYNC_DRAIN_TIMEOUT_SECONDS", "30")
        ),
    )


@lru_cache(maxsize=1)
def get_slack_settings() -> SlackSettings:
    """Retorna instância cacheada de SlackSettings."""
    return _load_from_env()
