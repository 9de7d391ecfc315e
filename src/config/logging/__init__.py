"""Logging estruturado (JSON) do serviço.

    configure_logging("slack_events", level="INFO", correlation_id_getter=get_correlation_id)

Módulos usam `logging.getLogger(__name__)` com nome de evento snake_case
como mensagem e campos em `extra`. Nunca logar tokens, signing secret ou
corpo bruto dos requests.
"""

from config.logging.config import (
    VALID_LOG_LEVELS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
)

__all__ = [
    "VALID_LOG_LEVELS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
]
