"""Logging JSON do serviço.

Um único handler no root logger: JsonFormatter (python-json-logger) com
`service` fixo e `correlation_id` injetado por filter a cada record.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pythonjsonlogger.json import JsonFormatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(correlation_id)s"
RENAMED_FIELDS = {"levelname": "level", "name": "logger"}


class CorrelationIdFilter(logging.Filter):
    """Preenche record.correlation_id a partir do getter.

    Um correlation_id passado explicitamente em `extra` prevalece.
    """

    def __init__(self, correlation_id_getter: Callable[[], str] | None = None) -> None:
        super().__init__()
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._get_correlation_id()
        return True


def create_json_formatter(service_name: str) -> JsonFormatter:
    """JsonFormatter com level/logger renomeados e `service` estático."""
    return JsonFormatter(
        LOG_FORMAT,
        rename_fields=RENAMED_FIELDS,
        static_fields={"service": service_name},
    )


def configure_logging(
    service_name: str,
    level: str = "INFO",
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Instala o handler JSON no root logger, substituindo os existentes.

    Raises:
        ValueError: Nível fora de VALID_LOG_LEVELS.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setFormatter(create_json_formatter(service_name))
    handler.addFilter(CorrelationIdFilter(correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]
