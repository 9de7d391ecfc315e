"""Métricas via structured logging.

Registradas como logs (`metric_*`) e agregadas fora do processo.

Métricas suportadas:
- Latência: tempo por componente/operação
- Dispatch: contador de desfechos por modo e tipo de evento
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "slack_dispatch")
        operation: Nome da operação (ex: "sync", "async_schedule")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_dispatch(
    event_type: str,
    mode: str,
    outcome: str,
    correlation_id: str | None = None,
) -> None:
    """Registra desfecho de um dispatch (responded, halted, failed, scheduled)."""
    logger.info(
        "metric_dispatch",
        extra={
            "metric_type": "counter",
            "component": "slack_dispatch",
            "event_type": event_type,
            "mode": mode,
            "outcome": outcome,
            "correlation_id": correlation_id,
        },
    )
