"""
Resultados de middleware e handlers.

Middleware:
    - Continue(context): segue o pipeline com o novo contexto
    - Halt(reason): interrompe pipeline e handlers

Handlers:
    - IGNORE: handler não trata este evento
    - OK: tratado, sem payload de resposta
    - Respond(payload): resposta síncrona (no máximo um handler por dispatch)
    - Fail(reason): falha sinalizada pelo handler
    - NOT_IMPLEMENTED: capacidade ausente (default de EventHandler)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from events.types.context import ExecutionContext


@dataclass(frozen=True, slots=True)
class Continue:
    context: ExecutionContext


@dataclass(frozen=True, slots=True)
class Halt:
    reason: Any = None


MiddlewareResult: TypeAlias = Continue | Halt


class HandlerSignal(Enum):
    """Sinais sem payload retornados por handlers."""

    IGNORE = "ignore"
    OK = "ok"
    NOT_IMPLEMENTED = "not_implemented"


IGNORE = HandlerSignal.IGNORE
OK = HandlerSignal.OK
NOT_IMPLEMENTED = HandlerSignal.NOT_IMPLEMENTED


@dataclass(frozen=True, slots=True)
class Respond:
    """Resposta síncrona; payload None ou '' vira HTTP 200 com corpo vazio."""

    payload: dict[str, Any] | str | None = None

    @property
    def is_empty(self) -> bool:
        return self.payload is None or self.payload == ""


@dataclass(frozen=True, slots=True)
class Fail:
    reason: str


HandlerResult: TypeAlias = HandlerSignal | Respond | Fail
