"""
Pipeline de middleware.

Executa middleware em ordem de registro sobre o ExecutionContext.
Cada middleware é um callable `(context, event) -> Continue | Halt`,
síncrono ou assíncrono.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from events.pipeline.invoke import invoke_callable
from events.types.context import ExecutionContext
from events.types.results import Continue, Halt

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

    from events.types.payloads import SlackEvent

    Middleware = Callable[
        [ExecutionContext, SlackEvent], "Continue | Halt | Awaitable[Continue | Halt]"
    ]

logger = logging.getLogger(__name__)


def _middleware_name(middleware: Any) -> str:
    return getattr(middleware, "__qualname__", None) or type(middleware).__name__


async def run_middleware(
    context: ExecutionContext,
    event: SlackEvent,
    middleware_list: Sequence[Middleware],
) -> ExecutionContext:
    """Executa o pipeline e retorna o contexto resultante.

    - Continue(ctx): substitui o contexto e segue
    - Halt(reason): marca o contexto como interrompido e para
    - Qualquer outro retorno: loga violação e segue com o contexto anterior

    Middleware síncrono roda fora do event loop (asyncio.to_thread).

    Exceções levantadas por middleware são propagadas.
    """
    for middleware in middleware_list:
        if context.halted:
            break

        result = await invoke_callable(middleware, context, event)

        if isinstance(result, Continue) and isinstance(result.context, ExecutionContext):
            context = result.context
        elif isinstance(result, Halt):
            logger.info(
                "middleware_halted",
                extra={
                    "middleware": _middleware_name(middleware),
                    "reason": str(result.reason),
                    "team_id": context.team_id,
                },
            )
            context = context.halt()
        else:
            logger.warning(
                "middleware_invalid_return",
                extra={
                    "middleware": _middleware_name(middleware),
                    "return_type": type(result).__name__,
                },
            )

    return context
