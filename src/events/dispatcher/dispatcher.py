"""
Dispatcher de eventos Slack.

Dois modos:
    - SYNC: comandos, ações e submissões de modal. Exatamente um handler
      deve responder; o resultado vira o corpo HTTP.
    - ASYNC: callbacks da Events API. Middleware e handlers rodam em uma
      task supervisionada; o caller recebe o controle imediatamente.
"""

from __future__ import annotations

import inspect
import logging
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from events.errors import MultipleRespondersError, NoHandlerRespondedError
from events.pipeline.invoke import invoke_callable
from events.pipeline.middleware import run_middleware
from events.types.payloads import BackgroundEvent
from events.types.results import IGNORE, NOT_IMPLEMENTED, OK, Fail, Respond
from fsm.states.dispatch import DispatchStage

if TYPE_CHECKING:
    from app.protocols.task_executor import TaskExecutorProtocol
    from events.registry import SlackApp
    from events.types.context import ExecutionContext
    from events.types.payloads import SlackEvent
    from events.types.results import HandlerResult
    from fsm.manager.machine import DispatchLifecycle

logger = logging.getLogger(__name__)


class DispatchMode(StrEnum):
    SYNC = "sync"
    ASYNC = "async"


def dispatch_mode_for(event: SlackEvent) -> DispatchMode:
    """Eventos de background são sempre assíncronos; o resto é síncrono."""
    if isinstance(event, BackgroundEvent):
        return DispatchMode.ASYNC
    return DispatchMode.SYNC


def _handler_name(handler: Any) -> str:
    return type(handler).__name__ if not inspect.isroutine(handler) else handler.__qualname__


async def _invoke(handler: Any, capability: str, event: SlackEvent, context: ExecutionContext) -> Any:
    method = getattr(handler, capability, None)
    if method is None:
        return NOT_IMPLEMENTED
    return await invoke_callable(method, event, context)


class Dispatcher:
    """Executa middleware e handlers registrados em um SlackApp."""

    def __init__(self, app: SlackApp, executor: TaskExecutorProtocol) -> None:
        self._app = app
        self._executor = executor

    async def dispatch(
        self,
        event: SlackEvent,
        context: ExecutionContext,
        mode: DispatchMode | None = None,
        *,
        lifecycle: DispatchLifecycle | None = None,
    ) -> HandlerResult:
        """Despacha o evento no modo indicado (ou inferido pelo tipo)."""
        mode = mode or dispatch_mode_for(event)
        if mode is DispatchMode.ASYNC:
            self.dispatch_async(event, context)
            return OK
        return await self.dispatch_sync(event, context, lifecycle=lifecycle)

    async def dispatch_sync(
        self,
        event: SlackEvent,
        context: ExecutionContext,
        *,
        lifecycle: DispatchLifecycle | None = None,
    ) -> HandlerResult:
        """Executa pipeline e handlers síncronos.

        Returns:
            Respond do único handler que respondeu, Fail do handler que
            falhou, ou OK quando o pipeline foi interrompido.

        Raises:
            MultipleRespondersError: Dois ou mais handlers responderam
            NoHandlerRespondedError: Nenhum handler respondeu
        """
        if lifecycle is not None:
            lifecycle.advance(DispatchStage.MIDDLEWARE_RUNNING, reason="sync")
        context = await run_middleware(context, event, self._app.middleware_list())

        if lifecycle is not None:
            lifecycle.advance(
                DispatchStage.HANDLER_RUNNING,
                reason="middleware_done",
                metadata={"halted": context.halted},
            )
        if context.halted:
            logger.debug(
                "handler_execution_skipped",
                extra={"identifier": event.identifier, "mode": DispatchMode.SYNC.value},
            )
            return OK

        response: Respond | None = None
        responders: list[str] = []

        for handler in self._app.handler_list():
            name = _handler_name(handler)
            try:
                result = await _invoke(handler, "handle_sync", event, context)
            except Exception:
                logger.exception(
                    "handler_failed",
                    extra={
                        "handler": name,
                        "identifier": event.identifier,
                        "mode": DispatchMode.SYNC.value,
                    },
                )
                continue

            if result is NOT_IMPLEMENTED:
                logger.debug(
                    "handler_capability_missing",
                    extra={"handler": name, "capability": "handle_sync"},
                )
            elif isinstance(result, Respond):
                responders.append(name)
                if response is not None:
                    raise MultipleRespondersError(event.identifier, responders)
                response = result
            elif isinstance(result, Fail):
                logger.warning(
                    "handler_returned_error",
                    extra={
                        "handler": name,
                        "identifier": event.identifier,
                        "reason": result.reason,
                    },
                )
                if response is not None:
                    return response
                return result
            elif result is not IGNORE and result is not OK:
                logger.warning(
                    "handler_invalid_return",
                    extra={"handler": name, "return_type": type(result).__name__},
                )

        if response is None:
            raise NoHandlerRespondedError(event.identifier)
        return response

    def dispatch_async(self, event: SlackEvent, context: ExecutionContext) -> None:
        """Agenda pipeline + handlers assíncronos e retorna imediatamente."""
        self._executor.submit(
            self._run_async(event, context),
            name=f"slack-dispatch:{event.identifier}",
        )
        logger.info(
            "async_dispatch_scheduled",
            extra={"identifier": event.identifier, "team_id": context.team_id},
        )

    async def _run_async(self, event: SlackEvent, context: ExecutionContext) -> None:
        context = await run_middleware(context, event, self._app.middleware_list())
        if context.halted:
            logger.debug(
                "handler_execution_skipped",
                extra={"identifier": event.identifier, "mode": DispatchMode.ASYNC.value},
            )
            return

        for handler in self._app.handler_list():
            name = _handler_name(handler)
            try:
                result = await _invoke(handler, "handle_async", event, context)
            except Exception:
                logger.exception(
                    "handler_failed",
                    extra={
                        "handler": name,
                        "identifier": event.identifier,
                        "mode": DispatchMode.ASYNC.value,
                    },
                )
                continue

            if result is NOT_IMPLEMENTED:
                logger.debug(
                    "handler_capability_missing",
                    extra={"handler": name, "capability": "handle_async"},
                )
            elif isinstance(result, Fail):
                logger.warning(
                    "handler_returned_error",
                    extra={
                        "handler": name,
                        "identifier": event.identifier,
                        "reason": result.reason,
                    },
                )
