"""Use case de processamento de eventos Slack autenticados.

Fluxo: normalizar -> montar contexto -> despachar (sync ou async).
O estágio de cada passo é registrado no DispatchLifecycle; qualquer
exceção leva o dispatch a FAILED e é propagada para a rota mapear.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.observability import record_dispatch, record_latency
from events.dispatcher import DispatchMode, dispatch_mode_for
from events.types.results import OK, Fail, Respond
from fsm import DispatchStage, create_lifecycle

if TYPE_CHECKING:
    from events.context_builder import ContextBuilder
    from events.dispatcher import Dispatcher
    from events.types.payloads import SlackEvent
    from events.types.results import HandlerResult
    from fsm import DispatchLifecycle

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InboundEventResult:
    """Desfecho de um dispatch."""

    event: SlackEvent
    mode: DispatchMode
    result: HandlerResult

    @property
    def outcome(self) -> str:
        if self.mode is DispatchMode.ASYNC:
            return "scheduled"
        if isinstance(self.result, Respond):
            return "responded"
        if isinstance(self.result, Fail):
            return "failed"
        return "halted"


class ProcessInboundEventUseCase:
    """Normaliza, resolve contexto e despacha um payload Slack."""

    def __init__(
        self,
        *,
        normalizer: Any,
        context_builder: ContextBuilder,
        dispatcher: Dispatcher,
    ) -> None:
        self._normalizer = normalizer
        self._context_builder = context_builder
        self._dispatcher = dispatcher

    async def execute(
        self,
        *,
        payload: dict[str, Any],
        team_id: str | None,
        correlation_id: str = "",
        lifecycle: DispatchLifecycle | None = None,
    ) -> InboundEventResult:
        """Executa o dispatch.

        Raises:
            UnrecognizedPayloadShapeError: Payload sem variante correspondente
            UnknownTenantError: Workspace sem instalação
            DispatchConfigurationError: Violação do contrato de resposta
        """
        if lifecycle is None:
            lifecycle = create_lifecycle(correlation_id)
            lifecycle.advance(DispatchStage.NORMALIZING, reason="pre_authenticated")

        start = time.perf_counter()
        try:
            event = self._normalizer.normalize(payload)
            lifecycle.advance(
                DispatchStage.CONTEXT_BUILDING,
                reason="normalized",
                metadata={"event_type": type(event).__name__},
            )
            context = await self._context_builder.build(team_id, payload, event)

            mode = dispatch_mode_for(event)
            if mode is DispatchMode.ASYNC:
                self._dispatcher.dispatch_async(event, context)
                lifecycle.advance(DispatchStage.RESPONDED, reason="async_scheduled")
                result: HandlerResult = OK
            else:
                result = await self._dispatcher.dispatch_sync(
                    event, context, lifecycle=lifecycle
                )
                if isinstance(result, Fail):
                    lifecycle.fail(reason=f"handler_error:{result.reason}")
                else:
                    lifecycle.advance(DispatchStage.RESPONDED, reason="handled")
        except Exception as exc:
            lifecycle.fail(reason=type(exc).__name__)
            logger.warning(
                "dispatch_stage_failed",
                extra={
                    "correlation_id": correlation_id,
                    "error_type": type(exc).__name__,
                    **lifecycle.get_summary(),
                },
            )
            raise

        outcome = InboundEventResult(event=event, mode=mode, result=result)
        record_latency(
            "slack_dispatch",
            mode.value,
            (time.perf_counter() - start) * 1000,
            correlation_id,
        )
        record_dispatch(type(event).__name__, mode.value, outcome.outcome, correlation_id)
        return outcome
