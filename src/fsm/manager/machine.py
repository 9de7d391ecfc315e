"""
Máquina de estados do ciclo de vida de um dispatch.

Mantém o estágio atual e o histórico de transições de um único request;
o histórico é descartado junto com o request.
"""

import logging
from typing import Any

from fsm.states.dispatch import DEFAULT_INITIAL_STAGE, DispatchStage, is_terminal
from fsm.transitions.rules import is_transition_valid
from fsm.types.transition import StageTransition, TransitionResult

logger = logging.getLogger(__name__)


class DispatchLifecycle:
    """
    Máquina de estados de um dispatch.

    Transições recusadas não alteram o estágio e são logadas em warning
    (dispatch_transition_rejected); as aceitas são logadas em debug.
    """

    __slots__ = ("_current_stage", "_history", "_dispatch_id")

    def __init__(
        self,
        initial_stage: DispatchStage | None = None,
        dispatch_id: str = "",
    ) -> None:
        self._current_stage = initial_stage or DEFAULT_INITIAL_STAGE
        self._history: list[StageTransition] = []
        self._dispatch_id = dispatch_id

    @property
    def current_stage(self) -> DispatchStage:
        """Estágio atual."""
        return self._current_stage

    @property
    def dispatch_id(self) -> str:
        """Identificador do dispatch (correlation_id)."""
        return self._dispatch_id

    @property
    def is_terminal(self) -> bool:
        """Verifica se o dispatch já terminou."""
        return is_terminal(self._current_stage)

    def advance(
        self,
        target: DispatchStage,
        reason: str,
        metadata: dict[str, Any] | None = None,
    ) -> TransitionResult:
        """
        Tenta avançar para o estágio alvo.

        Args:
            target: Estágio de destino
            reason: Motivo da transição
            metadata: Dados adicionais para logs

        Returns:
            TransitionResult com sucesso/falha e dados da transição
        """
        if not is_transition_valid(self._current_stage, target):
            logger.warning(
                "dispatch_transition_rejected",
                extra={
                    "dispatch_id": self._dispatch_id,
                    "from_stage": self._current_stage.name,
                    "to_stage": target.name,
                    "reason": reason,
                },
            )
            return TransitionResult(
                success=False,
                error_reason=(
                    f"Transição inválida: {self._current_stage.name} → {target.name}"
                ),
            )

        transition = StageTransition(
            from_stage=self._current_stage,
            to_stage=target,
            reason=reason,
            metadata=metadata or {},
        )
        self._current_stage = target
        self._history.append(transition)
        logger.debug(
            "dispatch_stage_changed",
            extra={"dispatch_id": self._dispatch_id, "transition": transition.to_log_dict()},
        )
        return TransitionResult(success=True, transition=transition)

    def fail(self, reason: str, metadata: dict[str, Any] | None = None) -> TransitionResult:
        """Leva o dispatch para FAILED a partir de qualquer estágio não-terminal."""
        return self.advance(DispatchStage.FAILED, reason, metadata)

    def get_summary(self) -> dict[str, Any]:
        """
        Resumo do dispatch para observability.

        Returns:
            Dict seguro para logs
        """
        return {
            "dispatch_id": self._dispatch_id,
            "current_stage": self._current_stage.name,
            "is_terminal": self.is_terminal,
            "stages": [t.to_stage.name for t in self._history],
        }


def create_lifecycle(dispatch_id: str) -> DispatchLifecycle:
    """Factory para a máquina de estados de um dispatch."""
    return DispatchLifecycle(dispatch_id=dispatch_id)
