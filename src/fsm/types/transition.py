"""
Registros imutáveis de transição entre estágios do dispatch.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from fsm.states.dispatch import DispatchStage


@dataclass(frozen=True, slots=True)
class StageTransition:
    """
    Transição de estágio registrada no histórico do dispatch.

    Attributes:
        from_stage: Estágio de origem
        to_stage: Estágio de destino
        reason: Motivo da transição (ex: 'signature_valid', 'team_not_found')
        metadata: Dados adicionais para logs (nunca tokens ou payload bruto)
        timestamp: Momento da transição (UTC)
    """

    from_stage: DispatchStage
    to_stage: DispatchStage
    reason: str
    metadata: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(
        default_factory=lambda: datetime.now(UTC)
    )

    def __post_init__(self) -> None:
        if not self.reason or not self.reason.strip():
            raise ValueError("reason não pode ser vazio")

    def to_log_dict(self) -> dict[str, Any]:
        """Representação segura para logs."""
        return {
            "from_stage": self.from_stage.name,
            "to_stage": self.to_stage.name,
            "reason": self.reason,
            "timestamp": self.timestamp.isoformat(),
            "metadata": self.metadata,
        }


@dataclass(frozen=True, slots=True)
class TransitionResult:
    """
    Resultado de uma tentativa de transição.

    Attributes:
        success: Se a transição foi aplicada
        transition: Registro da transição (se success=True)
        error_reason: Motivo da recusa (se success=False)
    """

    success: bool
    transition: StageTransition | None = None
    error_reason: str | None = None

    def __post_init__(self) -> None:
        if self.success and self.transition is None:
            raise ValueError("Transição bem-sucedida deve incluir transition")
        if not self.success and self.error_reason is None:
            raise ValueError("Transição falha deve incluir error_reason")
