"""
Módulo FSM: ciclo de vida de um dispatch de evento Slack.

Estrutura:
    - states/: Estágios do dispatch (DispatchStage enum)
    - transitions/: Regras de transição (VALID_TRANSITIONS)
    - manager/: Máquina de estados (DispatchLifecycle)
    - types/: Tipos de dados (StageTransition, TransitionResult)
"""

from fsm.manager import DispatchLifecycle, create_lifecycle
from fsm.states import (
    DEFAULT_INITIAL_STAGE,
    TERMINAL_STAGES,
    DispatchStage,
    is_terminal,
)
from fsm.transitions import (
    VALID_TRANSITIONS,
    is_transition_valid,
)
from fsm.types import StageTransition, TransitionResult

__all__ = [
    "DEFAULT_INITIAL_STAGE",
    "TERMINAL_STAGES",
    "VALID_TRANSITIONS",
    "DispatchLifecycle",
    "DispatchStage",
    "StageTransition",
    "TransitionResult",
    "create_lifecycle",
    "is_terminal",
    "is_transition_valid",
]
