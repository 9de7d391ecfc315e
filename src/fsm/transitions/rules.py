"""
Transições válidas entre estágios do dispatch.

O caminho feliz é linear; todo estágio não-terminal pode falhar.
CONTEXT_BUILDING conclui direto em RESPONDED quando o dispatch é async
(pipeline e handlers rodam fora do request).
"""

from fsm.states.dispatch import TERMINAL_STAGES, DispatchStage

TransitionMap = dict[DispatchStage, frozenset[DispatchStage]]

VALID_TRANSITIONS: TransitionMap = {
    DispatchStage.AUTHENTICATING: frozenset({
        DispatchStage.NORMALIZING,
        DispatchStage.FAILED,
    }),
    DispatchStage.NORMALIZING: frozenset({
        DispatchStage.CONTEXT_BUILDING,
        DispatchStage.FAILED,
    }),
    DispatchStage.CONTEXT_BUILDING: frozenset({
        DispatchStage.MIDDLEWARE_RUNNING,
        DispatchStage.RESPONDED,  # async: pipeline roda fora do request
        DispatchStage.FAILED,
    }),
    DispatchStage.MIDDLEWARE_RUNNING: frozenset({
        DispatchStage.HANDLER_RUNNING,
        DispatchStage.FAILED,
    }),
    DispatchStage.HANDLER_RUNNING: frozenset({
        DispatchStage.RESPONDED,
        DispatchStage.FAILED,
    }),
    DispatchStage.RESPONDED: frozenset(),
    DispatchStage.FAILED: frozenset(),
}


def is_transition_valid(from_stage: DispatchStage, to_stage: DispatchStage) -> bool:
    """Verifica se uma transição é permitida."""
    if from_stage in TERMINAL_STAGES:
        return False
    return to_stage in VALID_TRANSITIONS.get(from_stage, frozenset())
