"""
Exports públicos do módulo fsm/types.
"""

from fsm.types.transition import StageTransition, TransitionResult

__all__ = [
    "StageTransition",
    "TransitionResult",
]
