"""
Exports públicos do módulo fsm/transitions.
"""

from fsm.transitions.rules import (
    VALID_TRANSITIONS,
    TransitionMap,
    is_transition_valid,
)

__all__ = [
    "VALID_TRANSITIONS",
    "TransitionMap",
    "is_transition_valid",
]
