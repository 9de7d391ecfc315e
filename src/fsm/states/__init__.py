"""
Exports públicos do módulo fsm/states.
"""

from fsm.states.dispatch import (
    DEFAULT_INITIAL_STAGE,
    TERMINAL_STAGES,
    DispatchStage,
    is_terminal,
)

__all__ = [
    "DEFAULT_INITIAL_STAGE",
    "TERMINAL_STAGES",
    "DispatchStage",
    "is_terminal",
]
