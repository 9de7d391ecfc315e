"""
Exports públicos do módulo fsm/manager.
"""

from fsm.manager.machine import DispatchLifecycle, create_lifecycle

__all__ = [
    "DispatchLifecycle",
    "create_lifecycle",
]
