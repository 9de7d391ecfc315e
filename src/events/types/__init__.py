"""
Exports públicos do módulo events/types.
"""

from events.types.context import ExecutionContext
from events.types.payloads import (
    EVENT_TYPES,
    Action,
    ActionElement,
    BackgroundEvent,
    ButtonAction,
    Command,
    SlackEvent,
    ViewSubmission,
)
from events.types.results import (
    IGNORE,
    NOT_IMPLEMENTED,
    OK,
    Continue,
    Fail,
    Halt,
    HandlerResult,
    HandlerSignal,
    MiddlewareResult,
    Respond,
)

__all__ = [
    "EVENT_TYPES",
    "IGNORE",
    "NOT_IMPLEMENTED",
    "OK",
    "Action",
    "ActionElement",
    "BackgroundEvent",
    "ButtonAction",
    "Command",
    "Continue",
    "ExecutionContext",
    "Fail",
    "Halt",
    "HandlerResult",
    "HandlerSignal",
    "MiddlewareResult",
    "Respond",
    "SlackEvent",
    "ViewSubmission",
]
