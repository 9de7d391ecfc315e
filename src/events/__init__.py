"""
Motor de ingestão e dispatch de eventos Slack.

Responsabilidades:
- Tipos de evento (união fechada de quatro variantes)
- ExecutionContext imutável e resultados de middleware/handlers
- Pipeline de middleware com short-circuit
- Dispatcher sync (exatamente um respondente) e async (fire-and-forget)
"""

from events.context_builder import ContextBuilder
from events.dispatcher import Dispatcher, DispatchMode, dispatch_mode_for
from events.errors import (
    DispatchConfigurationError,
    MultipleRespondersError,
    NoHandlerRespondedError,
    SlackEventsError,
    UnknownTenantError,
    UnrecognizedPayloadShapeError,
)
from events.handlers import (
    EventHandler,
    ack,
    open_modal,
    publish_home,
    reply,
    say,
    update_message,
)
from events.pipeline import run_middleware
from events.registry import SlackApp, load_slack_app
from events.types import (
    IGNORE,
    NOT_IMPLEMENTED,
    OK,
    Action,
    BackgroundEvent,
    ButtonAction,
    Command,
    Continue,
    ExecutionContext,
    Fail,
    Halt,
    Respond,
    SlackEvent,
    ViewSubmission,
)

__all__ = [
    "IGNORE",
    "NOT_IMPLEMENTED",
    "OK",
    "Action",
    "BackgroundEvent",
    "ButtonAction",
    "Command",
    "ContextBuilder",
    "Continue",
    "DispatchConfigurationError",
    "DispatchMode",
    "Dispatcher",
    "EventHandler",
    "ExecutionContext",
    "Fail",
    "Halt",
    "MultipleRespondersError",
    "NoHandlerRespondedError",
    "Respond",
    "SlackApp",
    "SlackEvent",
    "SlackEventsError",
    "UnknownTenantError",
    "UnrecognizedPayloadShapeError",
    "ViewSubmission",
    "ack",
    "dispatch_mode_for",
    "load_slack_app",
    "open_modal",
    "publish_home",
    "reply",
    "run_middleware",
    "say",
    "update_message",
]
