"""Contrato de handlers e helpers de resposta."""

from events.handlers.base import (
    EventHandler,
    ack,
    open_modal,
    publish_home,
    reply,
    say,
    update_message,
)

__all__ = [
    "EventHandler",
    "ack",
    "open_modal",
    "publish_home",
    "reply",
    "say",
    "update_message",
]
