"""Use cases do canal Slack."""

from .process_inbound_event import InboundEventResult, ProcessInboundEventUseCase

__all__ = [
    "InboundEventResult",
    "ProcessInboundEventUseCase",
]
