"""Recebimento de requests inbound do Slack."""

from .receive import (
    InvalidPayloadError,
    InvalidSignatureError,
    SlackRequestError,
    StaleTimestampError,
    extract_team_id,
    is_url_verification,
    parse_event_request,
)

__all__ = [
    "InvalidPayloadError",
    "InvalidSignatureError",
    "SlackRequestError",
    "StaleTimestampError",
    "extract_team_id",
    "is_url_verification",
    "parse_event_request",
]
