"""Conector Slack: assinatura, parse de requests e cliente da Web API."""

from api.connectors.slack.http_client import (
    SlackApiClient,
    SlackApiError,
    create_slack_api_client,
)
from api.connectors.slack.signature import (
    SignatureResult,
    compute_signature,
    verify_request_headers,
    verify_slack_signature,
)

__all__ = [
    "SignatureResult",
    "SlackApiClient",
    "SlackApiError",
    "compute_signature",
    "create_slack_api_client",
    "verify_request_headers",
    "verify_slack_signature",
]
