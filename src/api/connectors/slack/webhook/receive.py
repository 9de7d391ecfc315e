"""Autenticação e parse do corpo de requests do Slack."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qs

from ..signature import DEFAULT_MAX_AGE_SECONDS, SignatureResult, verify_request_headers

if TYPE_CHECKING:
    from collections.abc import Mapping

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class SlackRequestError(ValueError):
    """Erro base para requests inbound inválidos."""


class InvalidSignatureError(SlackRequestError):
    """Assinatura ausente ou divergente."""


class StaleTimestampError(InvalidSignatureError):
    """Timestamp fora da janela de frescor."""


class InvalidPayloadError(SlackRequestError):
    """Corpo não decodificável (JSON ou form-encoded)."""


def parse_event_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
    *,
    now: float | None = None,
    max_age_seconds: int = DEFAULT_MAX_AGE_SECONDS,
) -> tuple[dict[str, Any], SignatureResult]:
    """Valida assinatura e decodifica o corpo.

    Aceita JSON (Events API) ou form-encoded (slash commands, e payloads
    interativos cujo campo `payload` é uma string JSON).

    Raises:
        StaleTimestampError: Timestamp fora da janela
        InvalidSignatureError: Assinatura inválida ou headers ausentes
        InvalidPayloadError: Corpo não decodificável ou não-objeto

    Returns:
        (payload dict, SignatureResult)
    """
    signature_result = verify_request_headers(
        raw_body, headers, secret, now=now, max_age_seconds=max_age_seconds
    )
    if not signature_result.valid:
        if signature_result.error == "stale_timestamp":
            raise StaleTimestampError("stale_timestamp")
        raise InvalidSignatureError(signature_result.error or "invalid_signature")

    content_type = _header(headers, "content-type")
    if content_type.startswith(FORM_CONTENT_TYPE):
        payload = _decode_form(raw_body)
    else:
        payload = _decode_json(raw_body or b"{}")

    return payload, signature_result


def is_url_verification(payload: Mapping[str, Any]) -> bool:
    """Handshake de configuração da Events API."""
    return payload.get("type") == "url_verification" and "challenge" in payload


def extract_team_id(payload: Mapping[str, Any]) -> str | None:
    """team_id do topo ou de team.id (payloads interativos)."""
    team_id = payload.get("team_id")
    if team_id:
        return str(team_id)
    team = payload.get("team")
    if isinstance(team, dict) and team.get("id"):
        return str(team["id"])
    return None


def _header(headers: Mapping[str, str], name: str) -> str:
    for key, value in headers.items():
        if key.lower() == name:
            return value.lower()
    return ""


def _decode_json(raw: bytes | str) -> dict[str, Any]:
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidPayloadError("invalid_json") from exc
    if not isinstance(payload, dict):
        raise InvalidPayloadError("payload_not_object")
    return payload


def _decode_form(raw_body: bytes) -> dict[str, Any]:
    try:
        fields = parse_qs(raw_body.decode("utf-8"), keep_blank_values=True)
    except UnicodeDecodeError as exc:
        raise InvalidPayloadError("invalid_form") from exc

    flat = {key: values[0] for key, values in fields.items() if values}
    if "payload" not in flat:
        return flat

    payload = _decode_json(flat["payload"])
    payload["team_id"] = extract_team_id(payload)
    return payload
