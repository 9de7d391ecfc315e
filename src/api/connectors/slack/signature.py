"""Validação de assinatura dos requests do Slack (v0, HMAC-SHA256)."""

from __future__ import annotations

import hashlib
import hmac
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

SIGNATURE_VERSION = "v0"
TIMESTAMP_HEADER = "x-slack-request-timestamp"
SIGNATURE_HEADER = "x-slack-signature"
DEFAULT_MAX_AGE_SECONDS = 300


@dataclass(frozen=True, slots=True)
class SignatureResult:
    """Resultado da validação.

    error é 'invalid_signature' ou 'stale_timestamp' quando inválido.
    """

    valid: bool
    error: str | None = None


def compute_signature(raw_body: bytes, timestamp: str, secret: str | bytes) -> str:
    """Calcula 'v0=<hex>' sobre a basestring 'v0:{timestamp}:{body}'."""
    key = secret.encode("utf-8") if isinstance(secret, str) else secret
    basestring = f"{SIGNATURE_VERSION}:{timestamp}:".encode() + raw_body
    digest = hmac.new(key, basestring, hashlib.sha256).hexdigest()
    return f"{SIGNATURE_VERSION}={digest}"


def verify_slack_signature(
    raw_body: bytes,
    timestamp: str | None,
    signature: str | None,
    secret: str | bytes | None,
    *,
    now: float | None = None,
    max_age_seconds: int = DEFAULT_MAX_AGE_SECONDS,
) -> SignatureResult:
    """Valida assinatura e frescor do request.

    Secret ausente rejeita todo request. Headers ausentes, timestamp não
    numérico e assinatura divergente resultam no mesmo 'invalid_signature'.
    """
    if not secret or not timestamp or not signature:
        return SignatureResult(valid=False, error="invalid_signature")

    try:
        request_ts = int(timestamp)
    except ValueError:
        return SignatureResult(valid=False, error="invalid_signature")

    current = time.time() if now is None else now
    if abs(current - request_ts) > max_age_seconds:
        return SignatureResult(valid=False, error="stale_timestamp")

    expected = compute_signature(raw_body, timestamp, secret).encode("ascii")
    received = signature.encode("utf-8", "surrogateescape")
    if not hmac.compare_digest(expected, received):
        return SignatureResult(valid=False, error="invalid_signature")

    return SignatureResult(valid=True)


def verify_request_headers(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | bytes | None,
    *,
    now: float | None = None,
    max_age_seconds: int = DEFAULT_MAX_AGE_SECONDS,
) -> SignatureResult:
    """Extrai os headers do Slack e valida a assinatura."""
    normalized = {key.lower(): value for key, value in headers.items()}
    return verify_slack_signature(
        raw_body,
        normalized.get(TIMESTAMP_HEADER),
        normalized.get(SIGNATURE_HEADER),
        secret,
        now=now,
        max_age_seconds=max_age_seconds,
    )
