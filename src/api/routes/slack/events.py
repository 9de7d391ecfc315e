"""Endpoint de eventos do Slack.

Endpoints:
- POST /slack/events: Events API, slash commands e interações

Fluxo:
1. Valida assinatura v0 e frescor do timestamp (401 em falha)
2. Responde o handshake url_verification com o challenge
3. Normaliza, resolve o workspace e despacha
   - eventos de background: agenda e responde 200 vazio
   - interações: responde com o payload do único handler que respondeu

Mapeamento de erros:
- assinatura inválida/expirada -> 401 {"error": "invalid_request_signature"}
- corpo não decodificável -> 400 {"error": "invalid_payload"}
- payload não reconhecido -> 400 {"error": "unrecognized_payload"}
- workspace sem instalação -> 500 {"error": "team_not_found"}
- Fail(reason) de handler -> 500 {"error": reason}
- configuração de handlers inválida -> 500 {"error": "internal_error"}
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from api.connectors.slack.webhook import (
    InvalidPayloadError,
    InvalidSignatureError,
    extract_team_id,
    is_url_verification,
    parse_event_request,
)
from app.observability import CORRELATION_HEADER, correlation_scope
from events.errors import (
    DispatchConfigurationError,
    UnknownTenantError,
    UnrecognizedPayloadShapeError,
)
from events.types.results import Fail, Respond
from fsm import DispatchStage, create_lifecycle

if TYPE_CHECKING:
    from app.bootstrap.slack_factory import SlackRuntime

logger = logging.getLogger(__name__)

router = APIRouter()


def get_slack_runtime(request: Request) -> SlackRuntime:
    """Runtime do app.state; criado na primeira requisição se ausente."""
    runtime = getattr(request.app.state, "slack_runtime", None)
    if runtime is None:
        from app.bootstrap import create_slack_runtime

        runtime = create_slack_runtime()
        request.app.state.slack_runtime = runtime
    return runtime


def _error(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(content={"error": error}, status_code=status_code)


def _render(result: Any) -> Response:
    if isinstance(result, Fail):
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, result.reason)
    if isinstance(result, Respond) and not result.is_empty:
        if isinstance(result.payload, str):
            return Response(content=result.payload, media_type="text/plain")
        return JSONResponse(content=result.payload)
    return Response(status_code=status.HTTP_200_OK)


@router.post("/events", response_model=None)
async def receive_events(request: Request) -> Response:
    """Recebe um request do Slack e devolve o ack apropriado."""
    with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
        runtime = get_slack_runtime(request)
        settings = runtime.settings
        lifecycle = create_lifecycle(correlation_id)
        raw_body = await request.body()

        try:
            payload, _ = parse_event_request(
                raw_body=raw_body,
                headers=dict(request.headers),
                secret=settings.signing_secret or None,
                max_age_seconds=settings.request_max_age_seconds,
            )
        except InvalidSignatureError as exc:
            lifecycle.fail(reason=str(exc))
            logger.warning(
                "slack_signature_invalid",
                extra={"correlation_id": correlation_id, "error": str(exc)},
            )
            return _error(status.HTTP_401_UNAUTHORIZED, "invalid_request_signature")
        except InvalidPayloadError as exc:
            lifecycle.fail(reason=str(exc))
            logger.warning(
                "slack_payload_invalid",
                extra={"correlation_id": correlation_id, "error": str(exc)},
            )
            return _error(status.HTTP_400_BAD_REQUEST, "invalid_payload")

        if is_url_verification(payload):
            logger.info("slack_url_verification", extra={"correlation_id": correlation_id})
            return JSONResponse(content={"challenge": payload["challenge"]})

        lifecycle.advance(DispatchStage.NORMALIZING, reason="authenticated")
        team_id = extract_team_id(payload)

        try:
            outcome = await runtime.use_case.execute(
                payload=payload,
                team_id=team_id,
                correlation_id=correlation_id,
                lifecycle=lifecycle,
            )
        except UnrecognizedPayloadShapeError as exc:
            logger.warning(
                "slack_payload_unrecognized",
                extra={"correlation_id": correlation_id, "keys": exc.keys},
            )
            return _error(status.HTTP_400_BAD_REQUEST, "unrecognized_payload")
        except UnknownTenantError:
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "team_not_found")
        except DispatchConfigurationError:
            logger.exception(
                "slack_dispatch_misconfigured",
                extra={"correlation_id": correlation_id, "team_id": team_id},
            )
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error")

        return _render(outcome.result)
