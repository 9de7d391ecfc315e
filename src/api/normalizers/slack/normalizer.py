"""Normalizer Slack: converte payloads brutos em eventos tipados.

Regras avaliadas em ordem (primeira que casar vence):
1. campo `event`            -> BackgroundEvent
2. campo `command`          -> Command
3. type == "block_actions"  -> Action
4. type == "view_submission"-> ViewSubmission
Nenhuma regra -> UnrecognizedPayloadShapeError.

Campos estruturais com tipo errado (`actions` que não é lista, `view.state`
que não é objeto) também levantam UnrecognizedPayloadShapeError.
"""

from __future__ import annotations

import logging
from typing import Any

from api.normalizers.slack._extraction_helpers import extract_form_values, nested_id
from events.errors import UnrecognizedPayloadShapeError
from events.types.payloads import (
    Action,
    ActionElement,
    BackgroundEvent,
    ButtonAction,
    Command,
    SlackEvent,
    ViewSubmission,
)

logger = logging.getLogger(__name__)


def normalize_background_event(raw: dict[str, Any]) -> BackgroundEvent:
    event = raw["event"] if isinstance(raw.get("event"), dict) else {}
    return BackgroundEvent(
        type=event.get("type") or "unknown",
        user_id=event.get("user"),
        channel_id=event.get("channel"),
        # Alguns eventos (app_home_opened) só trazem event_ts
        ts=event.get("ts") or event.get("event_ts"),
        tab=event.get("tab"),
        view=event.get("view"),
        text=event.get("text"),
    )


def normalize_command(raw: dict[str, Any]) -> Command:
    return Command(
        command=raw["command"],
        text=raw.get("text") or "",
        user_id=raw.get("user_id"),
        user_name=raw.get("user_name"),
        channel_id=raw.get("channel_id"),
        channel_name=raw.get("channel_name"),
        team_id=raw.get("team_id"),
        team_domain=raw.get("team_domain"),
        response_url=raw.get("response_url"),
        trigger_id=raw.get("trigger_id"),
    )


def parse_action_element(raw_action: Any) -> ActionElement | None:
    """Sub-variante do elemento de ação pelo `type` interno."""
    if not isinstance(raw_action, dict):
        return None

    element_type = raw_action.get("type")
    if element_type == "button":
        return ButtonAction(
            type=element_type,
            action_id=raw_action.get("action_id", ""),
            block_id=raw_action.get("block_id"),
            action_ts=raw_action.get("action_ts"),
            value=raw_action.get("value"),
            text=raw_action.get("text"),
            url=raw_action.get("url"),
        )

    logger.warning(
        "action_element_unsupported",
        extra={"element_type": element_type, "action_id": raw_action.get("action_id")},
    )
    return None


def normalize_action(raw: dict[str, Any]) -> Action:
    actions = raw.get("actions") or []
    if not isinstance(actions, list):
        raise UnrecognizedPayloadShapeError(list(raw.keys()))
    return Action(
        type=raw["type"],
        user_id=nested_id(raw, "user"),
        channel_id=nested_id(raw, "channel"),
        action=parse_action_element(actions[0] if actions else None),
        trigger_id=raw.get("trigger_id"),
        container=raw.get("container"),
        view=raw.get("view"),
    )


def normalize_view_submission(raw: dict[str, Any]) -> ViewSubmission:
    view = raw.get("view") if isinstance(raw.get("view"), dict) else {}
    state = view.get("state") or {}
    if not isinstance(state, dict) or not isinstance(state.get("values") or {}, dict):
        raise UnrecognizedPayloadShapeError(list(raw.keys()))
    response_urls = raw.get("response_urls") or ()
    if not isinstance(response_urls, (list, tuple)):
        raise UnrecognizedPayloadShapeError(list(raw.keys()))
    return ViewSubmission(
        type=raw["type"],
        user_id=nested_id(raw, "user"),
        team_id=raw.get("team_id") or nested_id(raw, "team"),
        callback_id=view.get("callback_id"),
        view=view,
        form=extract_form_values(view),
        trigger_id=raw.get("trigger_id"),
        response_urls=tuple(response_urls),
    )


def normalize(raw: dict[str, Any]) -> SlackEvent:
    """Classifica o payload bruto em uma das quatro variantes.

    Raises:
        UnrecognizedPayloadShapeError: Nenhuma regra casou
    """
    if not isinstance(raw, dict):
        raise UnrecognizedPayloadShapeError()

    if "event" in raw:
        return normalize_background_event(raw)
    if "command" in raw:
        return normalize_command(raw)

    payload_type = raw.get("type")
    if payload_type == "block_actions":
        return normalize_action(raw)
    if payload_type == "view_submission":
        return normalize_view_submission(raw)

    raise UnrecognizedPayloadShapeError(list(raw.keys()))


class SlackEventNormalizer:
    """Adapter de `normalize` para injeção no use case."""

    def normalize(self, payload: dict[str, Any]) -> SlackEvent:
        return normalize(payload)
