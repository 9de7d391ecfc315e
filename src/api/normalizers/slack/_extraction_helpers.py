"""Helpers de extração de valores de formulário (view_submission).

O estado de uma view chega como {block_id: {action_id: descriptor}};
cada descriptor tem um `type` que define onde está o valor.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

_MISSING = object()


def _option_value(descriptor: dict[str, Any]) -> str | None:
    option = descriptor.get("selected_option")
    if isinstance(option, dict):
        return option.get("value")
    return None


def _option_values(descriptor: dict[str, Any]) -> list[str]:
    options = descriptor.get("selected_options") or []
    return [opt.get("value") for opt in options if isinstance(opt, dict)]


def _field(key: str) -> Any:
    return lambda descriptor: descriptor.get(key)


FIELD_EXTRACTORS: dict[str, Any] = {
    "plain_text_input": _field("value"),
    "users_select": _field("selected_user"),
    "conversations_select": _field("selected_conversation"),
    "static_select": _option_value,
    "radio_buttons": _option_value,
    "multi_users_select": _field("selected_users"),
    "multi_conversations_select": _field("selected_conversations"),
    "multi_static_select": _option_values,
    "checkboxes": _option_values,
    "datepicker": _field("selected_date"),
    "timepicker": _field("selected_time"),
}


def extract_field_value(descriptor: Any) -> Any:
    """Valor de um campo; `_MISSING` quando o tipo não é suportado."""
    if not isinstance(descriptor, dict):
        return _MISSING
    extractor = FIELD_EXTRACTORS.get(descriptor.get("type"))
    if extractor is None:
        return _MISSING
    return extractor(descriptor)


def extract_form_values(view: dict[str, Any] | None) -> dict[str, Any]:
    """Achata view.state.values em {action_id: valor}.

    Campos de tipo desconhecido são omitidos do resultado.
    """
    state = (view or {}).get("state") or {}
    values = state.get("values") if isinstance(state, dict) else None
    if not isinstance(values, dict):
        return {}
    form: dict[str, Any] = {}

    for block_id, block_values in values.items():
        if not isinstance(block_values, dict):
            continue
        for action_id, descriptor in block_values.items():
            value = extract_field_value(descriptor)
            if value is _MISSING:
                logger.debug(
                    "form_field_type_unsupported",
                    extra={
                        "block_id": block_id,
                        "action_id": action_id,
                        "field_type": descriptor.get("type")
                        if isinstance(descriptor, dict)
                        else type(descriptor).__name__,
                    },
                )
                continue
            form[action_id] = value

    return form


def nested_id(payload: dict[str, Any], key: str) -> str | None:
    """Lê `payload[key]["id"]` (user, channel, team)."""
    block = payload.get(key)
    if isinstance(block, dict):
        return block.get("id")
    return None
