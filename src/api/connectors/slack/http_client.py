"""Cliente da Web API do Slack vinculado a um bot token.

Métodos usados pelos handlers: chat.postMessage, chat.update,
views.publish, views.open, views.update.

Respostas com `ok: false` viram SlackApiError; tokens nunca são logados.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.slack.http_base import HttpClient, HttpClientConfig, HttpError

if TYPE_CHECKING:
    import httpx

    from config.settings import SlackSettings

logger = logging.getLogger(__name__)


class SlackApiError(Exception):
    """Resposta `ok: false` (ou inválida) da Web API."""

    def __init__(self, method: str, error: str, response: dict[str, Any] | None = None) -> None:
        super().__init__(f"{method} falhou: {error}")
        self.method = method
        self.error = error
        self.response = response or {}


class SlackApiClient(HttpClient):
    """Cliente HTTP da Web API autenticado com o bot token do workspace."""

    def __init__(
        self,
        token: str,
        *,
        base_url: str = "https://slack.com/api",
        config: HttpClientConfig | None = None,
    ) -> None:
        if not token or not token.strip():
            raise ValueError("token é obrigatório para o cliente Slack")
        super().__init__(config)
        self._token = token
        self._base_url = base_url.rstrip("/")

    @property
    def base_url(self) -> str:
        return self._base_url

    async def api_call(self, method: str, payload: dict[str, Any]) -> dict[str, Any]:
        """POST em `{base_url}/{method}` e valida `ok`.

        Raises:
            SlackApiError: Slack respondeu ok=false ou JSON inválido
            HttpError: Falha HTTP após retries
        """
        headers = {
            "Content-Type": "application/json; charset=utf-8",
            "Authorization": f"Bearer {self._token}",
        }
        body = {key: value for key, value in payload.items() if value is not None}
        response = await self.post(f"{self._base_url}/{method}", json=body, headers=headers)
        return self._process_response(method, response)

    def _process_response(self, method: str, response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except json.JSONDecodeError as exc:
            logger.error(
                "slack_api_invalid_json",
                extra={"method": method, "status_code": response.status_code},
            )
            raise SlackApiError(method, "invalid_json") from exc

        if not isinstance(data, dict) or not data.get("ok"):
            error = data.get("error", "unknown_error") if isinstance(data, dict) else "invalid_response"
            logger.error(
                "slack_api_error",
                extra={"method": method, "error": error, "status_code": response.status_code},
            )
            raise SlackApiError(method, error, data if isinstance(data, dict) else None)

        logger.debug("slack_api_ok", extra={"method": method})
        return data

    async def chat_post_message(self, channel: str | None, **arguments: Any) -> dict[str, Any]:
        return await self.api_call("chat.postMessage", {**arguments, "channel": channel})

    async def chat_update(self, channel: str | None, ts: str, **arguments: Any) -> dict[str, Any]:
        return await self.api_call("chat.update", {**arguments, "channel": channel, "ts": ts})

    async def views_publish(
        self, user_id: str | None, view: dict[str, Any], **arguments: Any
    ) -> dict[str, Any]:
        return await self.api_call(
            "views.publish", {**arguments, "user_id": user_id, "view": view}
        )

    async def views_open(
        self, trigger_id: str, view: dict[str, Any], **arguments: Any
    ) -> dict[str, Any]:
        return await self.api_call(
            "views.open", {**arguments, "trigger_id": trigger_id, "view": view}
        )

    async def views_update(
        self,
        view: dict[str, Any],
        *,
        view_id: str | None = None,
        external_id: str | None = None,
        view_hash: str | None = None,
    ) -> dict[str, Any]:
        """Atualiza view existente; exige view_id ou external_id."""
        if not view_id and not external_id:
            raise ValueError("views_update exige view_id ou external_id")
        return await self.api_call(
            "views.update",
            {"view": view, "view_id": view_id, "external_id": external_id, "hash": view_hash},
        )


def create_slack_api_client(
    token: str,
    settings: SlackSettings | None = None,
) -> SlackApiClient:
    """Factory do cliente com timeout/retries das settings."""
    from config.settings import get_slack_settings

    slack = settings or get_slack_settings()
    config = HttpClientConfig(
        timeout_seconds=slack.request_timeout_seconds,
        max_retries=slack.max_retries,
    )
    return SlackApiClient(token, base_url=slack.api_base_url, config=config)


__all__ = ["HttpError", "SlackApiClient", "SlackApiError", "create_slack_api_client"]
