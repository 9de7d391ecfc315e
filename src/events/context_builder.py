"""
Construção do ExecutionContext por request.

Resolve o token do bot do workspace no credential store e anexa um
cliente da Web API vinculado a esse token.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from events.errors import UnknownTenantError
from events.types.context import ExecutionContext

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from app.protocols.api_client import SlackApiClientProtocol
    from app.protocols.credential_store import AsyncCredentialStoreProtocol
    from events.types.payloads import SlackEvent

logger = logging.getLogger(__name__)


class ContextBuilder:
    """Monta o contexto de execução a partir do team_id e do evento."""

    def __init__(
        self,
        credential_store: AsyncCredentialStoreProtocol,
        client_factory: Callable[[str], SlackApiClientProtocol] | None = None,
    ) -> None:
        self._credential_store = credential_store
        self._client_factory = client_factory

    async def build(
        self,
        team_id: str | None,
        raw_payload: Mapping[str, Any],
        event: SlackEvent,
    ) -> ExecutionContext:
        """Resolve credencial e monta o contexto.

        Raises:
            UnknownTenantError: Workspace sem token instalado
        """
        bot_token = await self._credential_store.find(team_id) if team_id else None
        if not bot_token:
            logger.warning(
                "slack_team_not_found",
                extra={
                    "team_id": team_id,
                    "event_type": type(event).__name__,
                    "payload_type": raw_payload.get("type"),
                },
            )
            raise UnknownTenantError(team_id)

        client = self._client_factory(bot_token) if self._client_factory else None
        return ExecutionContext(
            team_id=team_id,
            bot_token=bot_token,
            client=client,
            user_id=event.user_id,
            channel_id=event.channel_id,
        )
