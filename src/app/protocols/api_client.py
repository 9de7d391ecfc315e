"""Protocolo do cliente da Web API anexado ao ExecutionContext."""

from __future__ import annotations

from typing import Any, Protocol


class SlackApiClientProtocol(Protocol):
    """Operações usadas pelos helpers de handler (say, publish_home, ...)."""

    async def chat_post_message(self, channel: str | None, **arguments: Any) -> dict[str, Any]: ...

    async def chat_update(self, channel: str | None, ts: str, **arguments: Any) -> dict[str, Any]: ...

    async def views_publish(
        self, user_id: str | None, view: dict[str, Any], **arguments: Any
    ) -> dict[str, Any]: ...

    async def views_open(
        self, trigger_id: str, view: dict[str, Any], **arguments: Any
    ) -> dict[str, Any]: ...
