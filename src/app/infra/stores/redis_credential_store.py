"""Redis Credential Store: bot tokens por workspace.

Contrato de Keys:
    slack:installation:<team_id> -> bot token (string)
    team_id é logado; o token nunca.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.protocols.credential_store import AsyncCredentialStoreProtocol
from utils.errors import RedisConnectionError

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

logger = logging.getLogger(__name__)

INSTALLATION_PREFIX = "slack:installation:"


class RedisCredentialStore(AsyncCredentialStoreProtocol):
    """Store de instalações usando Redis assíncrono.

    Args:
        redis_client: Cliente Redis assíncrono
    """

    def __init__(self, redis_client: AsyncRedis[bytes]) -> None:
        self._redis = redis_client

    def _key(self, team_id: str) -> str:
        return f"{INSTALLATION_PREFIX}{team_id}"

    async def find(self, team_id: str) -> str | None:
        try:
            raw = await self._redis.get(self._key(team_id))
        except Exception as exc:
            raise RedisConnectionError("Falha ao consultar instalação no Redis") from exc

        if raw is None:
            logger.debug("installation_not_found", extra={"team_id": team_id})
            return None
        return raw.decode("utf-8") if isinstance(raw, bytes) else str(raw)

    async def save(self, team_id: str, bot_token: str) -> None:
        try:
            await self._redis.set(self._key(team_id), bot_token)
        except Exception as exc:
            raise RedisConnectionError("Falha ao salvar instalação no Redis") from exc
        logger.info("installation_saved", extra={"team_id": team_id})

    async def delete(self, team_id: str) -> bool:
        try:
            removed = await self._redis.delete(self._key(team_id))
        except Exception as exc:
            raise RedisConnectionError("Falha ao remover instalação no Redis") from exc
        logger.info("installation_deleted", extra={"team_id": team_id, "removed": bool(removed)})
        return bool(removed)

    async def ping(self) -> bool:
        try:
            return bool(await self._redis.ping())
        except Exception as exc:
            raise RedisConnectionError("Redis indisponível") from exc

    async def aclose(self) -> None:
        await self._redis.aclose()
