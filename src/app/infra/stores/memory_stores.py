"""Stores em memória: apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.protocols.credential_store import AsyncCredentialStoreProtocol

if TYPE_CHECKING:
    from collections.abc import Mapping


class MemoryCredentialStore(AsyncCredentialStoreProtocol):
    """Store de bot tokens em memória: apenas para dev/test."""

    def __init__(self, tokens: Mapping[str, str] | None = None) -> None:
        self._tokens: dict[str, str] = dict(tokens or {})

    async def find(self, team_id: str) -> str | None:
        return self._tokens.get(team_id)

    async def save(self, team_id: str, bot_token: str) -> None:
        self._tokens[team_id] = bot_token

    async def delete(self, team_id: str) -> bool:
        return self._tokens.pop(team_id, None) is not None

    def __len__(self) -> int:
        return len(self._tokens)
