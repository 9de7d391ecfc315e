"""Protocolos de stores de credenciais de instalação (bot tokens).

Interfaces leves (ABCs) dependidas por Application.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class AsyncCredentialStoreProtocol(ABC):
    """Contrato assíncrono para lookup de bot token por workspace.

    Implementações devem suportar leituras concorrentes sem ordenação
    entre dispatches simultâneos.
    """

    @abstractmethod
    async def find(self, team_id: str) -> str | None:
        """Retorna o bot token do workspace ou None se não instalado."""

    @abstractmethod
    async def save(self, team_id: str, bot_token: str) -> None:
        """Registra (ou substitui) o token de uma instalação."""

    @abstractmethod
    async def delete(self, team_id: str) -> bool:
        """Remove a instalação; True se existia."""

    async def ping(self) -> bool:
        """Verifica se o backend está acessível (readiness)."""
        return True

    async def aclose(self) -> None:
        """Libera conexões no shutdown."""
