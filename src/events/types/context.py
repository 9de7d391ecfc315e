"""
Contexto de execução passado a middleware e handlers.

Imutável: toda alteração produz um novo valor (copy-on-write), então
cada dispatch tem sua própria cópia e nenhum lock é necessário.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols.api_client import SlackApiClientProtocol


@dataclass(frozen=True, slots=True)
class ExecutionContext:
    """
    Contexto por request.

    Attributes:
        team_id: Workspace que originou o evento
        user_id: Usuário do evento (quando houver)
        channel_id: Canal do evento (quando houver)
        bot_token: Token do bot instalado no workspace
        client: Cliente da Web API vinculado ao bot_token
        assigns: Dados adicionados por middleware
        halted: Pipeline interrompido; handlers não devem rodar
    """

    team_id: str
    bot_token: str
    client: SlackApiClientProtocol | None = None
    user_id: str | None = None
    channel_id: str | None = None
    assigns: Mapping[str, Any] = field(default_factory=dict)
    halted: bool = False

    def __post_init__(self) -> None:
        # Congela assigns para que nenhum middleware altere o contexto in place
        object.__setattr__(self, "assigns", MappingProxyType(dict(self.assigns)))

    def assign(self, key: str, value: Any) -> ExecutionContext:
        """Retorna novo contexto com `key` definido em assigns."""
        return replace(self, assigns={**self.assigns, key: value})

    def halt(self) -> ExecutionContext:
        """Retorna novo contexto marcado como interrompido."""
        return replace(self, halted=True)
