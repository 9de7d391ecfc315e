"""
Eventos Slack tipados: união fechada de quatro variantes.

Cada variante é imutável e construída pelo normalizer
(api/normalizers/slack) a partir do payload bruto do webhook.

Variantes:
    - BackgroundEvent: callbacks da Events API (app_home_opened, message, ...)
    - Command: slash commands
    - Action: interações block_actions (botões)
    - ViewSubmission: submissão de modais
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeAlias


@dataclass(frozen=True, slots=True)
class BackgroundEvent:
    """
    Notificação assíncrona da Events API.

    Attributes:
        type: Tipo do evento (ex: 'message', 'app_home_opened')
        user_id: Usuário que originou o evento
        channel_id: Canal do evento
        ts: Timestamp do evento (`ts`, com fallback para `event_ts`)
        tab: Aba do App Home (app_home_opened)
        view: View publicada no App Home
        text: Texto da mensagem
    """

    type: str
    user_id: str | None = None
    channel_id: str | None = None
    ts: str | None = None
    tab: str | None = None
    view: dict[str, Any] | None = None
    text: str | None = None

    @property
    def identifier(self) -> str:
        return self.type


@dataclass(frozen=True, slots=True)
class Command:
    """Slash command (ex: `/deploy staging`)."""

    command: str
    text: str = ""
    user_id: str | None = None
    user_name: str | None = None
    channel_id: str | None = None
    channel_name: str | None = None
    team_id: str | None = None
    team_domain: str | None = None
    response_url: str | None = None
    trigger_id: str | None = None

    @property
    def identifier(self) -> str:
        return self.command


@dataclass(frozen=True, slots=True)
class ButtonAction:
    """
    Elemento de ação do tipo botão.

    Attributes:
        type: Sempre 'button'
        action_id: Identificador da ação definido no bloco
        block_id: Bloco que contém o botão
        action_ts: Momento do clique
        value: Valor associado ao botão
        text: Objeto de texto exibido no botão
        url: URL do botão (botões de link)
    """

    type: str
    action_id: str
    block_id: str | None = None
    action_ts: str | None = None
    value: str | None = None
    text: dict[str, Any] | None = None
    url: str | None = None


# Novos elementos (static_select, overflow, ...) entram nesta união.
ActionElement: TypeAlias = ButtonAction


@dataclass(frozen=True, slots=True)
class Action:
    """
    Interação block_actions.

    `action` é None quando o elemento ainda não tem parser
    (tipo reconhecido pelo Slack mas não implementado aqui).
    """

    type: str
    user_id: str | None
    channel_id: str | None = None
    action: ActionElement | None = None
    trigger_id: str | None = None
    container: dict[str, Any] | None = None
    view: dict[str, Any] | None = None

    @property
    def identifier(self) -> str:
        if self.action is None:
            return self.type
        return self.action.action_id


@dataclass(frozen=True, slots=True)
class ViewSubmission:
    """
    Submissão de modal (view_submission).

    Attributes:
        type: Sempre 'view_submission'
        user_id: Usuário que submeteu
        team_id: Workspace
        callback_id: callback_id da view
        view: View bruta
        form: Valores do formulário achatados (action_id -> valor)
        trigger_id: Trigger para abrir nova view
        response_urls: Descritores de response_url configurados na view
    """

    type: str
    user_id: str | None
    team_id: str | None
    callback_id: str | None
    view: dict[str, Any]
    form: dict[str, Any] = field(default_factory=dict)
    trigger_id: str | None = None
    response_urls: tuple[dict[str, Any], ...] = ()

    @property
    def channel_id(self) -> None:
        """Submissões de modal não carregam canal."""
        return None

    @property
    def identifier(self) -> str:
        return self.callback_id or self.type


SlackEvent: TypeAlias = BackgroundEvent | Command | Action | ViewSubmission

EVENT_TYPES: tuple[type, ...] = (BackgroundEvent, Command, Action, ViewSubmission)
