"""
Contrato de handlers e helpers de resposta.

Handlers implementam uma ou ambas as capacidades:
    - handle_sync(event, context): payloads interativos (comandos, ações,
      submissões de modal). Pode retornar corpo de resposta.
    - handle_async(event, context): callbacks da Events API. Executado
      em background, sem resposta ao Slack.

A capacidade não implementada retorna NOT_IMPLEMENTED, que o dispatcher
trata como ausência (loga em debug e segue para o próximo handler).

Exemplo:
    class HelpCommand(EventHandler):
        async def handle_sync(self, event, context):
            if isinstance(event, Command) and event.command == "/help":
                return ack("Use /deploy <ambiente>")
            return IGNORE
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from events.types.results import NOT_IMPLEMENTED, HandlerResult, Respond

if TYPE_CHECKING:
    from collections.abc import Awaitable

    from events.types.context import ExecutionContext
    from events.types.payloads import SlackEvent


class EventHandler:
    """Base opcional para handlers; ambas as capacidades são opcionais."""

    def handle_sync(
        self, event: SlackEvent, context: ExecutionContext
    ) -> HandlerResult | Awaitable[HandlerResult]:
        return NOT_IMPLEMENTED

    def handle_async(
        self, event: SlackEvent, context: ExecutionContext
    ) -> HandlerResult | Awaitable[HandlerResult]:
        return NOT_IMPLEMENTED


def ack(text: str | None = None) -> Respond:
    """Confirma um payload interativo.

    Sem argumento: HTTP 200 com corpo vazio.
    Com texto: HTTP 200 com {"text": text}.
    """
    if text is None:
        return Respond(None)
    return Respond({"text": text})


def _require_client(context: ExecutionContext) -> Any:
    if context.client is None:
        raise RuntimeError("ExecutionContext sem client Slack configurado")
    return context.client


async def say(context: ExecutionContext, **arguments: Any) -> dict[str, Any]:
    """Envia mensagem ao canal do evento (chat.postMessage)."""
    return await _require_client(context).chat_post_message(context.channel_id, **arguments)


async def reply(
    context: ExecutionContext, thread_ts: str, **arguments: Any
) -> dict[str, Any]:
    """Responde em thread no canal do evento."""
    return await say(context, thread_ts=thread_ts, **arguments)


async def publish_home(context: ExecutionContext, view: dict[str, Any]) -> dict[str, Any]:
    """Publica view no App Home do usuário do evento (views.publish)."""
    return await _require_client(context).views_publish(context.user_id, view)


async def open_modal(
    context: ExecutionContext, trigger_id: str, view: dict[str, Any]
) -> dict[str, Any]:
    """Abre modal (views.open). O trigger_id expira em ~3 segundos."""
    return await _require_client(context).views_open(trigger_id, view)


async def update_message(
    context: ExecutionContext, ts: str, *, channel: str | None = None, **arguments: Any
) -> dict[str, Any]:
    """Atualiza mensagem existente (chat.update)."""
    return await _require_client(context).chat_update(
        channel or context.channel_id, ts, **arguments
    )
