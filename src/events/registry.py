"""
Registro de middleware e handlers de uma aplicação Slack.

Exemplo:
    slack_app = SlackApp()

    @slack_app.middleware
    def require_user(context, event):
        if context.user_id is None:
            return Halt("anonymous")
        return Continue(context.assign("user", context.user_id))

    slack_app.handler(HomeHandler())

Dispatcher consulta `middleware_list()` e `handler_list()` uma vez por
dispatch; a ordem de registro é a ordem de execução.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from events.pipeline.middleware import Middleware

T = TypeVar("T")


class SlackApp:
    """Lista ordenada de middleware e handlers."""

    def __init__(
        self,
        *,
        middleware: list[Any] | None = None,
        handlers: list[Any] | None = None,
    ) -> None:
        self._middleware: list[Middleware] = list(middleware or [])
        self._handlers: list[Any] = list(handlers or [])

    def middleware(self, func: T) -> T:
        """Registra middleware; utilizável como decorator."""
        self._middleware.append(func)
        return func

    def handler(self, handler: T) -> T:
        """Registra handler (instância ou classe); utilizável como decorator.

        Classes registradas via decorator são instanciadas sem argumentos.
        """
        self._handlers.append(handler() if isinstance(handler, type) else handler)
        return handler

    def middleware_list(self) -> list[Middleware]:
        return list(self._middleware)

    def handler_list(self) -> list[Any]:
        return list(self._handlers)


def load_slack_app(path: str) -> SlackApp:
    """Importa SlackApp a partir de 'pacote.modulo:atributo'.

    Raises:
        ValueError: Caminho mal formado ou atributo não é SlackApp
        ImportError: Módulo não encontrado
    """
    module_name, sep, attribute = path.partition(":")
    if not sep or not module_name or not attribute:
        raise ValueError(f"SLACK_APP_MODULE inválido: {path!r} (esperado 'modulo:atributo')")

    module = importlib.import_module(module_name)
    try:
        app = getattr(module, attribute)
    except AttributeError as exc:
        raise ValueError(f"Atributo '{attribute}' não encontrado em {module_name}") from exc

    if not isinstance(app, SlackApp):
        raise ValueError(f"{path} não é uma instância de SlackApp")
    return app
