"""
Exceções do motor de eventos Slack.

Hierarquia:
    SlackEventsError
    ├── UnrecognizedPayloadShapeError   (payload não casa com nenhuma variante)
    ├── UnknownTenantError              (workspace sem credencial instalada)
    └── DispatchConfigurationError      (erro de configuração de handlers)
        ├── MultipleRespondersError
        └── NoHandlerRespondedError
"""

from __future__ import annotations


class SlackEventsError(Exception):
    """Erro base do motor de eventos."""


class UnrecognizedPayloadShapeError(SlackEventsError):
    """Payload bruto não corresponde a nenhuma das quatro variantes."""

    def __init__(self, keys: list[str] | None = None) -> None:
        self.keys = sorted(keys or [])
        super().__init__(f"Payload não reconhecido (chaves: {self.keys})")


class UnknownTenantError(SlackEventsError):
    """Nenhum token de bot encontrado para o workspace."""

    def __init__(self, team_id: str | None) -> None:
        self.team_id = team_id
        super().__init__(f"Workspace sem instalação: {team_id}")


class DispatchConfigurationError(SlackEventsError):
    """Handlers registrados violam o contrato de resposta síncrona."""


class MultipleRespondersError(DispatchConfigurationError):
    """Mais de um handler respondeu ao mesmo evento síncrono."""

    def __init__(self, identifier: str, handlers: list[str]) -> None:
        self.identifier = identifier
        self.handlers = handlers
        super().__init__(
            f"Múltiplos handlers responderam a '{identifier}': {', '.join(handlers)}"
        )


class NoHandlerRespondedError(DispatchConfigurationError):
    """Nenhum handler respondeu a um evento síncrono."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"Nenhum handler respondeu a '{identifier}'")
