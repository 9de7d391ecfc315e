"""
Estágios do ciclo de vida de um dispatch de evento Slack.

Cada request inbound percorre os estágios em ordem fixa; qualquer
falha leva ao estado terminal FAILED.
"""

from enum import StrEnum


class DispatchStage(StrEnum):
    """
    Estágios canônicos de um dispatch.

    Estágios não-terminais:
        - AUTHENTICATING: Verificando assinatura e frescor do request
        - NORMALIZING: Convertendo payload bruto em evento tipado
        - CONTEXT_BUILDING: Resolvendo bot token e montando ExecutionContext
        - MIDDLEWARE_RUNNING: Executando pipeline de middleware
        - HANDLER_RUNNING: Executando handlers registrados

    Estágios terminais:
        - RESPONDED: Dispatch concluído (sync respondido ou async agendado)
        - FAILED: Falha em algum estágio
    """

    AUTHENTICATING = "AUTHENTICATING"
    NORMALIZING = "NORMALIZING"
    CONTEXT_BUILDING = "CONTEXT_BUILDING"
    MIDDLEWARE_RUNNING = "MIDDLEWARE_RUNNING"
    HANDLER_RUNNING = "HANDLER_RUNNING"

    RESPONDED = "RESPONDED"
    FAILED = "FAILED"

    def __str__(self) -> str:
        return self.value


TERMINAL_STAGES: frozenset[DispatchStage] = frozenset({
    DispatchStage.RESPONDED,
    DispatchStage.FAILED,
})

DEFAULT_INITIAL_STAGE: DispatchStage = DispatchStage.AUTHENTICATING


def is_terminal(stage: DispatchStage) -> bool:
    """Verifica se o estágio encerra o dispatch."""
    return stage in TERMINAL_STAGES
