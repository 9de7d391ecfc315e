"""Entrypoint do serviço de eventos Slack.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import create_slack_runtime, initialize_app, validate_runtime_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.bootstrap import SlackRuntime

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Monta o runtime Slack (stores, registry, supervisor)

    Shutdown:
    - Aguarda dispatches assíncronos pendentes
    - Fecha conexão Redis
    """
    logger.info("app_starting", extra={"service": "slack-events"})
    validate_runtime_settings()
    if getattr(app.state, "slack_runtime", None) is None:
        app.state.slack_runtime = create_slack_runtime()

    yield

    logger.info("app_shutting_down", extra={"service": "slack-events"})
    runtime: SlackRuntime = app.state.slack_runtime
    drain = getattr(runtime.executor, "drain", None)
    if callable(drain):
        await drain(timeout_seconds=runtime.settings.async_drain_timeout_seconds)

    await runtime.credential_store.aclose()


def create_app(runtime: SlackRuntime | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        runtime: Runtime pré-montado (testes); se None, criado no startup.
    """
    fastapi_app = FastAPI(
        title="slack-events",
        description="Ingestão e dispatch de eventos Slack",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    fastapi_app.state.slack_runtime = runtime

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": "slack-events"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting slack-events in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
