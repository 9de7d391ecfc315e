"""Factory do runtime Slack: conecta stores, registry e dispatcher.

Uso:
    runtime = create_slack_runtime()
    result = await runtime.use_case.execute(payload=..., team_id=...)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING

from api.connectors.slack.http_client import create_slack_api_client
from api.normalizers.slack import SlackEventNormalizer
from app.infra.stores import MemoryCredentialStore, RedisCredentialStore
from app.services.task_supervisor import TaskSupervisor
from app.use_cases.slack import ProcessInboundEventUseCase
from config.settings import get_credential_settings, get_slack_settings
from events.context_builder import ContextBuilder
from events.dispatcher import Dispatcher
from events.registry import SlackApp, load_slack_app

if TYPE_CHECKING:
    from app.protocols import AsyncCredentialStoreProtocol, TaskExecutorProtocol
    from config.settings import CredentialSettings, SlackSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SlackRuntime:
    """Dependências de um processo servindo o endpoint de eventos."""

    settings: SlackSettings
    slack_app: SlackApp
    credential_store: AsyncCredentialStoreProtocol
    executor: TaskExecutorProtocol
    use_case: ProcessInboundEventUseCase


def create_credential_store(
    settings: CredentialSettings | None = None,
) -> AsyncCredentialStoreProtocol:
    """Memory (com tokens semente) ou Redis, conforme SLACK_CREDENTIAL_BACKEND."""
    credentials = settings or get_credential_settings()
    if credentials.backend == "redis":
        from app.bootstrap.clients import create_async_redis_client

        return RedisCredentialStore(create_async_redis_client())

    logger.info(
        "memory_credential_store_selected",
        extra={"component": "bootstrap", "seeded_teams": len(credentials.seed_tokens)},
    )
    return MemoryCredentialStore(credentials.seed_tokens)


def resolve_slack_app(settings: SlackSettings | None = None) -> SlackApp:
    """Carrega o SlackApp de SLACK_APP_MODULE; vazio quando não configurado."""
    slack = settings or get_slack_settings()
    if not slack.app_module:
        logger.warning(
            "slack_app_not_configured",
            extra={"component": "bootstrap", "env": "SLACK_APP_MODULE"},
        )
        return SlackApp()
    return load_slack_app(slack.app_module)


def create_slack_runtime(
    *,
    settings: SlackSettings | None = None,
    slack_app: SlackApp | None = None,
    credential_store: AsyncCredentialStoreProtocol | None = None,
    executor: TaskExecutorProtocol | None = None,
) -> SlackRuntime:
    """Monta o runtime; dependências omitidas vêm das settings."""
    slack = settings or get_slack_settings()
    app = slack_app if slack_app is not None else resolve_slack_app(slack)
    store = credential_store if credential_store is not None else create_credential_store()
    task_executor = executor or TaskSupervisor(slack.async_max_concurrency)

    use_case = ProcessInboundEventUseCase(
        normalizer=SlackEventNormalizer(),
        context_builder=ContextBuilder(
            store,
            client_factory=partial(create_slack_api_client, settings=slack),
        ),
        dispatcher=Dispatcher(app, task_executor),
    )
    logger.info(
        "slack_runtime_created",
        extra={
            "component": "bootstrap",
            "middleware_count": len(app.middleware_list()),
            "handler_count": len(app.handler_list()),
            "executor": type(task_executor).__name__,
        },
    )
    return SlackRuntime(
        settings=slack,
        slack_app=app,
        credential_store=store,
        executor=task_executor,
        use_case=use_case,
    )
