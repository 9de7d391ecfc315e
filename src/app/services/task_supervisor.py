"""Supervisão de tasks assíncronas de dispatch.

Cada dispatch async vira uma asyncio.Task isolada: exceções são logadas
no done callback e nunca chegam ao request nem a tasks irmãs. Sem retry.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Coroutine

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONCURRENCY = 100


class TaskSupervisor:
    """Agenda corrotinas com limite de concorrência e drain no shutdown."""

    def __init__(self, max_concurrency: int = DEFAULT_MAX_CONCURRENCY) -> None:
        self._semaphore = asyncio.Semaphore(max_concurrency)
        self._active_tasks: set[asyncio.Task[Any]] = set()

    @property
    def active_count(self) -> int:
        return len(self._active_tasks)

    def submit(
        self,
        coroutine: Coroutine[Any, Any, None],
        *,
        name: str | None = None,
    ) -> asyncio.Task[None]:
        """Agenda a corrotina e retorna sem aguardar."""
        task = asyncio.create_task(self._run_with_limit(coroutine), name=name)
        self._active_tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    async def _run_with_limit(self, coroutine: Coroutine[Any, Any, None]) -> None:
        async with self._semaphore:
            await coroutine

    def _on_task_done(self, task: asyncio.Task[Any]) -> None:
        self._active_tasks.discard(task)
        with contextlib.suppress(asyncio.CancelledError):
            exc = task.exception()
            if exc is not None:
                logger.error(
                    "async_dispatch_task_failed",
                    exc_info=exc,
                    extra={
                        "task_name": task.get_name(),
                        "error_type": type(exc).__name__,
                        "active_tasks": len(self._active_tasks),
                    },
                )

    async def drain(self, timeout_seconds: float = 30.0) -> int:
        """Aguarda tasks pendentes; cancela as que passarem do timeout.

        Returns:
            Quantidade de tasks canceladas.
        """
        if not self._active_tasks:
            return 0

        pending_now = list(self._active_tasks)
        logger.info(
            "async_dispatch_shutdown_wait",
            extra={"pending_tasks": len(pending_now), "timeout_seconds": timeout_seconds},
        )
        _, pending = await asyncio.wait(pending_now, timeout=timeout_seconds)
        if not pending:
            return 0

        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        logger.warning(
            "async_dispatch_shutdown_cancelled",
            extra={"cancelled_tasks": len(pending)},
        )
        return len(pending)


class InlineExecutor:
    """Executor determinístico para testes: enfileira e executa em `drain()`."""

    def __init__(self) -> None:
        self._queue: list[tuple[str | None, Coroutine[Any, Any, None]]] = []
        self.completed: list[str | None] = []
        self.failures: list[BaseException] = []

    @property
    def pending_count(self) -> int:
        return len(self._queue)

    def submit(
        self,
        coroutine: Coroutine[Any, Any, None],
        *,
        name: str | None = None,
    ) -> None:
        self._queue.append((name, coroutine))

    async def drain(self, timeout_seconds: float = 30.0) -> int:
        """Executa tudo que foi enfileirado, em ordem; falhas são registradas."""
        while self._queue:
            name, coroutine = self._queue.pop(0)
            try:
                await coroutine
            except Exception as exc:
                self.failures.append(exc)
                logger.error(
                    "async_dispatch_task_failed",
                    exc_info=exc,
                    extra={"task_name": name, "error_type": type(exc).__name__},
                )
            else:
                self.completed.append(name)
        return 0
