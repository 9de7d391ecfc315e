"""Protocolo de executor de tarefas em background."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Coroutine


class TaskExecutorProtocol(Protocol):
    """Agenda corrotinas isoladas do request que as originou."""

    def submit(self, coroutine: Coroutine[Any, Any, None], *, name: str | None = None) -> Any: ...
