"""Chamada uniforme de middleware e handlers síncronos ou assíncronos."""

from __future__ import annotations

import asyncio
import inspect
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


async def invoke_callable(func: Callable[..., Any], *args: Any) -> Any:
    """Aguarda coroutine functions no loop; as demais rodam em asyncio.to_thread.

    Awaitable devolvido por um callable síncrono é aguardado no loop.
    """
    if inspect.iscoroutinefunction(func):
        return await func(*args)

    result = await asyncio.to_thread(func, *args)
    if inspect.isawaitable(result):
        result = await result
    return result
