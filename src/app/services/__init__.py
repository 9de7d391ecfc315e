"""Serviços de aplicação.

Unidades reutilizáveis de orquestração; IO concreto fica em app/infra/.
"""

from app.services.task_supervisor import InlineExecutor, TaskSupervisor

__all__ = [
    "InlineExecutor",
    "TaskSupervisor",
]
