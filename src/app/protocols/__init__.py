"""Protocolos e contratos do core da aplicação."""

from .api_client import SlackApiClientProtocol
from .credential_store import AsyncCredentialStoreProtocol
from .task_executor import TaskExecutorProtocol

__all__ = [
    "AsyncCredentialStoreProtocol",
    "SlackApiClientProtocol",
    "TaskExecutorProtocol",
]
