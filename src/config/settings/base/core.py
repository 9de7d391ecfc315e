"""Settings comuns: ambiente de execução e URL do Redis."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "prod": "production",
    "production": "production",
    "stage": "staging",
    "staging": "staging",
}


@dataclass(frozen=True)
class BaseSettings:
    """ENVIRONMENT e REDIS_URL (store de credenciais em Redis)."""

    environment: Environment = "development"
    redis_url: str = ""

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    def validate(self) -> list[str]:
        if self.environment not in ("development", "staging", "production"):
            return [f"ENVIRONMENT inválido: {self.environment}"]
        return []


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """BaseSettings lido do ambiente; valores desconhecidos caem em development."""
    raw_environment = os.getenv("ENVIRONMENT", "development").strip().lower()
    return BaseSettings(
        environment=_ENVIRONMENT_ALIASES.get(raw_environment, "development"),
        redis_url=os.getenv("REDIS_URL", ""),
    )
