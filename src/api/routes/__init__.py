"""Rotas HTTP da API.

Estrutura:
- routes/slack/: POST /slack/events
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
