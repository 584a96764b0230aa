"""Agregador de rotas — registra health, actions e ingestão de mensagens.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.actions.router import router as actions_router
from api.routes.conversations.router import router as conversations_router
from api.routes.health.router import router as health_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(actions_router, prefix="/actions", tags=["actions"])
    api_router.include_router(
        conversations_router, prefix="/conversations", tags=["conversations"]
    )

    return api_router
