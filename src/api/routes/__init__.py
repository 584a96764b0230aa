"""Rotas HTTP da API — adapters de entrada da plataforma hospedeira.

Estrutura:
- routes/actions/: invocação das actions de mensageria
- routes/conversations/: ingestão de mensagens recebidas
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
