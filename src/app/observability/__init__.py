"""Observabilidade — contexto de invocação injetado nos logs estruturados.

Uso:
    from app.observability import action_scope, get_correlation_id
"""

from app.observability.correlation import (
    action_scope,
    generate_correlation_id,
    get_action_name,
    get_correlation_id,
)

__all__ = [
    "action_scope",
    "generate_correlation_id",
    "get_action_name",
    "get_correlation_id",
]
