"""Contexto de invocação de action (correlation_id e nome da action).

Usa ContextVar para ser async-safe: invocações concorrentes não
compartilham contexto.

Uso:
    from app.observability import action_scope, get_correlation_id

    with action_scope("startFlow"):
        ...  # todos os logs carregam correlation_id e action
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")
_action_name: ContextVar[str] = ContextVar("action_name", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (vazio se não definido)."""
    return _correlation_id.get()


def get_action_name() -> str:
    """Retorna o nome da action em execução (vazio fora de uma action)."""
    return _action_name.get()


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4)."""
    return str(uuid.uuid4())


@contextmanager
def action_scope(action: str, correlation_id: str | None = None) -> Iterator[str]:
    """Define action e correlation_id durante uma invocação.

    Args:
        action: Nome da action (ex: "startConversation")
        correlation_id: ID recebido do chamador; gera novo se None.

    Yields:
        correlation_id efetivo da invocação.
    """
    value = correlation_id or generate_correlation_id()
    correlation_token = _correlation_id.set(value)
    action_token = _action_name.set(action)
    try:
        yield value
    finally:
        _action_name.reset(action_token)
        _correlation_id.reset(correlation_token)
