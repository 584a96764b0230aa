"""Filters de logging para injeção de contexto da invocação.

Campos injetados:
- correlation_id: ID da invocação de action corrente
- action: Nome da action em execução (vazio fora de uma action)
- service: Nome do serviço
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class ActionContextFilter(logging.Filter):
    """Injeta correlation_id, action e service em cada record de log.

    Valores passados explicitamente via `extra` são preservados.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
        action_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")
        self._get_action = action_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Enriquece o record; nunca descarta."""
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._get_correlation_id()
        if not getattr(record, "action", None):
            record.action = self._get_action()
        record.service = self._service_name
        return True
