"""Helper único de falha: loga e levanta o erro tipado."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NoReturn

if TYPE_CHECKING:
    import logging

    from .exceptions import ActionError


def raise_logged(
    logger: logging.Logger,
    error: ActionError,
    extra: dict[str, Any] | None = None,
) -> NoReturn:
    """Loga o erro em nível ERROR e em seguida o levanta.

    O log precede a propagação para que o operador observe a tentativa
    mesmo quando o chamador não trata o erro.

    Args:
        logger: Logger do módulo chamador
        error: Erro já construído com a mensagem final
        extra: Contexto estruturado adicional (sem PII)

    Raises:
        ActionError: Sempre, o próprio `error`.
    """
    logger.error(str(error), extra={**(extra or {}), "error_code": error.code})
    raise error
