"""Helpers de logging para API Meta/WhatsApp (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .meta_errors import WhatsAppApiError

logger = logging.getLogger(__name__)


def log_meta_error(meta_error: WhatsAppApiError, operation: str, sender_id: str) -> None:
    """Loga erro da Meta sem expor tokens ou telefones."""
    logger.warning(
        "meta_api_error",
        extra={
            "operation": operation,
            "sender_id": sender_id,
            "error_type": meta_error.error_type,
            "error_code": meta_error.error_code,
            "is_permanent": meta_error.is_permanent,
        },
    )


def log_success(operation: str, sender_id: str, status_code: int) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "meta_api_success",
        extra={
            "operation": operation,
            "sender_id": sender_id,
            "status_code": status_code,
        },
    )
