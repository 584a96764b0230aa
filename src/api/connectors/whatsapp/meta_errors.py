"""Erros e helpers de parsing para API Meta/WhatsApp."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class WhatsAppApiError:
    """Erro retornado pela API Meta/WhatsApp."""

    error_type: str
    error_code: int
    error_message: str
    is_permanent: bool  # True se erro não é retentável


def is_permanent_error(error_code: int, error_type: str) -> bool:
    """Classifica erro como permanente ou transitório.

    Erros permanentes: 400, 401, 403, 404, 413 e códigos Meta de
    template/flow inexistente ou parâmetro inválido (100, 132xxx).
    Erros transitórios: 429 (rate limit), 500+ e falhas de transporte.
    """
    permanent_codes = {100, 400, 401, 403, 404, 413}
    if error_code in permanent_codes or 132000 <= error_code < 133000:
        return True

    permanent_types = {"OAuthException", "InvalidRequest"}
    return error_type in permanent_types


def parse_meta_error(response_data: dict[str, Any]) -> WhatsAppApiError | None:
    """Extrai informações de erro do response da Meta.

    Args:
        response_data: Dict do response JSON

    Returns:
        WhatsAppApiError se houver erro estruturado, None caso contrário
    """
    error_obj = response_data.get("error")
    if not error_obj or not isinstance(error_obj, dict):
        return None

    error_type = str(error_obj.get("type", "unknown"))
    error_code = error_obj.get("code", 0)
    if not isinstance(error_code, int):
        error_code = 0
    error_message = str(error_obj.get("message", "Erro desconhecido"))

    return WhatsAppApiError(
        error_type=error_type,
        error_code=error_code,
        error_message=error_message,
        is_permanent=is_permanent_error(error_code, error_type),
    )


def transport_error(reason: str, status_code: int | None = None) -> dict[str, Any]:
    """Resposta sintética no formato Meta para falhas sem body de erro."""
    error: dict[str, Any] = {"type": "TransportError", "code": 0, "message": reason}
    if status_code is not None:
        error["http_status"] = status_code
    return {"error": error}
