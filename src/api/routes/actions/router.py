"""Endpoints de invocação de actions pela plataforma hospedeira.

Endpoints:
- GET /actions: lista as actions registradas
- POST /actions/{action_name}: executa uma action com input JSON (camelCase)

Cada erro de action vira resposta `{"error": {"code", "message"}}` com
status HTTP correspondente; o erro já foi logado no ponto de origem.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Header, status
from fastapi.responses import JSONResponse

from app.bootstrap import get_action_registry
from app.observability import generate_correlation_id
from app.use_cases.whatsapp.registry import ActionRegistry, UnknownActionError
from utils.errors import (
    ActionError,
    ConfigurationError,
    DispatchError,
    PolicyError,
    ValidationError,
)

logger = logging.getLogger(__name__)

router = APIRouter()

CORRELATION_HEADER = "x-correlation-id"

_STATUS_BY_ERROR: dict[type[ActionError], int] = {
    ValidationError: 422,
    PolicyError: status.HTTP_403_FORBIDDEN,
    ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    DispatchError: status.HTTP_502_BAD_GATEWAY,
}


def error_response(
    code: str,
    message: str,
    status_code: int,
    correlation_id: str,
) -> JSONResponse:
    return JSONResponse(
        content={"error": {"code": code, "message": message}},
        status_code=status_code,
        headers={CORRELATION_HEADER: correlation_id},
    )


def status_for_error(error: ActionError) -> int:
    """Status HTTP para um erro de action (500 para tipos não mapeados)."""
    for error_type, status_code in _STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


@router.get("")
async def list_actions() -> dict[str, list[str]]:
    """Lista nomes das actions disponíveis."""
    return {"actions": ActionRegistry.action_names()}


@router.post("/{action_name}")
async def invoke_action(
    action_name: str,
    registry: Annotated[ActionRegistry, Depends(get_action_registry)],
    payload: Annotated[dict[str, Any] | None, Body()] = None,
    correlation_id: Annotated[str | None, Header(alias=CORRELATION_HEADER)] = None,
) -> JSONResponse:
    """Executa a action e retorna o resultado serializado."""
    correlation_id = correlation_id or generate_correlation_id()
    try:
        result = await registry.invoke(
            action_name,
            payload or {},
            correlation_id=correlation_id,
        )
    except UnknownActionError:
        logger.warning("action_not_found", extra={"action": action_name})
        return error_response(
            "ACTION_NOT_FOUND",
            f"Action desconhecida: {action_name}",
            status.HTTP_404_NOT_FOUND,
            correlation_id,
        )
    except ActionError as exc:
        return error_response(exc.code, str(exc), status_for_error(exc), correlation_id)

    return JSONResponse(
        content={"result": result},
        headers={CORRELATION_HEADER: correlation_id},
    )
