"""Ingestão de mensagens recebidas em conversas existentes.

Endpoints:
- POST /conversations/{conversation_id}/messages: registra o wamid de uma
  mensagem recebida; o `messageId` retornado alimenta start/stopTypingIndicator
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Header, status
from fastapi.responses import JSONResponse

from api.routes.actions.router import CORRELATION_HEADER, error_response, status_for_error
from app.bootstrap import get_action_registry
from app.observability import generate_correlation_id
from app.use_cases.whatsapp.registry import ActionRegistry
from utils.errors import ActionError

router = APIRouter()


@router.post("/{conversation_id}/messages")
async def record_inbound_message(
    conversation_id: str,
    registry: Annotated[ActionRegistry, Depends(get_action_registry)],
    payload: Annotated[dict[str, Any] | None, Body()] = None,
    correlation_id: Annotated[str | None, Header(alias=CORRELATION_HEADER)] = None,
) -> JSONResponse:
    """Registra mensagem recebida e retorna seu ID interno."""
    correlation_id = correlation_id or generate_correlation_id()
    try:
        result = await registry.record_inbound_message(
            conversation_id,
            payload or {},
            correlation_id=correlation_id,
        )
    except ActionError as exc:
        return error_response(exc.code, str(exc), status_for_error(exc), correlation_id)

    return JSONResponse(
        content={"result": result},
        status_code=status.HTTP_201_CREATED,
        headers={CORRELATION_HEADER: correlation_id},
    )
