"""Dispatch de payloads já construídos e interpretação da resposta da rede."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.whatsapp.meta_errors import parse_meta_error
from app.protocols.models import DispatchFailure, DispatchOutcome, DispatchSuccess
from utils.errors import DispatchError, raise_logged

if TYPE_CHECKING:
    from app.protocols.messaging_client import MessagingClientProtocol

logger = logging.getLogger(__name__)

ACCEPTED_STATUS = "accepted"


def interpret_response(response: dict[str, Any]) -> DispatchOutcome:
    """Mapeia a resposta do cliente para um desfecho terminal.

    Resposta com campo `error` é falha; qualquer outra é sucesso.
    """
    if "error" in response:
        return DispatchFailure(upstream_error=response["error"])

    messages = response.get("messages")
    first = messages[0] if isinstance(messages, list) and messages else {}
    if not isinstance(first, dict):
        first = {}
    return DispatchSuccess(
        message_id=first.get("id"),
        message_status=first.get("message_status"),
    )


class MessageDispatcher:
    """Envia pelo cliente, uma tentativa por operação, e loga o desfecho.

    `subject` descreve a operação para os logs, ex.:
    'iniciar Flow WhatsApp com flowId "f1" flowName "" e action "navigate"'.
    """

    def __init__(self, client: MessagingClientProtocol) -> None:
        self._client = client

    async def dispatch(
        self,
        sender_id: str,
        recipient_id: str,
        payload: dict[str, Any],
        *,
        subject: str,
        log_extra: dict[str, Any] | None = None,
    ) -> DispatchSuccess:
        """Envia mensagem e retorna o sucesso, ou loga e levanta DispatchError."""
        response = await self._client.send_message(sender_id, recipient_id, payload)
        return self._settle(response, subject, log_extra or {})

    async def mark_as_read(
        self,
        sender_id: str,
        message_external_id: str,
        *,
        typing_indicator: bool,
        subject: str,
    ) -> DispatchSuccess:
        """Read receipt (com indicador de digitação opcional)."""
        response = await self._client.mark_as_read(
            sender_id,
            message_external_id,
            typing_indicator=typing_indicator,
        )
        return self._settle(response, subject, {"sender_id": sender_id})

    def _settle(
        self,
        response: dict[str, Any],
        subject: str,
        log_extra: dict[str, Any],
    ) -> DispatchSuccess:
        outcome = interpret_response(response)

        if isinstance(outcome, DispatchFailure):
            meta_error = parse_meta_error(response)
            if meta_error is not None:
                log_extra = {
                    **log_extra,
                    "meta_error_code": meta_error.error_code,
                    "is_permanent": meta_error.is_permanent,
                }
            error_json = json.dumps(outcome.upstream_error, ensure_ascii=False, default=str)
            raise_logged(
                logger,
                DispatchError(
                    f"Falha ao {subject} - Erro: {error_json}",
                    upstream_error=outcome.upstream_error,
                ),
                extra=log_extra,
            )

        if outcome.message_status and outcome.message_status != ACCEPTED_STATUS:
            logger.warning(
                "dispatch_status_not_accepted",
                extra={**log_extra, "message_status": outcome.message_status},
            )

        logger.info("Sucesso ao %s", subject, extra=log_extra)
        return outcome
