"""Registro das actions expostas à plataforma hospedeira.

Cada invocação roda em seu próprio contexto de log (correlation_id e
nome da action) e produz exatamente um resultado ou um erro.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from app.observability import action_scope
from app.protocols.models import (
    InboundMessageInput,
    InboundMessageResult,
    SendTemplateMessageInput,
    StartConversationInput,
    StartFlowInput,
    TypingIndicatorInput,
)
from app.services.conversation_resolver import ConversationResolver
from app.use_cases.whatsapp.start_conversation import (
    SendTemplateMessageUseCase,
    StartConversationUseCase,
)
from app.use_cases.whatsapp.start_flow import StartFlowUseCase
from app.use_cases.whatsapp.typing_indicator import (
    StartTypingIndicatorUseCase,
    StopTypingIndicatorUseCase,
)
from utils.errors import ValidationError, raise_logged

if TYPE_CHECKING:
    from app.protocols.models import ActionModel
    from app.use_cases.whatsapp._action_base import ActionDependencies, ActionUseCase

logger = logging.getLogger(__name__)

# Nome usado no contexto de log da ingestão de mensagens recebidas
INGEST_ACTION = "recordInboundMessage"

_ACTIONS: dict[str, tuple[type[ActionModel], type[ActionUseCase]]] = {
    "startConversation": (StartConversationInput, StartConversationUseCase),
    "sendTemplateMessage": (SendTemplateMessageInput, SendTemplateMessageUseCase),
    "startFlow": (StartFlowInput, StartFlowUseCase),
    "startTypingIndicator": (TypingIndicatorInput, StartTypingIndicatorUseCase),
    "stopTypingIndicator": (TypingIndicatorInput, StopTypingIndicatorUseCase),
}


class UnknownActionError(LookupError):
    """Action não registrada."""


def _describe_input_errors(exc: PydanticValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )


class ActionRegistry:
    """Despacha invocações por nome para o use case correspondente."""

    def __init__(self, deps: ActionDependencies) -> None:
        self._deps = deps

    @staticmethod
    def action_names() -> list[str]:
        return list(_ACTIONS)

    async def invoke(
        self,
        action: str,
        raw_input: dict[str, Any],
        *,
        correlation_id: str | None = None,
    ) -> dict[str, Any]:
        """Valida o input, executa a action e serializa o resultado em camelCase.

        Raises:
            UnknownActionError: Nome de action desconhecido
            ActionError: Erro terminal da action (já logado)
        """
        entry = _ACTIONS.get(action)
        if entry is None:
            raise UnknownActionError(action)
        input_model, use_case_cls = entry

        with action_scope(action, correlation_id):
            try:
                request = input_model.model_validate(raw_input)
            except PydanticValidationError as exc:
                raise_logged(
                    logger,
                    ValidationError(
                        f"Input inválido para {action}: {_describe_input_errors(exc)}"
                    ),
                )

            result = await use_case_cls(self._deps).execute(request)  # type: ignore[attr-defined]
            return result.model_dump(by_alias=True)

    async def record_inbound_message(
        self,
        conversation_id: str,
        raw_input: dict[str, Any],
        *,
        correlation_id: str | None = None,
    ) -> dict[str, Any]:
        """Registra mensagem recebida para uso posterior pelo indicador de digitação.

        Raises:
            ActionError: Input inválido, conversa inexistente ou store indisponível
        """
        with action_scope(INGEST_ACTION, correlation_id):
            try:
                request = InboundMessageInput.model_validate(raw_input)
            except PydanticValidationError as exc:
                raise_logged(
                    logger,
                    ValidationError(
                        f"Input inválido para {INGEST_ACTION}: {_describe_input_errors(exc)}"
                    ),
                )

            resolver = ConversationResolver(self._deps.conversation_store)
            message = await resolver.record_inbound_message(
                conversation_id, request.external_id
            )
            return InboundMessageResult(message_id=message.id).model_dump(by_alias=True)
