"""Use case de início de WhatsApp Flow."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.payload_builders.whatsapp.flow import build_flow_message, resolve_flow_descriptor
from app.protocols.models import ConversationResult
from app.use_cases.whatsapp._action_base import ActionUseCase
from utils.errors import PolicyError, raise_logged

if TYPE_CHECKING:
    from app.protocols.models import FlowDescriptor, StartFlowInput

logger = logging.getLogger(__name__)


def _flow_subject(descriptor: FlowDescriptor) -> str:
    return (
        f'iniciar Flow WhatsApp com flowId "{descriptor.flow_id}" '
        f'flowName "{descriptor.flow_name}" e action "{descriptor.action_name}"'
    )


class StartFlowUseCase(ActionUseCase):
    """Envia mensagem interativa que abre um Flow para o usuário."""

    async def execute(self, request: StartFlowInput) -> ConversationResult:
        """Aplica política, valida o Flow, resolve identidade e conversa e envia.

        Raises:
            PolicyError: Integração em modo sandbox
            ValidationError: Descritor de Flow inválido
            ConfigurationError: Sem remetente ou credencial
            DispatchError: Envio rejeitado pela rede
        """
        # Flows consomem recursos cobrados da conta sandbox compartilhada
        if self._settings.is_sandbox:
            raise_logged(
                logger,
                PolicyError("Iniciar um Flow não é suportado no modo sandbox"),
            )

        # Payload validado antes da identidade: input inválido nunca toca o estado
        descriptor = resolve_flow_descriptor(request.flow)
        payload = build_flow_message(request.body_text, descriptor)

        sender_id = await self._identity.resolve_sender_id(request.sender_id)
        dispatcher = await self._open_dispatcher()
        conversation = await self._conversations.get_or_create(sender_id, request.user_phone)

        await dispatcher.dispatch(
            sender_id,
            request.user_phone,
            payload,
            subject=_flow_subject(descriptor),
            log_extra={
                "sender_id": sender_id,
                "flow_id": descriptor.flow_id,
                "flow_name": descriptor.flow_name,
                "flow_action": descriptor.action_name,
            },
        )
        return ConversationResult(conversation_id=conversation.id)
