"""Use cases de template: iniciar conversa e enviar template em conversa existente."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.whatsapp.template import (
    build_template_message,
    parse_template_variables,
)
from app.protocols.models import ConversationResult
from app.use_cases.whatsapp._action_base import ActionUseCase

if TYPE_CHECKING:
    from app.protocols.models import SendTemplateMessageInput, StartConversationInput


def _template_subject(payload: dict[str, Any]) -> str:
    template = payload["template"]
    return (
        f'enviar template WhatsApp "{template["name"]}" '
        f'no idioma "{template["language"]["code"]}"'
    )


class StartConversationUseCase(ActionUseCase):
    """Inicia conversa proativa com um usuário via Message Template."""

    async def execute(self, request: StartConversationInput) -> ConversationResult:
        """Valida, resolve identidade e conversa, e envia o template.

        Raises:
            ValidationError: Variáveis do template inválidas
            ConfigurationError: Sem remetente ou credencial
            DispatchError: Envio rejeitado pela rede
        """
        # Payload validado antes da identidade: input inválido nunca toca o estado
        payload = build_template_message(
            request.template_name,
            parse_template_variables(request.template_variables_json),
            language=request.template_language or self._settings.default_template_language,
        )

        sender_id = await self._identity.resolve_sender_id(request.sender_id)
        dispatcher = await self._open_dispatcher()
        conversation = await self._conversations.get_or_create(sender_id, request.user_phone)

        await dispatcher.dispatch(
            sender_id,
            request.user_phone,
            payload,
            subject=_template_subject(payload),
            log_extra={"sender_id": sender_id, "template_name": request.template_name},
        )
        return ConversationResult(conversation_id=conversation.id)


class SendTemplateMessageUseCase(ActionUseCase):
    """Envia template em uma conversa já existente."""

    async def execute(self, request: SendTemplateMessageInput) -> ConversationResult:
        # Payload validado antes da identidade: input inválido nunca toca o estado
        payload = build_template_message(
            request.template_name,
            parse_template_variables(request.template_variables_json),
            language=request.template_language or self._settings.default_template_language,
        )

        conversation = await self._conversations.get_existing(request.conversation_id)
        dispatcher = await self._open_dispatcher()

        await dispatcher.dispatch(
            conversation.sender_id,
            conversation.recipient_id,
            payload,
            subject=_template_subject(payload),
            log_extra={
                "sender_id": conversation.sender_id,
                "conversation_id": conversation.id,
                "template_name": request.template_name,
            },
        )
        return ConversationResult(conversation_id=conversation.id)
