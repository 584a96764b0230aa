"""Use cases de indicador de digitação em conversa existente."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.payload_builders.whatsapp.reaction import build_reaction_message
from app.protocols.models import EmptyResult
from app.use_cases.whatsapp._action_base import ActionUseCase

if TYPE_CHECKING:
    from app.protocols.models import Conversation, InboundMessageRecord, TypingIndicatorInput

logger = logging.getLogger(__name__)


class _TypingIndicatorUseCase(ActionUseCase):
    async def _resolve_target(
        self,
        request: TypingIndicatorInput,
    ) -> tuple[Conversation, InboundMessageRecord]:
        conversation = await self._conversations.get_existing(request.conversation_id)
        message = await self._conversations.get_inbound_message(
            conversation, request.message_id
        )
        return conversation, message


class StartTypingIndicatorUseCase(_TypingIndicatorUseCase):
    """Marca a mensagem como lida e exibe "digitando" ao usuário.

    Com `typing_indicator_emoji` ativo, também reage à mensagem.
    """

    async def execute(self, request: TypingIndicatorInput) -> EmptyResult:
        # Alvo resolvido no store antes de ler a credencial
        conversation, message = await self._resolve_target(request)
        dispatcher = await self._open_dispatcher()

        await dispatcher.mark_as_read(
            conversation.sender_id,
            message.external_id,
            typing_indicator=True,
            subject=f"iniciar indicador de digitação na conversa {conversation.id}",
        )

        if self._settings.typing_indicator_emoji:
            await dispatcher.dispatch(
                conversation.sender_id,
                conversation.recipient_id,
                build_reaction_message(
                    message.external_id, self._settings.typing_indicator_emoji_value
                ),
                subject=f"reagir à mensagem {message.id} na conversa {conversation.id}",
                log_extra={"sender_id": conversation.sender_id},
            )
        return EmptyResult()


class StopTypingIndicatorUseCase(_TypingIndicatorUseCase):
    """Remove a reação de processamento; o "digitando" some sozinho no envio."""

    async def execute(self, request: TypingIndicatorInput) -> EmptyResult:
        # Alvo resolvido no store antes de ler a credencial
        conversation, message = await self._resolve_target(request)

        if not self._settings.typing_indicator_emoji:
            logger.debug(
                "typing_indicator_stop_noop",
                extra={"conversation_id": conversation.id},
            )
            return EmptyResult()

        dispatcher = await self._open_dispatcher()
        await dispatcher.dispatch(
            conversation.sender_id,
            conversation.recipient_id,
            build_reaction_message(message.external_id, ""),
            subject=f"remover reação da mensagem {message.id} na conversa {conversation.id}",
            log_extra={"sender_id": conversation.sender_id},
        )
        return EmptyResult()
