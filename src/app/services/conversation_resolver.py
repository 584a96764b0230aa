"""Resolução da conversa que agrupa as mensagens de um par remetente/destinatário."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NoReturn

from app.protocols.conversation_store import ConversationStoreError
from utils.errors import ConfigurationError, ValidationError, raise_logged

if TYPE_CHECKING:
    from app.protocols.conversation_store import ConversationStoreProtocol
    from app.protocols.models import Conversation, InboundMessageRecord

logger = logging.getLogger(__name__)

# Tags gravadas na conversa para localizar remetente e destinatário depois
SENDER_TAG = "botPhoneNumberId"
RECIPIENT_TAG = "userPhone"


def _store_unavailable(operation: str, exc: ConversationStoreError) -> NoReturn:
    raise_logged(
        logger,
        ConfigurationError(f"Store de conversas indisponível ao {operation} (erro: {exc})"),
    )


class ConversationResolver:
    """Sem cache local: cada action re-resolve no store (create idempotente).

    Falhas do store viram ConfigurationError: exigem intervenção do operador.
    """

    def __init__(self, store: ConversationStoreProtocol) -> None:
        self._store = store

    async def get_or_create(self, sender_id: str, recipient_id: str) -> Conversation:
        """Retorna a conversa do par, criando-a no primeiro contato."""
        try:
            conversation = await self._store.get_or_create_conversation(
                sender_id,
                recipient_id,
                tags={SENDER_TAG: sender_id, RECIPIENT_TAG: recipient_id},
            )
        except ConversationStoreError as exc:
            _store_unavailable("resolver conversa", exc)
        logger.debug(
            "conversation_resolved",
            extra={"conversation_id": conversation.id, "sender_id": sender_id},
        )
        return conversation

    async def get_existing(self, conversation_id: str) -> Conversation:
        """Recupera conversa já existente.

        Raises:
            ValidationError: Conversa inexistente
            ConfigurationError: Store indisponível
        """
        try:
            conversation = await self._store.get_conversation(conversation_id)
        except ConversationStoreError as exc:
            _store_unavailable("buscar conversa", exc)
        if conversation is None:
            raise_logged(
                logger,
                ValidationError(f"Conversa não encontrada: {conversation_id}"),
            )
        return conversation

    async def get_inbound_message(
        self,
        conversation: Conversation,
        message_id: str,
    ) -> InboundMessageRecord:
        """Recupera mensagem recebida que pertence à conversa.

        Raises:
            ValidationError: Mensagem inexistente ou de outra conversa
            ConfigurationError: Store indisponível
        """
        try:
            message = await self._store.get_message(message_id)
        except ConversationStoreError as exc:
            _store_unavailable("buscar mensagem", exc)
        if message is None or message.conversation_id != conversation.id:
            raise_logged(
                logger,
                ValidationError(
                    f"Mensagem {message_id} não encontrada na conversa {conversation.id}"
                ),
            )
        return message

    async def record_inbound_message(
        self,
        conversation_id: str,
        external_id: str,
    ) -> InboundMessageRecord:
        """Registra mensagem recebida (wamid) em conversa existente.

        Raises:
            ValidationError: Conversa inexistente ou wamid vazio
            ConfigurationError: Store indisponível
        """
        if not external_id:
            raise_logged(logger, ValidationError("externalId é obrigatório"))
        conversation = await self.get_existing(conversation_id)
        try:
            message = await self._store.record_inbound_message(conversation.id, external_id)
        except ConversationStoreError as exc:
            _store_unavailable("registrar mensagem", exc)
        logger.debug(
            "inbound_message_recorded",
            extra={"conversation_id": conversation.id, "message_id": message.id},
        )
        return message
