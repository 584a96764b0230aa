"""Stores em memória para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

import asyncio
import uuid

from app.protocols.conversation_store import ConversationStoreProtocol
from app.protocols.models import Conversation, InboundMessageRecord


class MemoryConversationStore(ConversationStoreProtocol):
    """Store de conversas em memória, idempotente por par remetente/destinatário."""

    def __init__(self) -> None:
        self._conversations: dict[str, Conversation] = {}
        self._by_pair: dict[tuple[str, str], str] = {}
        self._messages: dict[str, InboundMessageRecord] = {}
        self._lock = asyncio.Lock()

    async def get_or_create_conversation(
        self,
        sender_id: str,
        recipient_id: str,
        tags: dict[str, str],
    ) -> Conversation:
        async with self._lock:
            existing_id = self._by_pair.get((sender_id, recipient_id))
            if existing_id is not None:
                return self._conversations[existing_id]

            conversation = Conversation(
                id=uuid.uuid4().hex,
                sender_id=sender_id,
                recipient_id=recipient_id,
                tags=dict(tags),
            )
            self._conversations[conversation.id] = conversation
            self._by_pair[(sender_id, recipient_id)] = conversation.id
            return conversation

    async def get_conversation(self, conversation_id: str) -> Conversation | None:
        return self._conversations.get(conversation_id)

    async def get_message(self, message_id: str) -> InboundMessageRecord | None:
        return self._messages.get(message_id)

    async def record_inbound_message(
        self,
        conversation_id: str,
        external_id: str,
    ) -> InboundMessageRecord:
        record = InboundMessageRecord(
            id=uuid.uuid4().hex,
            conversation_id=conversation_id,
            external_id=external_id,
        )
        self._messages[record.id] = record
        return record

    def clear(self) -> None:
        """Limpa store (útil para testes)."""
        self._conversations.clear()
        self._by_pair.clear()
        self._messages.clear()
