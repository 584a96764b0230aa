"""Protocolo do store de conversas (colaborador externo).

Invariantes:
    - get_or_create_conversation é idempotente por (sender_id, recipient_id)
    - conversas nunca são removidas por este núcleo
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Conversation, InboundMessageRecord


class ConversationStoreProtocol(ABC):
    """Contrato de lookup/criação de conversas e mensagens recebidas."""

    @abstractmethod
    async def get_or_create_conversation(
        self,
        sender_id: str,
        recipient_id: str,
        tags: dict[str, str],
    ) -> Conversation:
        """Retorna a conversa do par, criando-a no primeiro contato.

        Raises:
            ConversationStoreError: Erro de persistência
        """

    @abstractmethod
    async def get_conversation(self, conversation_id: str) -> Conversation | None:
        """Recupera conversa existente pelo ID."""

    @abstractmethod
    async def get_message(self, message_id: str) -> InboundMessageRecord | None:
        """Recupera mensagem recebida pelo ID da plataforma."""

    @abstractmethod
    async def record_inbound_message(
        self,
        conversation_id: str,
        external_id: str,
    ) -> InboundMessageRecord:
        """Registra mensagem recebida (alimentado pela ingestão de webhook)."""


class ConversationStoreError(Exception):
    """Erro de persistência em ConversationStore."""
