"""Redis Conversation Store — conversas e mensagens recebidas em Redis.

A criação é idempotente por par (remetente, destinatário) via SET NX
na chave do par. O registro da conversa é gravado antes da disputa
pelo par, então o vencedor sempre aponta para um registro existente.

Contrato de Keys:
    conversation:pair:<sha256> -> ID da conversa (telefones nunca em key)
    conversation:<id>          -> JSON da conversa
    message:<id>               -> JSON da mensagem recebida
"""

from __future__ import annotations

import hashlib
import json
import logging
import uuid
from typing import TYPE_CHECKING, Any

from redis.exceptions import RedisError

from app.protocols.conversation_store import (
    ConversationStoreError,
    ConversationStoreProtocol,
)
from app.protocols.models import Conversation, InboundMessageRecord

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

logger = logging.getLogger(__name__)

CONVERSATION_PREFIX = "conversation:"
PAIR_PREFIX = f"{CONVERSATION_PREFIX}pair:"
MESSAGE_PREFIX = "message:"


def _pair_hash(sender_id: str, recipient_id: str) -> str:
    return hashlib.sha256(f"{sender_id}:{recipient_id}".encode()).hexdigest()


def _decode(value: bytes | str | None) -> str | None:
    if value is None:
        return None
    return value.decode("utf-8") if isinstance(value, bytes) else value


class RedisConversationStore(ConversationStoreProtocol):
    """Store de conversas usando Redis assíncrono (Upstash compatível).

    Args:
        async_redis_client: Cliente Redis assíncrono
    """

    def __init__(self, async_redis_client: AsyncRedis[bytes]) -> None:
        self._redis = async_redis_client

    async def get_or_create_conversation(
        self,
        sender_id: str,
        recipient_id: str,
        tags: dict[str, str],
    ) -> Conversation:
        pair_key = f"{PAIR_PREFIX}{_pair_hash(sender_id, recipient_id)}"
        try:
            existing_id = _decode(await self._redis.get(pair_key))
            if existing_id is not None:
                return await self._load_conversation(existing_id)

            candidate = Conversation(
                id=uuid.uuid4().hex,
                sender_id=sender_id,
                recipient_id=recipient_id,
                tags=dict(tags),
            )
            await self._redis.set(
                self._conversation_key(candidate.id),
                json.dumps(_conversation_to_dict(candidate)),
            )
            was_set = await self._redis.set(pair_key, candidate.id, nx=True)
            if was_set:
                logger.info(
                    "conversation_created",
                    extra={"conversation_id": candidate.id},
                )
                return candidate

            # Outra requisição venceu a disputa pelo par
            await self._redis.delete(self._conversation_key(candidate.id))
            winner_id = _decode(await self._redis.get(pair_key))
        except RedisError as exc:
            raise ConversationStoreError("Falha ao resolver conversa no Redis") from exc

        if winner_id is None:
            raise ConversationStoreError("Chave do par removida durante criação da conversa")
        return await self._load_conversation(winner_id)

    async def get_conversation(self, conversation_id: str) -> Conversation | None:
        data = await self._get_json(self._conversation_key(conversation_id))
        if data is None:
            return None
        return _conversation_from_dict(data)

    async def get_message(self, message_id: str) -> InboundMessageRecord | None:
        data = await self._get_json(f"{MESSAGE_PREFIX}{message_id}")
        if data is None:
            return None
        return InboundMessageRecord(
            id=data["id"],
            conversation_id=data["conversation_id"],
            external_id=data["external_id"],
        )

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
        payload = {
            "id": record.id,
            "conversation_id": record.conversation_id,
            "external_id": record.external_id,
        }
        try:
            await self._redis.set(f"{MESSAGE_PREFIX}{record.id}", json.dumps(payload))
        except RedisError as exc:
            raise ConversationStoreError("Falha ao registrar mensagem no Redis") from exc
        return record

    def _conversation_key(self, conversation_id: str) -> str:
        return f"{CONVERSATION_PREFIX}{conversation_id}"

    async def _load_conversation(self, conversation_id: str) -> Conversation:
        conversation = await self.get_conversation(conversation_id)
        if conversation is None:
            raise ConversationStoreError(
                f"Registro da conversa ausente para o par (id={conversation_id})"
            )
        return conversation

    async def _get_json(self, key: str) -> dict[str, Any] | None:
        try:
            raw = await self._redis.get(key)
        except RedisError as exc:
            raise ConversationStoreError("Falha ao consultar Redis") from exc
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.error("conversation_store_corrupted_record", extra={"key": key})
            raise ConversationStoreError("Registro inválido no Redis") from exc


def _conversation_to_dict(conversation: Conversation) -> dict[str, Any]:
    return {
        "id": conversation.id,
        "sender_id": conversation.sender_id,
        "recipient_id": conversation.recipient_id,
        "tags": conversation.tags,
    }


def _conversation_from_dict(data: dict[str, Any]) -> Conversation:
    return Conversation(
        id=data["id"],
        sender_id=data["sender_id"],
        recipient_id=data["recipient_id"],
        tags=dict(data.get("tags") or {}),
    )
