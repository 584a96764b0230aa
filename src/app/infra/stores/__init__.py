"""Stores — implementações concretas de persistência de conversas.

Módulos disponíveis:
    - redis_conversation_store: Store de conversas usando Redis (Upstash)
    - memory_stores: Stores em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.memory_stores import MemoryConversationStore
from app.infra.stores.redis_conversation_store import RedisConversationStore

__all__ = [
    "MemoryConversationStore",
    "RedisConversationStore",
]
