"""Factories de dependências — criação de implementações concretas.

Centraliza a escolha de store de conversas, estado da integração e
cliente de mensageria conforme as settings de ambiente.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.whatsapp import create_whatsapp_http_client
from app.bootstrap.clients import create_async_redis_client
from app.infra.state import RedisIntegrationState, SettingsIntegrationState
from app.infra.stores import MemoryConversationStore, RedisConversationStore
from app.use_cases.whatsapp._action_base import ActionDependencies
from app.use_cases.whatsapp.registry import ActionRegistry
from config.settings import get_base_settings, get_whatsapp_settings

if TYPE_CHECKING:
    from app.protocols.conversation_store import ConversationStoreProtocol
    from app.protocols.integration_state import IntegrationStateProtocol
    from app.protocols.messaging_client import MessagingClientProtocol
    from config.settings import BaseSettings, WhatsAppSettings

logger = logging.getLogger(__name__)


def create_conversation_store(
    base: BaseSettings | None = None,
) -> ConversationStoreProtocol:
    """Cria store de conversas baseado na configuração.

    CONVERSATION_STORE_BACKEND:
    - "memory": MemoryConversationStore (dev only)
    - "redis": RedisConversationStore (staging/production)
    """
    base = base or get_base_settings()
    backend = base.conversation_store_backend

    if backend == "redis":
        store: ConversationStoreProtocol = RedisConversationStore(create_async_redis_client())
        logger.info("conversation_store_created", extra={"backend": "redis"})
        return store

    if backend == "memory":
        if not base.is_development:
            logger.warning(
                "memory_store_in_non_dev",
                extra={"backend": "memory", "environment": base.environment},
            )
        store = MemoryConversationStore()
        logger.info("conversation_store_created", extra={"backend": "memory"})
        return store

    msg = f"CONVERSATION_STORE_BACKEND inválido: {backend}"
    raise ValueError(msg)


def create_integration_state(
    whatsapp: WhatsAppSettings | None = None,
    base: BaseSettings | None = None,
) -> IntegrationStateProtocol:
    """Estado da integração: Redis com fallback para settings, ou só settings."""
    whatsapp = whatsapp or get_whatsapp_settings()
    base = base or get_base_settings()
    from_settings = SettingsIntegrationState(whatsapp)

    if base.conversation_store_backend == "redis":
        return RedisIntegrationState(create_async_redis_client(), fallback=from_settings)
    return from_settings


def create_action_registry() -> ActionRegistry:
    """Conecta colaboradores concretos ao registry de actions."""
    whatsapp = get_whatsapp_settings()

    def client_factory(access_token: str) -> MessagingClientProtocol:
        return create_whatsapp_http_client(access_token, whatsapp)

    deps = ActionDependencies(
        integration_state=create_integration_state(whatsapp),
        conversation_store=create_conversation_store(),
        client_factory=client_factory,
        settings=whatsapp,
    )
    logger.info(
        "action_registry_created",
        extra={"configuration_type": whatsapp.configuration_type},
    )
    return ActionRegistry(deps)
