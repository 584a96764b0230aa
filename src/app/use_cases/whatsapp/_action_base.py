"""Dependências compartilhadas pelos use cases de action."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.services.conversation_resolver import ConversationResolver
from app.services.identity_resolver import IdentityResolver
from app.use_cases.whatsapp.dispatch import MessageDispatcher

if TYPE_CHECKING:
    from app.protocols.conversation_store import ConversationStoreProtocol
    from app.protocols.integration_state import IntegrationStateProtocol
    from app.protocols.messaging_client import MessagingClientFactoryProtocol
    from config.settings import WhatsAppSettings


@dataclass(frozen=True, slots=True)
class ActionDependencies:
    """Colaboradores externos injetados pelo composition root."""

    integration_state: IntegrationStateProtocol
    conversation_store: ConversationStoreProtocol
    client_factory: MessagingClientFactoryProtocol
    settings: WhatsAppSettings


class ActionUseCase:
    """Base com resolvers e criação do dispatcher autenticado."""

    def __init__(self, deps: ActionDependencies) -> None:
        self._settings = deps.settings
        self._client_factory = deps.client_factory
        self._identity = IdentityResolver(deps.integration_state)
        self._conversations = ConversationResolver(deps.conversation_store)

    async def _open_dispatcher(self) -> MessageDispatcher:
        """Resolve a credencial e cria dispatcher com cliente autenticado."""
        credential = await self._identity.resolve_credential()
        return MessageDispatcher(self._client_factory(credential))
