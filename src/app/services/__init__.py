"""Serviços de aplicação.

Resolução de identidade de envio e de conversa (sem IO direto);
implementações concretas de IO ficam em app/infra/.
"""

from app.services.conversation_resolver import ConversationResolver
from app.services.identity_resolver import IdentityResolver

__all__ = [
    "ConversationResolver",
    "IdentityResolver",
]
