"""Agregador de settings do serviço de actions WhatsApp.

Re-exporta as settings de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    ConversationStoreBackend,
    Environment,
    get_base_settings,
)

# Channel-specific settings
from config.settings.whatsapp import (
    DEFAULT_TEMPLATE_LANGUAGE,
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    ConfigurationType,
    WhatsAppSettings,
    get_whatsapp_settings,
)

__all__ = [
    # Constants
    "DEFAULT_TEMPLATE_LANGUAGE",
    "GRAPH_API_BASE_URL",
    "GRAPH_API_VERSION",
    # Base
    "BaseSettings",
    "ConfigurationType",
    "ConversationStoreBackend",
    "Environment",
    # Channels
    "WhatsAppSettings",
    "get_base_settings",
    "get_whatsapp_settings",
]
