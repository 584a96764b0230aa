"""Agregador de settings base."""

from __future__ import annotations

from config.settings.base.core import (
    BaseSettings,
    ConversationStoreBackend,
    Environment,
    get_base_settings,
)

__all__ = [
    "BaseSettings",
    "ConversationStoreBackend",
    "Environment",
    "get_base_settings",
]
