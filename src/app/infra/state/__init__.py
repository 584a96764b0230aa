"""Leitores do estado persistido da integração (remetente padrão e credencial)."""

from __future__ import annotations

from app.infra.state.redis_state import RedisIntegrationState
from app.infra.state.settings_state import SettingsIntegrationState

__all__ = [
    "RedisIntegrationState",
    "SettingsIntegrationState",
]
