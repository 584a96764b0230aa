"""Estado da integração lido das settings (configuração manual)."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from config.settings import WhatsAppSettings


class SettingsIntegrationState:
    """Remetente padrão e credencial vindos de WhatsAppSettings.

    Usado na configuração manual, em que o operador informa o
    phone number ID e o access token do próprio app Meta.
    """

    def __init__(self, settings: WhatsAppSettings) -> None:
        self._settings = settings

    async def read_default_sender_id(self) -> str | None:
        return self._settings.default_phone_number_id or None

    async def read_credential(self) -> str | None:
        return self._settings.access_token or None
