"""Resolução da identidade de envio e da credencial da integração."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.protocols.integration_state import IntegrationStateError
from utils.errors import ConfigurationError, raise_logged

if TYPE_CHECKING:
    from app.protocols.integration_state import IntegrationStateProtocol

logger = logging.getLogger(__name__)


class IdentityResolver:
    """Lookup puro: remetente explícito vence; senão, o padrão persistido."""

    def __init__(self, state: IntegrationStateProtocol) -> None:
        self._state = state

    async def resolve_sender_id(self, explicit: str | None = None) -> str:
        """Retorna o phone number ID a usar no envio.

        Raises:
            ConfigurationError: Sem remetente explícito nem padrão, ou
                estado da integração ilegível
        """
        if explicit:
            return explicit

        try:
            default_sender_id = await self._state.read_default_sender_id()
        except IntegrationStateError as exc:
            raise_logged(
                logger,
                ConfigurationError(
                    f"Nenhum phone number ID padrão disponível (erro: {exc})"
                ),
            )
        if not default_sender_id:
            raise_logged(
                logger,
                ConfigurationError("Nenhum phone number ID padrão disponível"),
            )
        return default_sender_id

    async def resolve_credential(self) -> str:
        """Retorna o access token da configuração ativa.

        Raises:
            ConfigurationError: Credencial ausente ou ilegível
        """
        try:
            credential = await self._state.read_credential()
        except IntegrationStateError as exc:
            raise_logged(
                logger,
                ConfigurationError(
                    f"Access token da integração indisponível (erro: {exc})"
                ),
            )
        if not credential:
            raise_logged(
                logger,
                ConfigurationError("Access token da integração não configurado"),
            )
        return credential
