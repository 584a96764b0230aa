"""Protocolo de leitura do estado persistido da integração."""

from __future__ import annotations

from typing import Protocol


class IntegrationStateProtocol(Protocol):
    """Leitura somente do remetente padrão e da credencial.

    Criação/renovação da credencial pertence ao fluxo de setup (OAuth),
    fora deste núcleo.
    """

    async def read_default_sender_id(self) -> str | None: ...

    async def read_credential(self) -> str | None: ...


class IntegrationStateError(Exception):
    """Erro de leitura do estado persistido da integração."""
