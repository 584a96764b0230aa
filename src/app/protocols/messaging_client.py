"""Protocolos do cliente de mensageria usado pelo dispatch."""

from __future__ import annotations

from typing import Any, Protocol


class MessagingClientProtocol(Protocol):
    """Capacidade de envio autenticada.

    Respostas com campo `error` representam falha; qualquer outra é
    sucesso. Implementações não levantam exceção para falhas da rede.
    """

    async def send_message(
        self,
        sender_id: str,
        recipient_id: str,
        payload: dict[str, Any],
    ) -> dict[str, Any]: ...

    async def mark_as_read(
        self,
        sender_id: str,
        message_id: str,
        *,
        typing_indicator: bool = False,
    ) -> dict[str, Any]: ...


class MessagingClientFactoryProtocol(Protocol):
    """Cria um cliente autenticado com a credencial resolvida."""

    def __call__(self, access_token: str) -> MessagingClientProtocol: ...
