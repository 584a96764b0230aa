"""Envelope comum a todas as mensagens enviadas à API Meta."""

from __future__ import annotations

from typing import Any


def build_base_payload(recipient_id: str, message: dict[str, Any]) -> dict[str, Any]:
    """Envolve o corpo da mensagem no envelope da Cloud API.

    Args:
        recipient_id: Telefone do destinatário
        message: Corpo produzido por um builder (contém `type`)

    Returns:
        Payload completo pronto para envio
    """
    return {
        "messaging_product": "whatsapp",
        "recipient_type": "individual",
        "to": recipient_id,
        **message,
    }
