"""Builder de reação a mensagem recebida."""

from __future__ import annotations

from typing import Any


def build_reaction_message(message_external_id: str, emoji: str) -> dict[str, Any]:
    """Constrói reação a uma mensagem recebida.

    Emoji vazio remove a reação anterior.
    """
    return {
        "type": "reaction",
        "reaction": {
            "message_id": message_external_id,
            "emoji": emoji,
        },
    }
