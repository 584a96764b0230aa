"""Settings específicas de WhatsApp.

Configurações do canal WhatsApp via Graph API, incluindo a identidade
de envio padrão e a credencial lidas pelas actions.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

# Constantes do Graph API
GRAPH_API_VERSION: str = "v24.0"
GRAPH_API_BASE_URL: str = "https://graph.facebook.com"

ConfigurationType = Literal["manual", "sandbox"]

DEFAULT_TEMPLATE_LANGUAGE: str = "en"
DEFAULT_TYPING_EMOJI: str = "👀"


@dataclass(frozen=True)
class WhatsAppSettings:
    """Configurações do canal WhatsApp.

    Attributes:
        access_token: Token de acesso à Graph API (credencial das actions)
        default_phone_number_id: Phone number ID usado quando a action
            não informa remetente explícito
        configuration_type: Modo da integração (manual|sandbox)
        typing_indicator_emoji: Reage com emoji à mensagem recebida
            enquanto o bot processa
        typing_indicator_emoji_value: Emoji usado na reação
        default_template_language: Idioma padrão de templates
        api_version: Versão da Graph API (ex: v24.0)
        api_base_url: URL base da Graph API
        request_timeout_seconds: Timeout para requisições HTTP
    """

    # Credenciais (carregadas de env ou Secret Manager)
    access_token: str = ""
    default_phone_number_id: str = ""

    # Modo da integração
    configuration_type: ConfigurationType = "manual"

    # Typing indicator
    typing_indicator_emoji: bool = False
    typing_indicator_emoji_value: str = DEFAULT_TYPING_EMOJI

    # Templates
    default_template_language: str = DEFAULT_TEMPLATE_LANGUAGE

    # API
    api_version: str = GRAPH_API_VERSION
    api_base_url: str = GRAPH_API_BASE_URL
    request_timeout_seconds: float = 30.0

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url}/{self.api_version}"

    @property
    def is_sandbox(self) -> bool:
        """True quando a integração roda na conta sandbox compartilhada."""
        return self.configuration_type == "sandbox"

    def get_messages_endpoint(self, phone_number_id: str) -> str:
        """Retorna URL para envio de mensagens.

        Args:
            phone_number_id: ID do número remetente.

        Returns:
            URL completa no formato: https://graph.facebook.com/v24.0/{id}/messages

        Raises:
            ValueError: Se phone_number_id vazio.
        """
        if not phone_number_id:
            raise ValueError("phone_number_id é obrigatório")
        return f"{self.api_endpoint}/{phone_number_id}/messages"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de WhatsApp.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if self.configuration_type not in ("manual", "sandbox"):
            errors.append(
                "WHATSAPP_CONFIGURATION_TYPE deve ser 'manual' ou 'sandbox'"
            )

        if not self.access_token:
            errors.append("WHATSAPP_ACCESS_TOKEN não configurado")

        if self.configuration_type == "manual" and not self.default_phone_number_id:
            errors.append("WHATSAPP_DEFAULT_PHONE_NUMBER_ID não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("WHATSAPP_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _parse_bool(raw: str) -> bool:
    return raw.lower() in ("true", "1", "yes")


def _load_from_env() -> WhatsAppSettings:
    """Carrega WhatsAppSettings a partir de variáveis de ambiente."""
    return WhatsAppSettings(
        access_token=os.getenv("WHATSAPP_ACCESS_TOKEN", ""),
        default_phone_number_id=os.getenv("WHATSAPP_DEFAULT_PHONE_NUMBER_ID", ""),
        configuration_type=os.getenv(  # type: ignore[arg-type]
            "WHATSAPP_CONFIGURATION_TYPE", "manual"
        ).lower(),
        typing_indicator_emoji=_parse_bool(
            os.getenv("WHATSAPP_TYPING_INDICATOR_EMOJI", "false")
        ),
        typing_indicator_emoji_value=os.getenv(
            "WHATSAPP_TYPING_INDICATOR_EMOJI_VALUE", DEFAULT_TYPING_EMOJI
        ),
        default_template_language=os.getenv(
            "WHATSAPP_DEFAULT_TEMPLATE_LANGUAGE", DEFAULT_TEMPLATE_LANGUAGE
        ),
        api_version=os.getenv("WHATSAPP_API_VERSION", GRAPH_API_VERSION),
        api_base_url=os.getenv("WHATSAPP_API_BASE_URL", GRAPH_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("WHATSAPP_REQUEST_TIMEOUT_SECONDS", "30")
        ),
    )


@lru_cache(maxsize=1)
def get_whatsapp_settings() -> WhatsAppSettings:
    """Retorna instância cacheada de WhatsAppSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
