"""Cliente HTTP especializado para WhatsApp/Meta API.

Estende HttpClient genérico com comportamentos específicos de WhatsApp:
- Envelope da Cloud API (messaging_product, recipient_type, to)
- Autenticação via Bearer token da integração
- Erros Meta e falhas de transporte devolvidos como `{"error": ...}`,
  nunca levantados, para o dispatch decidir o desfecho
- Logging estruturado sem PII (tokens, números)
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.whatsapp.http_base import HttpClient, HttpClientConfig, HttpError
from api.connectors.whatsapp.meta_errors import parse_meta_error, transport_error
from api.connectors.whatsapp.meta_logging import log_meta_error, log_success
from api.payload_builders.whatsapp.base import build_base_payload

if TYPE_CHECKING:
    import httpx

    from config.settings import WhatsAppSettings

logger: logging.Logger = logging.getLogger(__name__)


class WhatsAppHttpClient(HttpClient):
    """Cliente autenticado da Cloud API, uma tentativa por chamada.

    Args:
        access_token: Bearer token da integração
        settings: Settings com endpoint e versão da Graph API
        config: Configuração HTTP base
        transport: Transport httpx opcional (testes)
    """

    def __init__(
        self,
        access_token: str,
        settings: WhatsAppSettings,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not access_token or not access_token.strip():
            raise ValueError("access_token é obrigatório para envio de mensagens")
        super().__init__(config, transport)
        self._access_token = access_token
        self._settings = settings

    async def send_message(
        self,
        sender_id: str,
        recipient_id: str,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        """Envia mensagem a um destinatário.

        Args:
            sender_id: Phone number ID remetente
            recipient_id: Telefone do destinatário
            payload: Corpo da mensagem produzido por um builder

        Returns:
            Response JSON da Meta, ou `{"error": ...}` em falha
        """
        body = build_base_payload(recipient_id, payload)
        return await self._post_messages(sender_id, body, operation=str(payload.get("type")))

    async def mark_as_read(
        self,
        sender_id: str,
        message_id: str,
        *,
        typing_indicator: bool = False,
    ) -> dict[str, Any]:
        """Marca mensagem recebida como lida, opcionalmente exibindo "digitando".

        Args:
            sender_id: Phone number ID que recebeu a mensagem
            message_id: wamid da mensagem recebida
            typing_indicator: Exibe indicador de digitação ao usuário
        """
        body: dict[str, Any] = {
            "messaging_product": "whatsapp",
            "status": "read",
            "message_id": message_id,
        }
        if typing_indicator:
            body["typing_indicator"] = {"type": "text"}
        return await self._post_messages(sender_id, body, operation="read")

    async def _post_messages(
        self,
        sender_id: str,
        body: dict[str, Any],
        operation: str,
    ) -> dict[str, Any]:
        url = self._settings.get_messages_endpoint(sender_id)
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._access_token}",
        }
        try:
            response = await self.post(url, json=body, headers=headers)
        except HttpError as exc:
            return transport_error(str(exc))
        return self._process_response(response, operation, sender_id)

    def _process_response(
        self,
        response: httpx.Response,
        operation: str,
        sender_id: str,
    ) -> dict[str, Any]:
        try:
            response_data = response.json()
        except json.JSONDecodeError:
            logger.error(
                "meta_response_invalid_json",
                extra={"operation": operation, "status_code": response.status_code},
            )
            return transport_error("invalid_json_response", response.status_code)

        if not isinstance(response_data, dict):
            return transport_error("unexpected_response_shape", response.status_code)

        meta_error = parse_meta_error(response_data)
        if meta_error:
            log_meta_error(meta_error, operation, sender_id)
            return response_data

        if response.status_code >= 400:
            return transport_error("http_error_status", response.status_code)

        log_success(operation, sender_id, response.status_code)
        return response_data


def create_whatsapp_http_client(
    access_token: str,
    settings: WhatsAppSettings | None = None,
) -> WhatsAppHttpClient:
    """Factory de cliente autenticado com config padrão.

    Args:
        access_token: Credencial resolvida pela action
        settings: WhatsAppSettings opcional. Se None, carrega do ambiente.
    """
    # Import local para evitar dependência circular
    from config.settings import get_whatsapp_settings

    whatsapp = settings or get_whatsapp_settings()
    config = HttpClientConfig(timeout_seconds=whatsapp.request_timeout_seconds)
    return WhatsAppHttpClient(access_token, whatsapp, config=config)
