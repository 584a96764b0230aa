"""Conector WhatsApp - adapter de borda para Meta Graph API.

Este módulo é o único ponto de IO de rede para o canal WhatsApp.
Responsabilidades:
- HTTP client autenticado para envio de mensagens e read receipts
- Parsing e classificação de erros do Graph API
"""

from .http_client import WhatsAppHttpClient, create_whatsapp_http_client
from .meta_errors import WhatsAppApiError, is_permanent_error, parse_meta_error

__all__ = [
    "WhatsAppApiError",
    "WhatsAppHttpClient",
    "create_whatsapp_http_client",
    "is_permanent_error",
    "parse_meta_error",
]
