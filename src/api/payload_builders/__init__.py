"""Payload builders por canal — construção de payloads para APIs externas.

Estrutura:
- whatsapp/: WhatsApp Business Cloud API (template, flow, texto, reação)
"""

__all__: list[str] = []
