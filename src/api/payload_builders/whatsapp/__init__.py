"""Builders de payload para API Meta/WhatsApp.

Funções puras e síncronas por tipo de mensagem; toda validação
estrutural acontece aqui, antes de qualquer efeito de rede.
"""

from api.payload_builders.whatsapp.base import build_base_payload
from api.payload_builders.whatsapp.flow import (
    build_flow_message,
    resolve_flow_descriptor,
)
from api.payload_builders.whatsapp.template import (
    build_template_message,
    parse_template_variables,
)
from api.payload_builders.whatsapp.reaction import build_reaction_message

__all__ = [
    "build_base_payload",
    "build_flow_message",
    "build_reaction_message",
    "build_template_message",
    "parse_template_variables",
    "resolve_flow_descriptor",
]
