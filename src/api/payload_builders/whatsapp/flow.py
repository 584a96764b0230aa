"""Builder para mensagens interativas de WhatsApp Flow.

Regras estruturais (validadas antes de qualquer chamada de rede):
- exatamente um entre flow_id e flow_name identifica o Flow
- flow_action padrão é "navigate"
- "navigate" exige screen; data inicial, se informada, deve ser um
  objeto JSON não vazio
- "data_exchange" nunca emite screen nem data
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from app.protocols.models import (
    FLOW_MESSAGE_VERSION,
    DataExchangeAction,
    FlowById,
    FlowByName,
    FlowDescriptor,
    NavigateAction,
)
from utils.errors import ValidationError, raise_logged

if TYPE_CHECKING:
    from app.protocols.models import FlowAction, FlowInput, FlowReference

logger = logging.getLogger(__name__)


def resolve_flow_descriptor(flow: FlowInput) -> FlowDescriptor:
    """Resolve o input do chamador em um descritor etiquetado.

    Args:
        flow: Campos de Flow como recebidos na action

    Returns:
        FlowDescriptor com referência e ação já decididas

    Raises:
        ValidationError: Se alguma regra estrutural for violada
    """
    return FlowDescriptor(
        reference=_resolve_reference(flow),
        action=_resolve_action(flow),
        cta=flow.flow_cta,
        token=flow.flow_token or None,
        mode=flow.mode,
    )


def build_flow_message(body_text: str, descriptor: FlowDescriptor) -> dict[str, Any]:
    """Constrói corpo `interactive` do tipo flow.

    Args:
        body_text: Texto exibido acima do botão do Flow
        descriptor: Flow resolvido por `resolve_flow_descriptor`

    Returns:
        Corpo interactive conforme API Meta
    """
    if not body_text:
        raise_logged(logger, ValidationError("bodyText é obrigatório"))

    return {
        "type": "interactive",
        "interactive": {
            "type": "flow",
            "body": {"text": body_text},
            "action": {
                "name": "flow",
                "parameters": _build_parameters(descriptor),
            },
        },
    }


def _resolve_reference(flow: FlowInput) -> FlowReference:
    if flow.flow_id:
        return FlowById(flow_id=flow.flow_id)
    if flow.flow_name:
        return FlowByName(flow_name=flow.flow_name)
    raise_logged(logger, ValidationError("Informe flowId ou flowName"))


def _resolve_action(flow: FlowInput) -> FlowAction:
    flow_action = flow.flow_action or "navigate"
    if flow_action == "data_exchange":
        return DataExchangeAction()
    if flow_action != "navigate":
        raise_logged(logger, ValidationError(f"flowAction inválida: {flow_action}"))

    if not flow.screen:
        raise_logged(
            logger,
            ValidationError('screen é obrigatório quando flowAction é "navigate"'),
        )
    return NavigateAction(screen=flow.screen, data=_parse_flow_data(flow.data_json))


def _parse_flow_data(raw: str | None) -> dict[str, Any] | None:
    """A Meta exige objeto não vazio quando data é enviada."""
    if not raw:
        return None

    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        reason = exc.msg
    else:
        if isinstance(parsed, dict) and parsed:
            return parsed
        reason = "o valor deve ser um objeto não vazio"

    raise_logged(
        logger,
        ValidationError(
            f"Valor informado em dataJson do Flow não é válido "
            f"(erro: {reason}). Recebido: {raw}"
        ),
    )


def _build_parameters(descriptor: FlowDescriptor) -> dict[str, Any]:
    parameters: dict[str, Any] = {
        "flow_message_version": FLOW_MESSAGE_VERSION,
        "flow_cta": descriptor.cta,
    }
    if descriptor.token:
        parameters["flow_token"] = descriptor.token
    if descriptor.mode:
        parameters["mode"] = descriptor.mode

    reference = descriptor.reference
    if isinstance(reference, FlowById):
        parameters["flow_id"] = reference.flow_id
    else:
        parameters["flow_name"] = reference.flow_name

    action = descriptor.action
    if isinstance(action, NavigateAction):
        action_payload: dict[str, Any] = {"screen": action.screen}
        if action.data:
            action_payload["data"] = action.data
        parameters["flow_action"] = "navigate"
        parameters["flow_action_payload"] = action_payload
    else:
        parameters["flow_action"] = "data_exchange"

    return parameters
