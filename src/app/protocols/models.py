"""Contratos canônicos das actions de mensageria.

Inputs e resultados das actions são modelos pydantic (vindos do
chamador em camelCase). Os tipos internos são dataclasses imutáveis;
as decisões sobre campos opcionais são uniões etiquetadas resolvidas
uma única vez na borda do Payload Builder.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Limite imposto pela Meta para o label do botão do Flow
MAX_FLOW_CTA_LENGTH = 20

FLOW_MESSAGE_VERSION = "3"

FlowActionName = Literal["navigate", "data_exchange"]
FlowMode = Literal["published", "draft"]


# ──────────────────────────────────────────────────────────────
# Entidades do store (interface externa)
# ──────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Conversation:
    """Thread lógica identificada pelo par (remetente, destinatário)."""

    id: str
    sender_id: str
    recipient_id: str
    tags: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class InboundMessageRecord:
    """Mensagem recebida, com o ID da rede (wamid) usado em read/reaction."""

    id: str
    conversation_id: str
    external_id: str


# ──────────────────────────────────────────────────────────────
# Descritor de Flow (uniões etiquetadas)
# ──────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class FlowById:
    flow_id: str


@dataclass(frozen=True, slots=True)
class FlowByName:
    flow_name: str


FlowReference = FlowById | FlowByName


@dataclass(frozen=True, slots=True)
class NavigateAction:
    """Abre o Flow em uma tela inicial, com dados iniciais opcionais."""

    screen: str
    data: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True)
class DataExchangeAction:
    """Delega a primeira tela ao endpoint de data-exchange."""


FlowAction = NavigateAction | DataExchangeAction


@dataclass(frozen=True, slots=True)
class FlowDescriptor:
    """Flow já validado, pronto para virar payload."""

    reference: FlowReference
    action: FlowAction
    cta: str
    token: str | None = None
    mode: FlowMode | None = None

    @property
    def action_name(self) -> FlowActionName:
        return "navigate" if isinstance(self.action, NavigateAction) else "data_exchange"

    @property
    def flow_id(self) -> str:
        return self.reference.flow_id if isinstance(self.reference, FlowById) else ""

    @property
    def flow_name(self) -> str:
        return self.reference.flow_name if isinstance(self.reference, FlowByName) else ""


# ──────────────────────────────────────────────────────────────
# Resultado do dispatch
# ──────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class DispatchSuccess:
    message_id: str | None = None
    message_status: str | None = None


@dataclass(frozen=True, slots=True)
class DispatchFailure:
    upstream_error: Any


DispatchOutcome = DispatchSuccess | DispatchFailure


# ──────────────────────────────────────────────────────────────
# Inputs e resultados das actions
# ──────────────────────────────────────────────────────────────


class ActionModel(BaseModel):
    """Base dos modelos de action: aceita camelCase e snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class FlowInput(ActionModel):
    """Descritor de Flow como informado pelo chamador."""

    flow_id: str | None = None
    flow_name: str | None = None
    flow_cta: str = Field(min_length=1, max_length=MAX_FLOW_CTA_LENGTH)
    flow_token: str | None = None
    mode: FlowMode | None = None
    flow_action: FlowActionName | None = None
    screen: str | None = None
    data_json: str | None = None


class StartConversationInput(ActionModel):
    user_phone: str = Field(min_length=1)
    template_name: str = Field(min_length=1)
    template_language: str | None = None
    template_variables_json: str | None = None
    sender_id: str | None = None


class SendTemplateMessageInput(ActionModel):
    conversation_id: str = Field(min_length=1)
    template_name: str = Field(min_length=1)
    template_language: str | None = None
    template_variables_json: str | None = None


class StartFlowInput(ActionModel):
    user_phone: str = Field(min_length=1)
    body_text: str = Field(min_length=1)
    flow: FlowInput
    sender_id: str | None = None


class TypingIndicatorInput(ActionModel):
    conversation_id: str = Field(min_length=1)
    message_id: str = Field(min_length=1)


class ConversationResult(ActionModel):
    conversation_id: str


class EmptyResult(ActionModel):
    """Resultado das actions que só produzem efeito colateral."""


class InboundMessageInput(ActionModel):
    """Mensagem recebida entregue pela ingestão do webhook."""

    external_id: str = Field(min_length=1)


class InboundMessageResult(ActionModel):
    message_id: str
