"""Protocolos e contratos do core das actions."""

from .conversation_store import ConversationStoreError, ConversationStoreProtocol
from .integration_state import IntegrationStateError, IntegrationStateProtocol
from .messaging_client import MessagingClientFactoryProtocol, MessagingClientProtocol
from .models import (
    Conversation,
    ConversationResult,
    DataExchangeAction,
    DispatchFailure,
    DispatchOutcome,
    DispatchSuccess,
    EmptyResult,
    FlowAction,
    FlowById,
    FlowByName,
    FlowDescriptor,
    FlowInput,
    FlowReference,
    InboundMessageInput,
    InboundMessageRecord,
    InboundMessageResult,
    NavigateAction,
    SendTemplateMessageInput,
    StartConversationInput,
    StartFlowInput,
    TypingIndicatorInput,
)

__all__ = [
    "Conversation",
    "ConversationResult",
    "ConversationStoreError",
    "ConversationStoreProtocol",
    "DataExchangeAction",
    "DispatchFailure",
    "DispatchOutcome",
    "DispatchSuccess",
    "EmptyResult",
    "FlowAction",
    "FlowById",
    "FlowByName",
    "FlowDescriptor",
    "FlowInput",
    "FlowReference",
    "InboundMessageInput",
    "InboundMessageRecord",
    "InboundMessageResult",
    "IntegrationStateError",
    "IntegrationStateProtocol",
    "MessagingClientFactoryProtocol",
    "MessagingClientProtocol",
    "NavigateAction",
    "SendTemplateMessageInput",
    "StartConversationInput",
    "StartFlowInput",
    "TypingIndicatorInput",
]
