"""Use cases de actions WhatsApp."""

from ._action_base import ActionDependencies
from .dispatch import MessageDispatcher, interpret_response
from .registry import ActionRegistry, UnknownActionError
from .start_conversation import SendTemplateMessageUseCase, StartConversationUseCase
from .start_flow import StartFlowUseCase
from .typing_indicator import StartTypingIndicatorUseCase, StopTypingIndicatorUseCase

__all__ = [
    "ActionDependencies",
    "ActionRegistry",
    "MessageDispatcher",
    "SendTemplateMessageUseCase",
    "StartConversationUseCase",
    "StartFlowUseCase",
    "StartTypingIndicatorUseCase",
    "StopTypingIndicatorUseCase",
    "UnknownActionError",
    "interpret_response",
]
