"""Domain value types package."""

from whatsapp_gateway.models.chat import ChatCompletion, ChatMessage, ChatReply
from whatsapp_gateway.models.dispatch import (
    DispatchOutcome,
    DispatchReport,
    DispatchRequest,
    DispatchSummary,
    MessageKind,
    OutboundMessage,
    TemplateRef,
)
from whatsapp_gateway.models.phone import PhoneValidationResult, summarize_validation

__all__ = [
    "ChatCompletion",
    "ChatMessage",
    "ChatReply",
    "DispatchOutcome",
    "DispatchReport",
    "DispatchRequest",
    "DispatchSummary",
    "MessageKind",
    "OutboundMessage",
    "TemplateRef",
    "PhoneValidationResult",
    "summarize_validation",
]
