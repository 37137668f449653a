"""Single outbound message path."""

from __future__ import annotations

import logging
from typing import Any

from whatsapp_gateway.core.errors import MalformedRequestError
from whatsapp_gateway.interfaces.messaging_provider import MessagingProvider
from whatsapp_gateway.models.dispatch import MessageKind, OutboundMessage, TemplateRef

logger = logging.getLogger(__name__)


def ensure_message_body(kind: MessageKind, template: TemplateRef | None, body: Any) -> None:
    """Text messages (including template requests with no template) need a string body."""
    if kind == MessageKind.TEMPLATE and template is not None:
        return
    if not isinstance(body, str):
        raise MalformedRequestError("Invalid request: 'message' is required")


class MessageService:
    """Sends one message and returns the provider response untouched."""

    def __init__(self, messaging_provider: MessagingProvider) -> None:
        self.messaging_provider = messaging_provider

    async def send(self, message: OutboundMessage) -> dict[str, Any]:
        if not isinstance(message.to, str) or not message.to.strip():
            raise MalformedRequestError("Invalid request: 'to' is required")
        ensure_message_body(message.kind, message.template, message.body)

        logger.info(
            "Send message request: type=%s message_length=%d",
            message.kind.value,
            len(message.body or ""),
        )
        return await self.messaging_provider.send_message(message)
