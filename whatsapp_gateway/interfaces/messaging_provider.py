"""Interface contract for messaging providers."""

from abc import ABC, abstractmethod
from typing import Any

from whatsapp_gateway.core.errors import MessageSendError
from whatsapp_gateway.models.dispatch import OutboundMessage


class MessagingProvider(ABC):
    """Defines outbound message delivery behavior."""

    @abstractmethod
    async def send_message(self, message: OutboundMessage) -> dict[str, Any]:
        """Send one message and return the raw provider response.

        Raises ``MessageSendError`` carrying the provider error text when the
        message is rejected.
        """
        raise NotImplementedError

    @abstractmethod
    async def contact_exists(self, formatted_number: str) -> bool | None:
        """Ask the provider whether a number has a WhatsApp account.

        ``None`` means the provider could not answer.
        """
        raise NotImplementedError


def extract_message_id(response: Any) -> str:
    """Return the provider message id from a send response.

    A response without ``messages[0].id`` is not proof of delivery and raises
    ``MessageSendError``.
    """
    messages = response.get("messages") if isinstance(response, dict) else None
    if isinstance(messages, list) and messages and isinstance(messages[0], dict):
        message_id = messages[0].get("id")
        if message_id:
            return str(message_id)
    raise MessageSendError()
