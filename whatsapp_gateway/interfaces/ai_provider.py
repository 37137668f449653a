"""Interface contract for AI providers."""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator

from whatsapp_gateway.models.chat import ChatCompletion, ChatMessage


class AIProvider(ABC):
    """Defines chat completion behavior."""

    @abstractmethod
    async def complete(self, messages: list[ChatMessage]) -> ChatCompletion:
        """Generate one assistant reply for the conversation."""
        raise NotImplementedError

    @abstractmethod
    async def stream(self, messages: list[ChatMessage]) -> AsyncIterator[str]:
        """Open a streamed reply and return its server-sent event lines.

        Provider errors are raised here, before the first line is produced.
        """
        raise NotImplementedError
