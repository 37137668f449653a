"""Service error hierarchy translated to HTTP responses by the app."""

from __future__ import annotations


class GatewayServiceError(Exception):
    """Base class for errors surfaced to API callers as ``{"error": ...}``."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MalformedRequestError(GatewayServiceError):
    """Request body has the wrong shape; raised before any network call."""

    status_code = 400


class GatewayUnconfiguredError(GatewayServiceError):
    """Messaging gateway credentials are missing.

    Answered with 200 and a ``mock`` flag so callers can tell "not set up"
    apart from "provider rejected the message".
    """

    status_code = 200

    def __init__(
        self,
        message: str = "WhatsApp not configured",
        details: str = "WHATSAPP_ACCESS_TOKEN and WHATSAPP_PHONE_NUMBER_ID are required",
    ) -> None:
        super().__init__(message)
        self.details = details


class MessageSendError(GatewayServiceError):
    """One outbound message was rejected by the provider or never reached it."""

    DEFAULT_MESSAGE = "Failed to send WhatsApp message"

    def __init__(self, message: str | None = None, *, provider_status: int | None = None) -> None:
        super().__init__(message or self.DEFAULT_MESSAGE)
        self.provider_status = provider_status


class AIProviderError(GatewayServiceError):
    """Chat completion call failed."""


class AIRateLimitError(AIProviderError):
    status_code = 429

    def __init__(self, message: str = "Rate limit exceeded. Please try again later.") -> None:
        super().__init__(message)


class AICredentialsError(AIProviderError):
    status_code = 402

    def __init__(self, message: str = "OpenAI API key invalid or insufficient credits.") -> None:
        super().__init__(message)
