"""WhatsApp Business Cloud API messaging provider."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from whatsapp_gateway.core.errors import MessageSendError
from whatsapp_gateway.interfaces.messaging_provider import MessagingProvider
from whatsapp_gateway.models.dispatch import MessageKind, OutboundMessage

logger = logging.getLogger(__name__)


def build_message_payload(message: OutboundMessage) -> dict[str, Any]:
    """Build the Graph API body for a text or template message.

    A template message without a template reference is sent as text.
    """
    if message.kind == MessageKind.TEMPLATE and message.template is not None:
        template = message.template
        return {
            "messaging_product": "whatsapp",
            "to": message.to,
            "type": "template",
            "template": {
                "name": template.name,
                "language": {"code": template.language_code},
                "components": [dict(component) for component in template.components],
            },
        }

    return {
        "messaging_product": "whatsapp",
        "to": message.to,
        "type": "text",
        "text": {"body": message.body},
    }


class WhatsAppCloudProvider(MessagingProvider):
    """Sends messages through the Graph API ``/{phone_number_id}/messages`` edge.

    A new ``httpx.AsyncClient`` is opened per call, so the provider keeps no
    connection state between sends.
    """

    def __init__(
        self,
        access_token: str,
        phone_number_id: str,
        *,
        base_url: str = "https://graph.facebook.com",
        api_version: str = "v18.0",
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._access_token = access_token
        self._phone_number_id = phone_number_id
        self._base_url = f"{base_url.rstrip('/')}/{api_version}"
        self._timeout = timeout_seconds
        self._transport = transport

    async def send_message(self, message: OutboundMessage) -> dict[str, Any]:
        payload = build_message_payload(message)
        response = await self._post(f"{self._phone_number_id}/messages", payload)

        if response.is_success:
            return response.json()

        error_text = _provider_error_message(response)
        logger.error(
            "WhatsApp API error: status=%s error=%s",
            response.status_code,
            error_text or "<empty>",
        )
        raise MessageSendError(error_text, provider_status=response.status_code)

    async def contact_exists(self, formatted_number: str) -> bool | None:
        payload = {
            "blocking": "wait",
            "contacts": [f"+{formatted_number}"],
            "force_check": True,
        }
        try:
            response = await self._post(f"{self._phone_number_id}/contacts", payload)
        except httpx.HTTPError as exc:
            logger.warning("WhatsApp contact check failed: %s", exc)
            return None

        if not response.is_success:
            return None

        try:
            contacts = response.json().get("contacts") or []
        except ValueError:
            return None
        if not contacts or not isinstance(contacts[0], dict):
            return False
        return contacts[0].get("status") == "valid"

    async def _post(self, path: str, payload: dict[str, Any]) -> httpx.Response:
        headers = {
            "Authorization": f"Bearer {self._access_token}",
            "Content-Type": "application/json",
        }
        async with httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            return await client.post(f"/{path}", headers=headers, json=payload)


def _provider_error_message(response: httpx.Response) -> str | None:
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return None
