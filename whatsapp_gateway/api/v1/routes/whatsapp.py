"""WhatsApp send endpoints: single message and bulk dispatch.

Both routes resolve the messaging provider before touching the body, so a
missing configuration is reported even when the body is unreadable.
"""

from typing import Any

from fastapi import APIRouter, Depends, Request

from whatsapp_gateway.api.body import read_json_body
from whatsapp_gateway.api.deps import get_bulk_dispatcher, get_message_service, get_settings
from whatsapp_gateway.core.settings import Settings
from whatsapp_gateway.schemas.whatsapp import BulkSendRequest, BulkSendResponse, SendMessageRequest
from whatsapp_gateway.services.bulk_dispatcher import BulkDispatcher
from whatsapp_gateway.services.message_service import MessageService

router = APIRouter(prefix="/whatsapp-send")


@router.post("")
async def send_message(
    request: Request,
    message_service: MessageService = Depends(get_message_service),
) -> dict[str, Any]:
    """Send one message and return the raw Graph API response."""
    payload = await read_json_body(request, SendMessageRequest)
    return await message_service.send(payload.to_message())


@router.post("/bulk", response_model=BulkSendResponse, response_model_exclude_none=True)
async def send_bulk(
    request: Request,
    dispatcher: BulkDispatcher = Depends(get_bulk_dispatcher),
    app_settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    """Send the same message to every recipient, in order, one at a time."""
    payload = await read_json_body(request, BulkSendRequest)
    dispatch_request = payload.to_dispatch_request(default_delay_ms=app_settings.bulk_default_delay_ms)
    report = await dispatcher.dispatch_within(dispatch_request, app_settings.bulk_max_duration_seconds)
    return report.to_dict()
