"""Sequential bulk dispatch with per-recipient outcome aggregation."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import replace

from whatsapp_gateway.core.errors import MalformedRequestError, MessageSendError
from whatsapp_gateway.interfaces.messaging_provider import MessagingProvider, extract_message_id
from whatsapp_gateway.models.dispatch import DispatchOutcome, DispatchReport, DispatchRequest, OutboundMessage
from whatsapp_gateway.services.message_service import ensure_message_body
from whatsapp_gateway.services.template_renderer import render_template

logger = logging.getLogger(__name__)

Sleeper = Callable[[float], Awaitable[None]]


class BulkDispatcher:
    """Sends one message to many recipients, one at a time, in input order.

    A failed recipient is recorded in its outcome and the batch moves on; only
    a malformed request aborts the call, and it does so before any send. The
    inter-message delay throttles against provider rate limits, so recipients
    must never be sent concurrently.
    """

    def __init__(self, messaging_provider: MessagingProvider, *, sleep: Sleeper = asyncio.sleep) -> None:
        self.messaging_provider = messaging_provider
        self._sleep = sleep

    async def dispatch(
        self,
        request: DispatchRequest,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> DispatchReport:
        recipients = self._validate(request)
        logger.info(
            "Bulk send request: recipients=%d type=%s",
            len(recipients),
            request.message_kind.value,
        )

        report = DispatchReport()
        for index, recipient in enumerate(recipients):
            if index > 0 and request.inter_message_delay_ms > 0:
                await self._sleep(request.inter_message_delay_ms / 1000)

            if cancel_event is not None and cancel_event.is_set():
                report.cancelled = True
                logger.warning(
                    "Bulk send cancelled: processed=%d remaining=%d",
                    index,
                    len(recipients) - index,
                )
                break

            report.outcomes.append(await self._send_one(request, recipient))

        summary = report.summary
        logger.info(
            "Bulk send completed: total=%d success=%d failed=%d",
            summary.total,
            summary.succeeded,
            summary.failed,
        )
        return report

    async def _send_one(self, request: DispatchRequest, recipient: str) -> DispatchOutcome:
        try:
            response = await self.messaging_provider.send_message(self._message_for(request, recipient))
            message_id = extract_message_id(response)
        except MessageSendError as exc:
            return DispatchOutcome.failed(recipient, exc.message)
        except Exception as exc:
            # Network and decoding failures belong to this recipient only.
            logger.exception("Unexpected error sending to one bulk recipient")
            return DispatchOutcome.failed(recipient, str(exc) or type(exc).__name__)
        return DispatchOutcome.sent(recipient, message_id)

    @staticmethod
    def _message_for(request: DispatchRequest, recipient: str) -> OutboundMessage:
        message = request.message_for(recipient)
        variables = request.recipient_variables.get(recipient)
        if variables is None or message.body is None:
            return message
        return replace(message, body=render_template(message.body, variables))

    async def dispatch_within(self, request: DispatchRequest, max_duration_seconds: float | None) -> DispatchReport:
        """Dispatch, stop starting new sends once ``max_duration_seconds`` has elapsed."""
        if max_duration_seconds is None:
            return await self.dispatch(request)

        cancel_event = asyncio.Event()
        timer = asyncio.get_running_loop().call_later(max_duration_seconds, cancel_event.set)
        try:
            return await self.dispatch(request, cancel_event=cancel_event)
        finally:
            timer.cancel()

    def _validate(self, request: DispatchRequest) -> Sequence[str]:
        recipients = request.recipients
        if recipients is None:
            raise MalformedRequestError("Invalid request: 'recipients' array is required")
        if isinstance(recipients, (str, bytes)) or not isinstance(recipients, Sequence):
            raise MalformedRequestError("Invalid request: 'recipients' must be an array of phone numbers")
        if not recipients:
            raise MalformedRequestError("Invalid request: 'recipients' must not be empty")
        if not all(isinstance(recipient, str) for recipient in recipients):
            raise MalformedRequestError("Invalid request: every recipient must be a string")
        if isinstance(request.inter_message_delay_ms, bool) or not isinstance(request.inter_message_delay_ms, int):
            raise MalformedRequestError("Invalid request: 'delay_ms' must be an integer")
        if request.inter_message_delay_ms < 0:
            raise MalformedRequestError("Invalid request: 'delay_ms' must not be negative")
        if not isinstance(request.recipient_variables, Mapping) or not all(
            isinstance(variables, Mapping) for variables in request.recipient_variables.values()
        ):
            raise MalformedRequestError("Invalid request: 'variables' must map recipients to objects")
        ensure_message_body(request.message_kind, request.template, request.message_body)
        return recipients
