"""Schemas for the WhatsApp send endpoints."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from whatsapp_gateway.models.dispatch import DispatchRequest, MessageKind, OutboundMessage, TemplateRef


class TemplateSchema(BaseModel):
    """Approved template reference; components are forwarded as-is."""

    name: str = Field(..., examples=["boas_vindas"])
    language: str = Field(..., description="Template language code", examples=["pt_BR"])
    components: list[dict[str, Any]] = Field(default_factory=list)

    def to_ref(self) -> TemplateRef:
        return TemplateRef(name=self.name, language_code=self.language, components=tuple(self.components))


class SendMessageRequest(BaseModel):
    """Request body for a single send."""

    to: str = Field(..., description="WhatsApp number with country code", examples=["5511999999999"])
    message: str | None = Field(default=None, examples=["Olá! Seu protocolo foi atualizado."])
    type: Literal["text", "template"] = "text"
    template: TemplateSchema | None = None

    def to_message(self) -> OutboundMessage:
        return OutboundMessage(
            to=self.to,
            body=self.message,
            kind=MessageKind(self.type),
            template=self.template.to_ref() if self.template is not None else None,
        )


class BulkSendRequest(BaseModel):
    """Request body for a bulk send; recipient shape is checked by the dispatcher."""

    recipients: Any = Field(default=None, examples=[["5511999990001", "5511999990002"]])
    message: str | None = None
    type: Literal["text", "template"] = "text"
    template: TemplateSchema | None = None
    delay_ms: int | None = Field(default=None, description="Pause between messages in milliseconds")
    variables: dict[str, dict[str, str | None]] | None = Field(
        default=None,
        description="Per-recipient values for {{variable}} placeholders in the message",
        examples=[{"5511999990001": {"nome": "Maria"}}],
    )

    def to_dispatch_request(self, default_delay_ms: int) -> DispatchRequest:
        return DispatchRequest(
            recipients=self.recipients,
            message_body=self.message,
            message_kind=MessageKind(self.type),
            template=self.template.to_ref() if self.template is not None else None,
            inter_message_delay_ms=default_delay_ms if self.delay_ms is None else self.delay_ms,
            recipient_variables=self.variables or {},
        )


class DispatchOutcomeSchema(BaseModel):
    recipient: str
    success: bool
    messageId: str | None = None
    error: str | None = None


class DispatchSummarySchema(BaseModel):
    total: int
    success: int
    failed: int


class BulkSendResponse(BaseModel):
    """Per-recipient results; a 200 does not mean every message went out."""

    results: list[DispatchOutcomeSchema]
    summary: DispatchSummarySchema
    cancelled: bool | None = None
