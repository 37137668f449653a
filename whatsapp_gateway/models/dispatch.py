"""Outbound message and bulk dispatch value types."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class MessageKind(str, Enum):
    TEXT = "text"
    TEMPLATE = "template"


@dataclass(frozen=True)
class TemplateRef:
    """Pre-approved WhatsApp template; components are passed through verbatim."""

    name: str
    language_code: str
    components: tuple[dict[str, Any], ...] = ()


@dataclass(frozen=True)
class OutboundMessage:
    """One message to one recipient."""

    to: str
    body: str
    kind: MessageKind = MessageKind.TEXT
    template: TemplateRef | None = None


@dataclass(frozen=True)
class DispatchRequest:
    """Same message sent to many recipients, in order.

    ``recipient_variables`` optionally fills the body's ``{{variable}}``
    placeholders per recipient.
    """

    recipients: Any
    message_body: str
    message_kind: MessageKind = MessageKind.TEXT
    template: TemplateRef | None = None
    inter_message_delay_ms: int = 100
    recipient_variables: Mapping[str, Mapping[str, str | None]] = field(default_factory=dict)

    def message_for(self, recipient: str) -> OutboundMessage:
        return OutboundMessage(
            to=recipient,
            body=self.message_body,
            kind=self.message_kind,
            template=self.template,
        )


@dataclass(frozen=True)
class DispatchOutcome:
    """Result of sending to a single recipient within a batch."""

    recipient: str
    success: bool
    provider_message_id: str | None = None
    error_message: str | None = None

    @classmethod
    def sent(cls, recipient: str, provider_message_id: str) -> DispatchOutcome:
        return cls(recipient=recipient, success=True, provider_message_id=provider_message_id)

    @classmethod
    def failed(cls, recipient: str, error_message: str) -> DispatchOutcome:
        return cls(recipient=recipient, success=False, error_message=error_message)

    def to_dict(self) -> dict[str, Any]:
        if self.success:
            return {"recipient": self.recipient, "success": True, "messageId": self.provider_message_id}
        return {"recipient": self.recipient, "success": False, "error": self.error_message}


@dataclass(frozen=True)
class DispatchSummary:
    total: int
    succeeded: int

    @property
    def failed(self) -> int:
        return self.total - self.succeeded

    @classmethod
    def from_outcomes(cls, outcomes: list[DispatchOutcome]) -> DispatchSummary:
        return cls(total=len(outcomes), succeeded=sum(1 for outcome in outcomes if outcome.success))

    def to_dict(self) -> dict[str, int]:
        return {"total": self.total, "success": self.succeeded, "failed": self.failed}


@dataclass
class DispatchReport:
    """Ordered outcomes of one bulk call plus their aggregate counts."""

    outcomes: list[DispatchOutcome] = field(default_factory=list)
    cancelled: bool = False

    @property
    def summary(self) -> DispatchSummary:
        return DispatchSummary.from_outcomes(self.outcomes)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "results": [outcome.to_dict() for outcome in self.outcomes],
            "summary": self.summary.to_dict(),
        }
        if self.cancelled:
            payload["cancelled"] = True
        return payload
