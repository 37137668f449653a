"""Chat completion value types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

ChatRole = Literal["user", "assistant", "system"]


@dataclass(frozen=True)
class ChatMessage:
    role: ChatRole
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class ChatCompletion:
    """Assistant text plus token usage reported by the provider."""

    content: str
    usage: dict[str, Any] | None = None


@dataclass(frozen=True)
class ChatReply:
    message: str
    needs_human_transfer: bool
    usage: dict[str, Any] | None = None
