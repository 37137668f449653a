"""Schemas for the AI chat endpoint."""

from typing import Any, Literal

from pydantic import BaseModel

from whatsapp_gateway.models.chat import ChatMessage


class ChatMessageSchema(BaseModel):
    role: Literal["user", "assistant", "system"]
    content: str

    def to_message(self) -> ChatMessage:
        return ChatMessage(role=self.role, content=self.content)


class ChatContextSchema(BaseModel):
    """Known details about the public servant being served."""

    servidor_nome: str | None = None
    servidor_matricula: str | None = None
    servidor_secretaria: str | None = None
    demanda_atual: str | None = None


class ChatRequest(BaseModel):
    messages: list[ChatMessageSchema]
    context: ChatContextSchema | None = None
    stream: bool = False


class ChatResponse(BaseModel):
    message: str
    needsHumanTransfer: bool
    usage: dict[str, Any] | None = None
