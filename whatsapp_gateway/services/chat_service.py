"""AI chat proxy: tenant prompt, servant context and human handoff detection."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Any

from whatsapp_gateway.core.tenant import HUMAN_TRANSFER_FLAG, TenantConfig
from whatsapp_gateway.interfaces.ai_provider import AIProvider
from whatsapp_gateway.models.chat import ChatMessage, ChatReply

logger = logging.getLogger(__name__)

CONTEXT_LABELS = (
    ("servidor_nome", "Nome"),
    ("servidor_matricula", "Matrícula"),
    ("servidor_secretaria", "Secretaria"),
    ("demanda_atual", "Demanda em andamento"),
)


class ChatService:
    def __init__(self, ai_provider: AIProvider, tenant: TenantConfig) -> None:
        self.ai_provider = ai_provider
        self.tenant = tenant

    def build_system_prompt(self, context: dict[str, Any] | None = None) -> str:
        prompt = self.tenant.system_prompt()
        if context is None:
            return prompt

        prompt += "\n\nContexto do servidor atual:"
        for key, label in CONTEXT_LABELS:
            value = context.get(key)
            if value:
                prompt += f"\n- {label}: {value}"
        return prompt

    def build_messages(
        self,
        messages: list[ChatMessage],
        context: dict[str, Any] | None = None,
    ) -> list[ChatMessage]:
        system = ChatMessage(role="system", content=self.build_system_prompt(context))
        return [system, *messages]

    async def reply(self, messages: list[ChatMessage], context: dict[str, Any] | None = None) -> ChatReply:
        logger.info("AI chat request: messages=%d has_context=%s stream=False", len(messages), context is not None)
        completion = await self.ai_provider.complete(self.build_messages(messages, context))

        needs_human_transfer = HUMAN_TRANSFER_FLAG in completion.content
        clean_message = completion.content.replace(HUMAN_TRANSFER_FLAG, "", 1).strip()
        logger.info(
            "AI chat response: needs_human_transfer=%s message_length=%d",
            needs_human_transfer,
            len(clean_message),
        )
        return ChatReply(
            message=clean_message,
            needs_human_transfer=needs_human_transfer,
            usage=completion.usage,
        )

    async def stream(
        self,
        messages: list[ChatMessage],
        context: dict[str, Any] | None = None,
    ) -> AsyncIterator[str]:
        logger.info("AI chat request: messages=%d has_context=%s stream=True", len(messages), context is not None)
        return await self.ai_provider.stream(self.build_messages(messages, context))
