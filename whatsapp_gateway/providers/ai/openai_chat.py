"""OpenAI chat completion provider."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

import openai
from openai import AsyncOpenAI

from whatsapp_gateway.core.errors import AICredentialsError, AIProviderError, AIRateLimitError
from whatsapp_gateway.interfaces.ai_provider import AIProvider
from whatsapp_gateway.models.chat import ChatCompletion, ChatMessage

logger = logging.getLogger(__name__)


class OpenAIChatProvider(AIProvider):
    def __init__(
        self,
        api_key: str | None,
        *,
        model: str = "gpt-4o-mini",
        max_tokens: int = 1000,
        client: AsyncOpenAI | None = None,
    ) -> None:
        if client is None and not api_key:
            raise AIProviderError("OPENAI_API_KEY is not configured")

        self.client = client or AsyncOpenAI(api_key=api_key)
        self.model = model
        self.max_tokens = max_tokens

    async def complete(self, messages: list[ChatMessage]) -> ChatCompletion:
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[message.to_dict() for message in messages],
                max_tokens=self.max_tokens,
            )
        except openai.APIStatusError as exc:
            raise _translate_status_error(exc) from exc

        content = ""
        if response.choices:
            content = response.choices[0].message.content or ""
        usage = response.usage.model_dump() if response.usage is not None else None
        return ChatCompletion(content=content, usage=usage)

    async def stream(self, messages: list[ChatMessage]) -> AsyncIterator[str]:
        try:
            chunks = await self.client.chat.completions.create(
                model=self.model,
                messages=[message.to_dict() for message in messages],
                max_tokens=self.max_tokens,
                stream=True,
            )
        except openai.APIStatusError as exc:
            raise _translate_status_error(exc) from exc

        return _sse_lines(chunks)


async def _sse_lines(chunks) -> AsyncIterator[str]:
    async for chunk in chunks:
        yield f"data: {chunk.model_dump_json()}\n\n"
    yield "data: [DONE]\n\n"


def _translate_status_error(exc: openai.APIStatusError) -> AIProviderError:
    logger.error("OpenAI API error: status=%s body=%s", exc.status_code, exc.message)
    if exc.status_code == 429:
        return AIRateLimitError()
    if exc.status_code in (401, 402):
        return AICredentialsError()
    return AIProviderError(f"OpenAI API error: {exc.status_code}")
