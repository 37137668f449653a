"""Unit tests for the AI chat service and OpenAI provider error mapping."""

from __future__ import annotations

import unittest
from types import SimpleNamespace
from unittest.mock import AsyncMock

import httpx
import openai

from tests.stubs import StubAIProvider
from whatsapp_gateway.core.errors import AICredentialsError, AIProviderError, AIRateLimitError
from whatsapp_gateway.core.tenant import DEFAULT_TENANT
from whatsapp_gateway.models.chat import ChatMessage
from whatsapp_gateway.providers.ai.openai_chat import OpenAIChatProvider
from whatsapp_gateway.services.chat_service import ChatService


class ChatServiceTestCase(unittest.IsolatedAsyncioTestCase):
    async def test_reply_prepends_tenant_system_prompt(self) -> None:
        provider = StubAIProvider(usage={"total_tokens": 42})
        service = ChatService(ai_provider=provider, tenant=DEFAULT_TENANT)

        reply = await service.reply([ChatMessage(role="user", content="Preciso do contracheque")])

        sent = provider.calls[0]
        self.assertEqual(sent[0].role, "system")
        self.assertEqual(sent[0].content, DEFAULT_TENANT.system_prompt())
        self.assertEqual(sent[1], ChatMessage(role="user", content="Preciso do contracheque"))
        self.assertEqual(reply.message, "Posso ajudar.")
        self.assertFalse(reply.needs_human_transfer)
        self.assertEqual(reply.usage, {"total_tokens": 42})

    async def test_context_lines_only_for_present_fields(self) -> None:
        service = ChatService(ai_provider=StubAIProvider(), tenant=DEFAULT_TENANT)

        prompt = service.build_system_prompt({"servidor_nome": "Maria", "demanda_atual": "Férias"})

        self.assertTrue(prompt.endswith("\n\nContexto do servidor atual:\n- Nome: Maria\n- Demanda em andamento: Férias"))
        self.assertNotIn("Matrícula:", prompt)

    async def test_human_transfer_flag_is_detected_and_stripped(self) -> None:
        provider = StubAIProvider(content="[TRANSFERIR_HUMANO] Vou encaminhar para um atendente.")
        service = ChatService(ai_provider=provider, tenant=DEFAULT_TENANT)

        reply = await service.reply([ChatMessage(role="user", content="Quero falar com alguém")])

        self.assertTrue(reply.needs_human_transfer)
        self.assertEqual(reply.message, "Vou encaminhar para um atendente.")

    async def test_stream_returns_provider_lines(self) -> None:
        service = ChatService(ai_provider=StubAIProvider(), tenant=DEFAULT_TENANT)

        lines = await service.stream([ChatMessage(role="user", content="Oi")])

        self.assertEqual([line async for line in lines], ['data: {"delta": "Olá"}\n\n', "data: [DONE]\n\n"])


def _status_error(error_class: type[openai.APIStatusError], status_code: int) -> openai.APIStatusError:
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    response = httpx.Response(status_code, request=request)
    return error_class("error", response=response, body=None)


def _client(create: AsyncMock) -> SimpleNamespace:
    return SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))


class OpenAIChatProviderTestCase(unittest.IsolatedAsyncioTestCase):
    def test_missing_api_key(self) -> None:
        with self.assertRaises(AIProviderError) as ctx:
            OpenAIChatProvider(api_key=None)
        self.assertEqual(ctx.exception.message, "OPENAI_API_KEY is not configured")

    async def test_complete_maps_response(self) -> None:
        response = SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content="Olá!"))],
            usage=SimpleNamespace(model_dump=lambda: {"prompt_tokens": 10, "completion_tokens": 2, "total_tokens": 12}),
        )
        create = AsyncMock(return_value=response)
        provider = OpenAIChatProvider(api_key=None, client=_client(create), model="gpt-4o-mini", max_tokens=1000)

        completion = await provider.complete([ChatMessage(role="user", content="Oi")])

        self.assertEqual(completion.content, "Olá!")
        self.assertEqual(completion.usage["total_tokens"], 12)
        create.assert_awaited_once_with(
            model="gpt-4o-mini",
            messages=[{"role": "user", "content": "Oi"}],
            max_tokens=1000,
        )

    async def test_status_errors_are_translated(self) -> None:
        cases = [
            (openai.RateLimitError, 429, AIRateLimitError, 429),
            (openai.AuthenticationError, 401, AICredentialsError, 402),
            (openai.PermissionDeniedError, 403, AIProviderError, 500),
            (openai.InternalServerError, 503, AIProviderError, 500),
        ]
        for error_class, status_code, expected_class, expected_status in cases:
            with self.subTest(status_code=status_code):
                create = AsyncMock(side_effect=_status_error(error_class, status_code))
                provider = OpenAIChatProvider(api_key=None, client=_client(create))

                with self.assertRaises(expected_class) as ctx:
                    await provider.complete([ChatMessage(role="user", content="Oi")])

                self.assertEqual(ctx.exception.status_code, expected_status)

        self.assertEqual(ctx.exception.message, "OpenAI API error: 503")

    async def test_stream_yields_sse_lines_and_done_marker(self) -> None:
        chunk = SimpleNamespace(model_dump_json=lambda: '{"id": "chunk-1"}')

        async def chunks():
            yield chunk

        create = AsyncMock(return_value=chunks())
        provider = OpenAIChatProvider(api_key=None, client=_client(create))

        lines = await provider.stream([ChatMessage(role="user", content="Oi")])

        self.assertEqual([line async for line in lines], ['data: {"id": "chunk-1"}\n\n', "data: [DONE]\n\n"])
        self.assertTrue(create.await_args.kwargs["stream"])


if __name__ == "__main__":
    unittest.main()
