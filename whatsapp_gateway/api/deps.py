"""FastAPI dependency providers."""

from fastapi import Depends, Request

from whatsapp_gateway.core.errors import GatewayUnconfiguredError
from whatsapp_gateway.core.settings import Settings, settings
from whatsapp_gateway.core.tenant import TenantConfig
from whatsapp_gateway.interfaces.ai_provider import AIProvider
from whatsapp_gateway.interfaces.messaging_provider import MessagingProvider
from whatsapp_gateway.providers.ai.openai_chat import OpenAIChatProvider
from whatsapp_gateway.providers.messaging.whatsapp_cloud import WhatsAppCloudProvider
from whatsapp_gateway.services.bulk_dispatcher import BulkDispatcher
from whatsapp_gateway.services.chat_service import ChatService
from whatsapp_gateway.services.message_service import MessageService
from whatsapp_gateway.services.phone_validator import PhoneValidationService


def get_settings() -> Settings:
    return settings


def get_tenant(request: Request) -> TenantConfig:
    return request.app.state.tenant


def get_optional_messaging_provider(app_settings: Settings = Depends(get_settings)) -> MessagingProvider | None:
    """WhatsApp provider, or ``None`` when credentials are missing."""
    if not app_settings.whatsapp_configured:
        return None
    return WhatsAppCloudProvider(
        access_token=app_settings.whatsapp_access_token,
        phone_number_id=app_settings.whatsapp_phone_number_id,
        base_url=app_settings.whatsapp_api_base_url,
        api_version=app_settings.whatsapp_api_version,
        timeout_seconds=app_settings.whatsapp_request_timeout_seconds,
    )


def get_messaging_provider(
    provider: MessagingProvider | None = Depends(get_optional_messaging_provider),
) -> MessagingProvider:
    if provider is None:
        raise GatewayUnconfiguredError()
    return provider


def get_ai_provider(app_settings: Settings = Depends(get_settings)) -> AIProvider:
    return OpenAIChatProvider(
        api_key=app_settings.openai_api_key,
        model=app_settings.openai_model,
        max_tokens=app_settings.openai_max_tokens,
    )


def get_message_service(provider: MessagingProvider = Depends(get_messaging_provider)) -> MessageService:
    return MessageService(messaging_provider=provider)


def get_bulk_dispatcher(provider: MessagingProvider = Depends(get_messaging_provider)) -> BulkDispatcher:
    return BulkDispatcher(messaging_provider=provider)


def get_phone_validation_service(
    provider: MessagingProvider | None = Depends(get_optional_messaging_provider),
) -> PhoneValidationService:
    return PhoneValidationService(messaging_provider=provider)


def get_chat_service(
    ai_provider: AIProvider = Depends(get_ai_provider),
    tenant: TenantConfig = Depends(get_tenant),
) -> ChatService:
    return ChatService(ai_provider=ai_provider, tenant=tenant)
