"""Application settings management."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global settings loaded from environment variables."""

    app_name: str = "WhatsApp Gateway"
    app_version: str = "0.1.0"
    environment: str = "development"
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    whatsapp_access_token: str | None = Field(default=None, alias="WHATSAPP_ACCESS_TOKEN")
    whatsapp_phone_number_id: str | None = Field(default=None, alias="WHATSAPP_PHONE_NUMBER_ID")
    whatsapp_api_base_url: str = Field(default="https://graph.facebook.com", alias="WHATSAPP_API_BASE_URL")
    whatsapp_api_version: str = Field(default="v18.0", alias="WHATSAPP_API_VERSION")
    whatsapp_request_timeout_seconds: float = Field(default=30.0, alias="WHATSAPP_REQUEST_TIMEOUT_SECONDS")
    bulk_default_delay_ms: int = Field(default=100, ge=0, alias="BULK_DEFAULT_DELAY_MS")
    bulk_max_duration_seconds: float | None = Field(default=None, gt=0, alias="BULK_MAX_DURATION_SECONDS")

    openai_api_key: str | None = Field(default=None, alias="OPENAI_API_KEY")
    openai_model: str = Field(default="gpt-4o-mini", alias="OPENAI_MODEL")
    openai_max_tokens: int = Field(default=1000, alias="OPENAI_MAX_TOKENS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="forbid",
    )

    @property
    def whatsapp_configured(self) -> bool:
        return bool(self.whatsapp_access_token and self.whatsapp_phone_number_id)


settings = Settings()
