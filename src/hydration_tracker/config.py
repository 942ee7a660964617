"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    job_token: str
    telegram_bot_token: str | None = None
    telegram_chat_id: str | None = None
    timezone: str = "UTC"
    history_days: int = 30
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def telegram_enabled(self) -> bool:
        """Return True when reminders can be sent to Telegram."""
        return bool(self.telegram_bot_token and self.telegram_chat_id)
