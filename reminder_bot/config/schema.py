"""Configuration schema using Pydantic."""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TELEGRAM_API_URL = "https://api.telegram.org"


class TelegramConfig(BaseModel):
    """Telegram channel configuration."""
    token: str = ""  # Bot token from @BotFather
    api_url: str = DEFAULT_TELEGRAM_API_URL
    poll_timeout: int = Field(default=60, ge=0, le=600, description="Long polling timeout in seconds")
    allow_from: list[str] = Field(default_factory=list)  # Allowed usernames, empty = everyone


class Config(BaseSettings):
    """Root configuration for reminder_bot."""
    model_config = SettingsConfigDict(
        env_prefix="REMINDER_BOT_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    telegram: TelegramConfig = Field(default_factory=TelegramConfig)
    log_level: str = "INFO"
    log_file: str | None = None  # e.g. "~/.reminder_bot/logs/bot.log"
