"""Configuration for reminder_bot."""

from reminder_bot.config.loader import get_config_path, load_config
from reminder_bot.config.schema import Config, TelegramConfig

__all__ = ["Config", "TelegramConfig", "get_config_path", "load_config"]
