"""Load configuration from ~/.reminder_bot/config.json and the environment."""

import json
import re
from pathlib import Path
from typing import Any

from loguru import logger

from reminder_bot.config.schema import Config


def get_config_path() -> Path:
    """Default location of the JSON config file."""
    return Path.home() / ".reminder_bot" / "config.json"


def convert_to_snake(name: str) -> str:
    """apiUrl -> api_url"""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def convert_keys(data: Any) -> Any:
    """Recursively convert camelCase dict keys to snake_case."""
    if isinstance(data, dict):
        return {convert_to_snake(k): convert_keys(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_keys(item) for item in data]
    return data


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration.

    Values from the JSON file win; anything the file leaves out falls back
    to REMINDER_BOT_* environment variables, then to defaults.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded configuration object.
    """
    path = config_path or get_config_path()

    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return Config(**convert_keys(data))
        except (json.JSONDecodeError, ValueError) as e:
            logger.warning(f"Failed to load config from {path}: {e}")
            logger.warning("Using default configuration.")

    return Config()
