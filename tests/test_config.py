"""Tests for configuration loading."""

import json

from reminder_bot.config import Config, load_config
from reminder_bot.config.loader import convert_keys


def test_defaults(isolated_home):
    config = load_config()

    assert config.telegram.token == ""
    assert config.telegram.api_url == "https://api.telegram.org"
    assert config.telegram.poll_timeout == 60
    assert config.telegram.allow_from == []
    assert config.log_level == "INFO"
    assert config.log_file is None


def test_env_overrides(isolated_home, monkeypatch):
    monkeypatch.setenv("REMINDER_BOT_TELEGRAM__TOKEN", "123:abc")
    monkeypatch.setenv("REMINDER_BOT_LOG_LEVEL", "DEBUG")

    config = Config()

    assert config.telegram.token == "123:abc"
    assert config.log_level == "DEBUG"


def test_load_from_file_with_camel_case(isolated_home):
    path = isolated_home / ".reminder_bot" / "config.json"
    path.parent.mkdir()
    path.write_text(json.dumps({
        "telegram": {"token": "t0k", "apiUrl": "http://localhost:8081", "pollTimeout": 5},
        "logLevel": "WARNING",
    }))

    config = load_config()

    assert config.telegram.token == "t0k"
    assert config.telegram.api_url == "http://localhost:8081"
    assert config.telegram.poll_timeout == 5
    assert config.log_level == "WARNING"


def test_invalid_file_falls_back_to_defaults(isolated_home):
    path = isolated_home / "broken.json"
    path.write_text("{not json")

    config = load_config(path)

    assert config.telegram.token == ""


def test_invalid_values_fall_back_to_defaults(isolated_home):
    path = isolated_home / "bad.json"
    path.write_text(json.dumps({"telegram": {"pollTimeout": -1}}))

    assert load_config(path).telegram.poll_timeout == 60


def test_convert_keys_nested():
    assert convert_keys({"telegram": {"allowFrom": ["a"], "apiUrl": "x"}}) == {
        "telegram": {"allow_from": ["a"], "api_url": "x"}
    }
