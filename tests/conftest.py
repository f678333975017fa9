"""Shared fixtures for reminder_bot tests."""

import sys
from urllib.parse import parse_qs

import httpx
import pytest
from loguru import logger


@pytest.fixture
def updates_payload() -> dict:
    """A getUpdates response with two text messages."""
    return {
        "ok": True,
        "result": [
            {
                "update_id": 10,
                "message": {
                    "message_id": 1,
                    "from": {"id": 7, "is_bot": False, "username": "user-tag"},
                    "chat": {"id": -7, "type": "group"},
                    "date": 1690096028,
                    "text": "/later 1h message 1",
                },
            },
            {
                "update_id": 11,
                "message": {
                    "message_id": 2,
                    "from": {"id": 7, "is_bot": False, "username": "user-tag"},
                    "chat": {"id": -78, "type": "group"},
                    "date": 1690096064,
                    "text": "/later 2s message 2",
                },
            },
        ],
    }


class FakeTelegram:
    """Records Bot API calls and answers them from canned responses."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.responses: dict[str, httpx.Response] = {}

    def form(self, index: int = -1) -> dict[str, str]:
        """Decoded form body of a recorded request."""
        body = self.requests[index].content.decode()
        return {k: v[0] for k, v in parse_qs(body, keep_blank_values=True).items()}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        method = request.url.path.rsplit("/", 1)[-1]
        return self.responses.get(method, httpx.Response(200, json={"ok": True, "result": []}))

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def fake_telegram() -> FakeTelegram:
    return FakeTelegram()


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Point Path.home() at an empty directory and clear bot env vars."""
    monkeypatch.setenv("HOME", str(tmp_path))
    for key in ("REMINDER_BOT_TELEGRAM__TOKEN", "REMINDER_BOT_LOG_LEVEL", "REMINDER_BOT_LOG_FILE", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    return tmp_path


@pytest.fixture(autouse=True)
def restore_logging():
    """CLI runs swap loguru's sinks; put the default stderr sink back afterwards."""
    yield
    logger.remove()
    logger.add(sys.stderr)
