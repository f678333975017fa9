"""Telegram Bot API client using plain HTTP form requests."""

from dataclasses import dataclass
from typing import Any

import httpx
from loguru import logger

from reminder_bot.config.schema import DEFAULT_TELEGRAM_API_URL
from reminder_bot.errors import ChannelError, DeliveryError
from reminder_bot.notify.base import Notifier
from reminder_bot.reminder.models import Reminder

DEFAULT_POLL_TIMEOUT = 60  # seconds the server may hold a getUpdates call


@dataclass(frozen=True)
class Event:
    """A text message received from a chat."""
    update_id: int
    from_user: str  # sender username
    chat_id: int
    date: int  # unix timestamp
    text: str


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_update(update: dict[str, Any]) -> Event:
    """Map one getUpdates entry to an Event.

    Raises:
        ChannelError: If a required field is missing or has the wrong type
    """
    try:
        message = update["message"]
        event = Event(
            update_id=update["update_id"],
            from_user=message["from"]["username"],
            chat_id=message["chat"]["id"],
            date=message["date"],
            text=message["text"],
        )
    except (KeyError, TypeError) as e:
        raise ChannelError(f"Malformed update: missing {e}") from e

    if not _is_int(event.update_id) or not _is_int(event.chat_id) or not _is_int(event.date):
        raise ChannelError(f"Malformed update {event.update_id!r}: ids and date must be integers")
    if not isinstance(event.text, str) or not isinstance(event.from_user, str):
        raise ChannelError(f"Malformed update {event.update_id!r}: text and username must be strings")
    return event


def parse_updates(payload: Any) -> list[Event]:
    """Map a getUpdates response body to Events.

    Updates that aren't text messages (photos, edits, membership changes)
    or that can't be decoded are skipped.

    Raises:
        ChannelError: If the body has no 'result' array
    """
    entries = payload.get("result") if isinstance(payload, dict) else None
    if not isinstance(entries, list):
        raise ChannelError("getUpdates response has no 'result' array")

    events = []
    for entry in entries:
        message = entry.get("message") if isinstance(entry, dict) else None
        if not isinstance(message, dict) or "text" not in message:
            logger.debug(f"Skipping non-text update {_update_id(entry)!r}")
            continue
        try:
            events.append(parse_update(entry))
        except ChannelError as e:
            logger.warning(f"Skipping update: {e}")
    return events


def _update_id(entry: Any) -> int | None:
    update_id = entry.get("update_id") if isinstance(entry, dict) else None
    return update_id if _is_int(update_id) else None


def last_update_id(payload: Any) -> int | None:
    """Highest update_id in a getUpdates body, skipped updates included."""
    entries = payload.get("result") if isinstance(payload, dict) else None
    ids = [i for i in map(_update_id, entries or []) if i is not None]
    return max(ids, default=None)


class TelegramClient(Notifier):
    """
    Minimal Telegram Bot API client.

    Sends messages and long-polls for updates with form-encoded POSTs,
    and delivers reminders as a Notifier.
    """

    def __init__(
        self,
        bot_id: str,
        url: str | None = None,
        client: httpx.AsyncClient | None = None,
        poll_timeout: int = DEFAULT_POLL_TIMEOUT,
    ):
        """
        Initialize the client.

        Args:
            bot_id: Bot token from @BotFather.
            url: API base URL. Defaults to the public Telegram endpoint.
            client: Optional shared httpx client; one is created (and owned) otherwise.
            poll_timeout: Long polling timeout passed to getUpdates.
        """
        self.bot_id = bot_id
        self.url = (url or DEFAULT_TELEGRAM_API_URL).rstrip("/")
        self.poll_timeout = poll_timeout
        self._owns_client = client is None
        # Long polling holds the request open, leave room on top of poll_timeout.
        self._client = client or httpx.AsyncClient(timeout=poll_timeout + 10)
        # Highest update_id seen by the last get_updates, skipped updates included.
        self.last_update_id: int | None = None

    def _method_url(self, method: str) -> str:
        return f"{self.url}/bot{self.bot_id}/{method}"

    async def _post(self, method: str, params: dict[str, str]) -> httpx.Response:
        logger.debug(f"Telegram {method} request")
        try:
            response = await self._client.post(self._method_url(method), data=params)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Telegram {method} failed: {e}")
            raise ChannelError(f"Telegram {method} failed: {e}") from e
        return response

    async def send(self, chat_id: str, text: str) -> str:
        """
        Send a plain text message.

        Args:
            chat_id: Target chat.
            text: Message body.

        Returns:
            Raw response body.
        """
        params = {
            "disable_web_page_preview": "true",
            "disable_notification": "false",
            "parse_mode": "none",
            "chat_id": str(chat_id),
            "text": text,
        }
        response = await self._post("sendMessage", params)
        return response.text

    async def get_updates(self, last_id: int | None = None) -> list[Event]:
        """
        Long-poll for new messages.

        Updates that aren't text messages are dropped, but still count
        towards last_update_id so the caller can move past them.

        Args:
            last_id: Offset of the first update to return (0 when omitted).

        Returns:
            Events in the order Telegram returned them.
        """
        params = {
            "offset": str(last_id or 0),
            "timeout": str(self.poll_timeout),
        }
        response = await self._post("getUpdates", params)
        try:
            payload = response.json()
        except ValueError as e:
            raise ChannelError(f"getUpdates returned invalid JSON: {e}") from e
        events = parse_updates(payload)
        self.last_update_id = last_update_id(payload)
        return events

    async def notify(self, reminder: Reminder) -> None:
        """Deliver a reminder to its chat."""
        try:
            await self.send(reminder.chat_id, reminder.message)
        except ChannelError as e:
            raise DeliveryError(f"Reminder {reminder.id} not delivered: {e}") from e
        logger.info(f"Delivered reminder {reminder.id} to chat {reminder.chat_id}")

    async def aclose(self) -> None:
        """Close the underlying http client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "TelegramClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
