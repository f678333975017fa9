"""Messaging channel clients."""

from reminder_bot.channels.telegram import (
    Event,
    TelegramClient,
    last_update_id,
    parse_update,
    parse_updates,
)

__all__ = ["Event", "TelegramClient", "last_update_id", "parse_update", "parse_updates"]
