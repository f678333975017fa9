"""Reminder delivery contract."""

from reminder_bot.notify.base import Notifier

__all__ = ["Notifier"]
