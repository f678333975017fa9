"""Reminder identity and payload."""

from reminder_bot.reminder.models import Reminder, ReminderID

__all__ = ["Reminder", "ReminderID"]
