"""Base notifier interface for delivering due reminders."""

from abc import ABC, abstractmethod

from reminder_bot.reminder.models import Reminder


class Notifier(ABC):
    """
    Delivers a reminder's message to the chat it was created from.

    Keeps "a reminder is due" separate from "how it gets delivered":
    whatever fires reminders only needs a Notifier, not a channel client.
    """

    @abstractmethod
    async def notify(self, reminder: Reminder) -> None:
        """
        Deliver a reminder.

        Args:
            reminder: The reminder to deliver.

        Raises:
            DeliveryError: If the reminder could not be delivered.
        """
        pass
