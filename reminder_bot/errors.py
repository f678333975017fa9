"""Shared error types for reminder_bot.

Parse failures are split by kind so callers can tell malformed input
apart from a recognized command that is not supported yet.
"""

from enum import Enum


class ParseErrorKind(str, Enum):
    """Flat classification of command parse failures."""
    PARSE_ERROR = "parse_error"
    UNKNOWN_COMMAND = "unknown_command"
    NOT_IMPLEMENTED = "not_implemented"


class ReminderBotError(Exception):
    """Base error for reminder_bot."""


class CommandError(ReminderBotError):
    """A chat command could not be turned into a Command."""

    kind: ParseErrorKind = ParseErrorKind.PARSE_ERROR


class CommandSyntaxError(CommandError):
    """Input doesn't match any command shape (missing delimiter, bad duration)."""

    kind = ParseErrorKind.PARSE_ERROR


class InvalidDurationError(CommandSyntaxError):
    """Duration token like '2h' is malformed."""


class UnknownCommandError(CommandError):
    """Command keyword isn't registered."""

    kind = ParseErrorKind.UNKNOWN_COMMAND


class CommandNotImplementedError(CommandError):
    """Command keyword is registered but has no handler yet."""

    kind = ParseErrorKind.NOT_IMPLEMENTED


class ChannelError(ReminderBotError):
    """Messaging channel call failed (network/HTTP/payload)."""


class DeliveryError(ReminderBotError):
    """A reminder could not be delivered to its chat."""


class DelayRangeError(ReminderBotError):
    """Parsed delay is longer than a timedelta can hold (about 2.7 million years)."""
