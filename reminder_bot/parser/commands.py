"""
Chat command grammar.

Turns a raw chat message such as ``/later 2h buy milk`` into a typed
command value. Only two keywords exist:

    /later <duration> <message>   relative reminder
    /at <date> <message>          absolute reminder (reserved, not implemented)

Parsing is a pure function of the input string. Every failure raises a
``CommandError`` subclass and aborts the whole parse.
"""

import re
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Callable, Union

from loguru import logger

from reminder_bot.errors import (
    CommandNotImplementedError,
    CommandSyntaxError,
    DelayRangeError,
    InvalidDurationError,
    UnknownCommandError,
)

# Amounts are unsigned 64-bit values.
MAX_AMOUNT = 2**64 - 1

_UNSIGNED_INT = re.compile(r"\+?[0-9]+")


class Unit(str, Enum):
    """Time unit of a duration token, valued by its suffix letter."""
    SECONDS = "s"
    MINUTES = "m"
    HOURS = "h"
    DAYS = "d"

    @property
    def seconds(self) -> int:
        """Length of one unit in seconds."""
        return _UNIT_SECONDS[self]

    def to_timedelta(self, amount: int) -> timedelta:
        """Span of ``amount`` units.

        Raises:
            DelayRangeError: If the span exceeds timedelta.max
        """
        try:
            return timedelta(seconds=amount * self.seconds)
        except OverflowError as e:
            raise DelayRangeError(f"{amount}{self.value} is out of range") from e


_UNIT_SECONDS = {
    Unit.SECONDS: 1,
    Unit.MINUTES: 60,
    Unit.HOURS: 60 * 60,
    Unit.DAYS: 24 * 60 * 60,
}


@dataclass(frozen=True)
class LaterCommand:
    """Remind after a relative delay."""
    amount: int
    unit: Unit
    message: str

    @property
    def delay(self) -> timedelta:
        return self.unit.to_timedelta(self.amount)


@dataclass(frozen=True)
class AtCommand:
    """Remind at an absolute date."""
    date: str
    message: str


Command = Union[LaterCommand, AtCommand]


def _parse_unsigned(text: str) -> int:
    if not _UNSIGNED_INT.fullmatch(text):
        raise InvalidDurationError(f"Not an unsigned integer: {text!r}")
    value = int(text)
    if value > MAX_AMOUNT:
        raise InvalidDurationError(f"Amount out of range: {text!r}")
    return value


def parse_duration(token: str) -> tuple[int, Unit]:
    """Parse a compact duration token like '2h', '30m' or '42' into (amount, unit).

    Only the last character decides the unit. A trailing digit means the
    whole token is a number of seconds; a trailing s/m/h/d is stripped and
    the rest must be a number. Anything else is rejected, so '1dd' and
    '1d1' both fail.

    Args:
        token: Duration token (e.g. "2h", "30m", "1d", "42")

    Returns:
        Tuple of (amount, unit)

    Raises:
        InvalidDurationError: If the token is malformed
    """
    if not token:
        raise InvalidDurationError("Empty duration")

    last = token[-1]

    if last in "0123456789":
        return _parse_unsigned(token), Unit.SECONDS

    if last in ("s", "m", "h", "d"):
        return _parse_unsigned(token[:-1]), Unit(last)

    raise InvalidDurationError(f"Unknown duration unit {last!r} in {token!r}")


def parse_later(rest: str) -> LaterCommand:
    """Parse the body of '/later <duration> <message>'."""
    token, sep, message = rest.partition(" ")
    try:
        amount, unit = parse_duration(token)
    except InvalidDurationError as e:
        raise CommandSyntaxError(f"Invalid duration: {e}") from e

    # No delimiter means no message; an empty message after it is accepted.
    if not sep:
        raise CommandSyntaxError("Missing reminder message")

    return LaterCommand(amount=amount, unit=unit, message=message)


def parse_at(rest: str) -> AtCommand:
    """Parse the body of '/at <date> <message>'."""
    raise CommandNotImplementedError("/at is not supported yet")


_PARSERS: dict[str, Callable[[str], Command]] = {
    "/later": parse_later,
    "/at": parse_at,
}


def extract_command(text: str) -> tuple[str, str] | None:
    """Split a chat message into (keyword, remainder), or None if there's no remainder."""
    keyword, sep, rest = text.partition(" ")
    if not sep:
        return None
    return keyword, rest


def parse(text: str) -> Command:
    """Parse a raw chat message into a Command.

    Raises:
        CommandSyntaxError: Input doesn't have a recognizable shape
        UnknownCommandError: Keyword isn't /later or /at
        CommandNotImplementedError: Keyword is recognized but unsupported
    """
    extracted = extract_command(text)
    if extracted is None:
        logger.debug(f"No command/remainder split in {text!r}")
        raise CommandSyntaxError("Expected '<command> <arguments>'")

    keyword, rest = extracted
    handler = _PARSERS.get(keyword)
    if handler is None:
        logger.debug(f"Unknown command keyword {keyword!r}")
        raise UnknownCommandError(f"Unknown command: {keyword}")

    return handler(rest)
