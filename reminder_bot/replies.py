"""User-facing replies for parsed chat commands."""

from reminder_bot.errors import CommandError, ParseErrorKind
from reminder_bot.parser import AtCommand, Command, LaterCommand, Unit, parse

USAGE = "Usage: /later <amount>[s|m|h|d] <message>, e.g. /later 2h buy milk"

_UNIT_NAMES = {
    Unit.SECONDS: "second",
    Unit.MINUTES: "minute",
    Unit.HOURS: "hour",
    Unit.DAYS: "day",
}


def describe_delay(amount: int, unit: Unit) -> str:
    """2, HOURS -> '2 hours'"""
    name = _UNIT_NAMES[unit]
    return f"{amount} {name}" if amount == 1 else f"{amount} {name}s"


def reply_for_command(command: Command) -> str:
    """Confirmation text for a successfully parsed command."""
    if isinstance(command, LaterCommand):
        return f'Reminder set: "{command.message}" in {describe_delay(command.amount, command.unit)}'
    if isinstance(command, AtCommand):
        return f'Reminder set: "{command.message}" at {command.date}'
    raise TypeError(f"Unsupported command: {command!r}")


def reply_for_error(error: CommandError) -> str:
    """Explain a parse failure to the user."""
    if error.kind == ParseErrorKind.NOT_IMPLEMENTED:
        return "This feature is coming soon."
    return f"Please check your command syntax.\n{USAGE}"


def reply_for(text: str) -> str:
    """Parse a chat message and build the reply the bot should send."""
    try:
        command = parse(text)
    except CommandError as e:
        return reply_for_error(e)
    return reply_for_command(command)
