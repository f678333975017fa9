"""Chat command parsing."""

from reminder_bot.parser.commands import (
    MAX_AMOUNT,
    AtCommand,
    Command,
    LaterCommand,
    Unit,
    extract_command,
    parse,
    parse_duration,
)

__all__ = [
    "MAX_AMOUNT",
    "AtCommand",
    "Command",
    "LaterCommand",
    "Unit",
    "extract_command",
    "parse",
    "parse_duration",
]
