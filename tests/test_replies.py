"""Tests for user-facing replies."""

import pytest

from reminder_bot.errors import CommandSyntaxError
from reminder_bot.parser import AtCommand, LaterCommand, Unit
from reminder_bot.replies import (
    USAGE,
    describe_delay,
    reply_for,
    reply_for_command,
    reply_for_error,
)


@pytest.mark.parametrize(
    "amount, unit, expected",
    [
        (1, Unit.HOURS, "1 hour"),
        (2, Unit.HOURS, "2 hours"),
        (0, Unit.SECONDS, "0 seconds"),
        (1, Unit.DAYS, "1 day"),
        (30, Unit.MINUTES, "30 minutes"),
    ],
)
def test_describe_delay(amount, unit, expected):
    assert describe_delay(amount, unit) == expected


def test_reply_for_later():
    assert reply_for("/later 2h buy milk") == 'Reminder set: "buy milk" in 2 hours'


def test_reply_for_syntax_error():
    reply = reply_for("/later soon buy milk")
    assert reply.startswith("Please check your command syntax.")
    assert USAGE in reply


def test_reply_for_unknown_command():
    assert reply_for("/remind 2h buy milk").startswith("Please check your command syntax.")


def test_reply_for_plain_text():
    assert reply_for("hello").startswith("Please check your command syntax.")


def test_reply_for_at():
    assert reply_for("/at 2023-07-25 buy milk") == "This feature is coming soon."


def test_reply_for_command_variants():
    assert reply_for_command(LaterCommand(1, Unit.MINUTES, "tea")) == 'Reminder set: "tea" in 1 minute'
    assert reply_for_command(AtCommand("2023-07-25", "tea")) == 'Reminder set: "tea" at 2023-07-25'


def test_reply_for_command_rejects_other_values():
    with pytest.raises(TypeError):
        reply_for_command("not a command")


def test_reply_for_error_uses_kind():
    assert "syntax" in reply_for_error(CommandSyntaxError("bad"))
