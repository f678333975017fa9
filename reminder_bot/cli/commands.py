"""CLI commands for reminder_bot."""

import asyncio

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from reminder_bot import __logo__, __version__
from reminder_bot.errors import ChannelError, CommandError
from reminder_bot.parser import AtCommand, LaterCommand, parse
from reminder_bot.replies import reply_for

app = typer.Typer(
    name="reminder-bot",
    help=f"{__logo__} reminder-bot - chat reminders",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"{__logo__} reminder-bot v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
    log_level: str = typer.Option(None, "--log-level", help="Log level (default: config / LOG_LEVEL)"),
):
    """reminder-bot - chat reminders."""
    from reminder_bot.config.loader import load_config
    from reminder_bot.logging_config import setup_logging

    config = load_config()
    setup_logging(log_level or config.log_level, config.log_file)


# ============================================================================
# Shared helpers
# ============================================================================


def _make_client():
    """Build a TelegramClient from config. Exits with rich error if no token."""
    from reminder_bot.channels.telegram import TelegramClient
    from reminder_bot.config.loader import load_config

    config = load_config()
    if not config.telegram.token:
        console.print("[red]Error: No Telegram bot token configured.[/red]")
        console.print("Set REMINDER_BOT_TELEGRAM__TOKEN or telegram.token in ~/.reminder_bot/config.json")
        raise typer.Exit(1)

    client = TelegramClient(
        config.telegram.token,
        url=config.telegram.api_url,
        poll_timeout=config.telegram.poll_timeout,
    )
    return client, config


def is_allowed(sender: str, allow_from: list[str]) -> bool:
    """Empty allow list lets everyone through."""
    if not allow_from:
        return True
    return sender in allow_from


async def poll_once(client, offset: int, allow_from: list[str] | None = None) -> int:
    """
    Fetch one batch of updates and reply to each command.

    Plain chat text (not starting with '/') gets no reply. A failed reply
    is logged and skipped so one unreachable chat can't stall the batch.

    Returns:
        The offset for the next call (last update_id + 1).
    """
    events = await client.get_updates(offset)
    for event in events:
        offset = max(offset, event.update_id + 1)
        if not is_allowed(event.from_user, allow_from or []):
            logger.warning(f"Ignoring message from {event.from_user}: not in allow list")
            continue
        if not event.text.startswith("/"):
            continue
        logger.info(f"Message from {event.from_user} in chat {event.chat_id}: {event.text}")
        try:
            await client.send(str(event.chat_id), reply_for(event.text))
        except ChannelError as e:
            logger.error(f"Reply to chat {event.chat_id} failed: {e}")

    # Non-text updates never become events but must not be fetched again.
    if client.last_update_id is not None:
        offset = max(offset, client.last_update_id + 1)
    return offset


# ============================================================================
# Commands
# ============================================================================


@app.command("parse")
def parse_command(
    text: str = typer.Argument(..., help="Chat message, e.g. '/later 2h buy milk'"),
):
    """Parse a chat command and show the result."""
    try:
        command = parse(text)
    except CommandError as e:
        console.print(f"[red]{e.kind.value}[/red]: {e}")
        raise typer.Exit(1)

    table = Table(title="Command")
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    if isinstance(command, LaterCommand):
        table.add_row("command", "later")
        table.add_row("amount", str(command.amount))
        table.add_row("unit", command.unit.name.lower())
        table.add_row("message", command.message)
    elif isinstance(command, AtCommand):
        table.add_row("command", "at")
        table.add_row("date", command.date)
        table.add_row("message", command.message)

    console.print(table)


@app.command()
def send(
    chat_id: str = typer.Argument(..., help="Target chat ID"),
    text: str = typer.Argument(..., help="Message text"),
):
    """Send a single message through Telegram."""
    client, _ = _make_client()

    async def run():
        async with client:
            return await client.send(chat_id, text)

    try:
        asyncio.run(run())
    except ChannelError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Sent to {chat_id}")


@app.command()
def listen(
    once: bool = typer.Option(False, "--once", help="Handle one batch of updates and exit"),
    offset: int = typer.Option(0, "--offset", help="First update id to fetch"),
):
    """Long-poll Telegram and reply to /later and /at commands."""
    client, config = _make_client()
    allow_from = config.telegram.allow_from

    console.print(f"{__logo__} Listening for commands...")

    async def run():
        next_offset = offset
        async with client:
            while True:
                try:
                    next_offset = await poll_once(client, next_offset, allow_from)
                except ChannelError as e:
                    if once:
                        raise
                    logger.error(f"Polling error: {e}")
                    await asyncio.sleep(5)
                if once:
                    return next_offset

    try:
        next_offset = asyncio.run(run())
    except ChannelError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\nGoodbye!")
        return

    console.print(f"Next offset: {next_offset}")


if __name__ == "__main__":
    app()
