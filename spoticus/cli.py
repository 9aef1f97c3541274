"""
Command-line interface for Spoticus.

Main entry point for the Spoticus CLI application.
"""
import asyncio
import logging
import sys

import typer
from rich.console import Console

from spoticus import __version__
from spoticus.commands import build_registry
from spoticus.config import ConfigError, load_config
from spoticus.dispatcher import Dispatcher
from spoticus.fetchers.kubernetes import MaptClusterFetcher
from spoticus.models import InboundMessage
from spoticus.slack import run_slack_bot
from spoticus.utils.logging import configure_logging


app = typer.Typer(
    name="spoticus",
    help="Slack bot for launching and listing mapt spot clusters",
    add_completion=False,
)

console = Console()


@app.command()
def version() -> None:
    """Display the version of Spoticus."""
    typer.echo(f"Spoticus version {__version__}")


@app.command("run")
def run(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Start the Slack bot (Socket Mode)."""
    config = load_config()
    try:
        bot_token, app_token = config.require_slack_tokens()
    except ConfigError as e:
        console.print(f"[red]FATAL: {e}[/red]")
        raise typer.Exit(1) from e

    configure_logging(logging.DEBUG if verbose else config.log_level)

    try:
        asyncio.run(run_slack_bot(bot_token, app_token, config))
    except KeyboardInterrupt:
        console.print("[yellow]Interrupted, bot stopped.[/yellow]")


@app.command("dispatch")
def dispatch(
    text: str = typer.Argument(..., help="Command text, e.g. 'launch k8s large'"),
    user: str = typer.Option("local", "--user", "-u", help="Sender ID used in replies"),
    channel: str = typer.Option("local", "--channel", "-c", help="Channel ID"),
) -> None:
    """Route a single command locally and print the reply."""
    config = load_config()
    # stdout carries only the reply
    configure_logging(config.log_level, stream=sys.stderr)
    registry = build_registry(lambda: MaptClusterFetcher.from_config(config))
    reply = Dispatcher(registry).route(InboundMessage(text=text, user=user, channel=channel))
    if reply is None:
        console.print("[dim]No reply.[/dim]")
        return
    console.print(reply, markup=False, highlight=False)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
