"""CLI entry point for Feedsmith."""

import asyncio
import sys
from pathlib import Path
from typing import Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from feedsmith.config.logging import setup_logging
from feedsmith.config.manager import ConfigManager
from feedsmith.config.schema import GlobalConfig
from feedsmith.feeds.models import Channel
from feedsmith.feeds.writer import FeedWriter
from feedsmith.sources import build_channel, get_source
from feedsmith.sources.ivoox import normalize_channel_name
from feedsmith.utils.errors import FeedsmithError
from feedsmith.utils.http import create_client

app = typer.Typer(
    name="feedsmith",
    help="Build podcast RSS feeds from podcast hosting sites",
    no_args_is_help=True,
)
console = Console()
# Status output when the feed itself goes to stdout
err_console = Console(stderr=True)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
) -> None:
    """Feedsmith - turn a podcast channel page into an RSS feed."""
    setup_logging(verbose=verbose, log_file=log_file)
    ctx.obj = {"verbose": verbose, "log_file": log_file}


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from feedsmith import __version__

    console.print(f"[bold cyan]Feedsmith[/bold cyan] v{__version__}")


@app.command("generate")
def generate_command(
    ctx: typer.Context,
    channel_name: str = typer.Argument(..., help="Channel name to search for"),
    source: str | None = typer.Option(
        None, "--source", "-s", help="Hosting site (default: config default_source)"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write the feed to this file instead of stdout"
    ),
    save: bool = typer.Option(
        False, "--save", help="Write the feed to <default_output_dir>/<channel>.xml"
    ),
    partial: bool = typer.Option(
        False, "--partial", help="Skip episodes that fail instead of aborting"
    ),
    max_concurrency: int | None = typer.Option(
        None, "--max-concurrency", min=0, help="Episode pages fetched at once (0 = no limit)"
    ),
) -> None:
    """Scrape a channel and generate its RSS feed.

    Examples:
        feedsmith generate "la rosa de los vientos"

        feedsmith generate "la rosa de los vientos" -o rosa.xml --partial
    """
    status_console = console if (output or save) else err_console

    async def run_generate() -> None:
        try:
            config = ConfigManager().load_config()

            options = ctx.obj or {}
            setup_logging(
                verbose=bool(options.get("verbose")),
                log_file=options.get("log_file"),
                level=config.log_level,
            )

            async with create_client(config.http) as client:
                channel_source = get_source(
                    source or config.default_source,
                    client,
                    config,
                    allow_partial=True if partial else None,
                    max_concurrency=max_concurrency,
                )
                with Progress(
                    SpinnerColumn(),
                    TextColumn("[progress.description]{task.description}"),
                    console=status_console,
                    transient=True,
                ) as progress:
                    progress.add_task(f"Scraping '{channel_name}'...", total=None)
                    channel = await build_channel(channel_source, channel_name)

            if channel is None:
                status_console.print(
                    f"[yellow]⚠[/yellow] Channel '{channel_name}' not found, no feed generated"
                )
                sys.exit(1)

            writer = FeedWriter()
            destination = output
            if destination is None and save:
                destination = (
                    config.default_output_dir.expanduser()
                    / f"{normalize_channel_name(channel_name)}.xml"
                )

            if destination is None:
                print(writer.render(channel))
                return

            path = writer.write(channel, destination)
            _print_summary(channel, path)

        except FeedsmithError as e:
            status_console.print(f"[red]✗[/red] Error: {e}")
            sys.exit(1)
        except OSError as e:
            status_console.print(f"[red]✗[/red] Could not write feed: {e}")
            sys.exit(1)

    asyncio.run(run_generate())


def _print_summary(channel: Channel, path: Path) -> None:
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Channel", channel.name)
    table.add_row("Author", channel.author or "—")
    table.add_row("Site", channel.site_url)
    table.add_row("Episodes", str(len(channel.episodes)))
    table.add_row("Output", str(path))

    console.print(table)
    console.print(f"\n[green]✓[/green] Feed written to [bold]{path}[/bold]")


@app.command("config")
def config_command(
    action: str = typer.Argument(..., help="Action: show or set <key> <value>"),
    key: str | None = typer.Argument(None, help="Config key, dotted for nested (for 'set')"),
    value: str | None = typer.Argument(None, help="Config value (for 'set' action)"),
) -> None:
    """Manage Feedsmith configuration.

    Actions:
        show: Display current configuration
        set:  Set a configuration value

    Examples:
        feedsmith config show

        feedsmith config set log_level DEBUG

        feedsmith config set http.max_concurrency 4
    """
    try:
        manager = ConfigManager()

        if action == "show":
            config = manager.load_config()

            console.print("\n[bold]Feedsmith Configuration[/bold]\n")

            table = Table(show_header=False, box=None)
            table.add_column("Key", style="cyan")
            table.add_column("Value", style="white")

            table.add_row("Config file", str(manager.config_file))
            table.add_row("", "")
            table.add_row("Output directory", str(config.default_output_dir))
            table.add_row("Log level", config.log_level)
            table.add_row("Default source", config.default_source)
            table.add_row("Partial episodes", "✓" if config.allow_partial else "✗")
            table.add_row("HTTP timeout", f"{config.http.timeout_seconds:g}s")
            table.add_row("Max concurrency", str(config.http.max_concurrency or "unlimited"))

            console.print(table)

        elif action == "set":
            if not key or value is None:
                console.print("[red]✗[/red] Usage: feedsmith config set <key> <value>")
                sys.exit(1)

            config = manager.load_config()
            data = config.model_dump(mode="json")

            if not _set_dotted(data, key, value):
                console.print(f"[red]✗[/red] Unknown config key: {key}")
                console.print("\nAvailable keys:")
                for field_name in GlobalConfig.model_fields.keys():
                    console.print(f"  • {field_name}")
                sys.exit(1)

            try:
                updated = GlobalConfig.model_validate(data)
            except ValidationError as e:
                console.print(f"[red]✗[/red] Invalid value for {key}: {e.errors()[0]['msg']}")
                sys.exit(1)

            manager.save_config(updated)
            console.print(f"[green]✓[/green] Set [cyan]{key}[/cyan] = [yellow]{value}[/yellow]")

        else:
            console.print(f"[red]✗[/red] Unknown action: {action}")
            console.print("Valid actions: show, set")
            sys.exit(1)

    except FeedsmithError as e:
        console.print(f"[red]✗[/red] Error: {e}")
        sys.exit(1)


def _set_dotted(data: dict[str, Any], key: str, value: str) -> bool:
    """Set ``a.b.c`` in nested dicts; False if the path does not exist."""
    *parents, leaf = key.split(".")
    target: Any = data
    for part in parents:
        target = target.get(part) if isinstance(target, dict) else None
        if not isinstance(target, dict):
            return False
    if leaf not in target or isinstance(target[leaf], dict):
        return False
    target[leaf] = value
    return True


if __name__ == "__main__":
    app()
