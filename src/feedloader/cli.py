"""CLI entry point."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from feedloader.core.config import Settings, get_settings
from feedloader.core.exceptions import ConfigurationError
from feedloader.http.client import HttpxTransport
from feedloader.loader.remote import RemoteFeedLoader
from feedloader.models.results import LoadResult, LoadSuccess
from feedloader.protocols.transport import Transport

app = typer.Typer(
    name="feedloader",
    help="Fetch and decode remote JSON feeds",
    no_args_is_help=True,
)
console = Console()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _build_transport(settings: Settings) -> Transport:
    return HttpxTransport.from_settings(settings)


async def _load(url: str, transport: Transport) -> LoadResult:
    try:
        return await RemoteFeedLoader(url, transport).load()
    finally:
        close = getattr(transport, "close", None)
        if close is not None:
            await close()


@app.command()
def load(
    url: Optional[str] = typer.Argument(None, help="Feed URL (defaults to FEEDLOADER_FEED_URL)"),
) -> None:
    """Load a feed and print its items."""
    try:
        settings = get_settings()
    except ConfigurationError as e:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        raise typer.Exit(code=2) from e

    _configure_logging(settings.log_level)
    feed_url = url or settings.feed_url

    result = asyncio.run(_load(feed_url, _build_transport(settings)))

    if not isinstance(result, LoadSuccess):
        console.print(f"[red]Failed to load {escape(feed_url)}:[/red] {result.error.value}")
        raise typer.Exit(code=1)

    table = Table(title=f"{escape(feed_url)} ({len(result.items)} items)")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Location")
    table.add_column("Image")
    for item in result.items:
        table.add_row(
            str(item.id),
            escape(item.description or "-"),
            escape(item.location or "-"),
            escape(str(item.image_url)),
        )
    console.print(table)


@app.command()
def version() -> None:
    """Show version."""
    from feedloader import __version__

    console.print(f"feedloader {__version__}")


if __name__ == "__main__":
    app()
