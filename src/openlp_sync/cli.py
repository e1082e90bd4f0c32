"""CLI for openlp-sync (watch a live OpenLP instance, parse references)."""

import asyncio
import json
from dataclasses import asdict
from typing import Annotated, Any

import typer
from loguru import logger

from openlp_sync.api import OpenLPApi
from openlp_sync.config import API_PORT, DEFAULT_HOSTS, RETRY_DELAY, WS_PORT
from openlp_sync.connection import ConnectionManager
from openlp_sync.engine import SyncEngine
from openlp_sync.logging_config import configure_logging
from openlp_sync.models.service import Item, Service, Slide
from openlp_sync.protocols import ApiProtocol
from openlp_sync.scripture import CitationParseError, parse_scripture_title

app = typer.Typer(help="openlp-sync: follow what is live on an OpenLP instance.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def describe_event(kind: str, value: Any) -> str:
    """Render one engine event as a single line."""
    if value is None:
        return f"{kind}: (none)"
    if isinstance(value, Service):
        return f"service: revision {value.id}, {len(value)} items"
    if isinstance(value, Item):
        line = f"item: {value.title} [{value.type}]"
        try:
            reference = value.scripture
        except CitationParseError:
            logger.debug("No citation in item title {!r}", value.title)
            reference = None
        if reference is not None:
            line += f" ({reference.reference}, {reference.abbreviation})"
        return line
    if isinstance(value, Slide):
        first_line = value.text.splitlines()[0] if value.text else ""
        tag = f" {value.tag}" if value.tag else ""
        return f"slide {value.index}{tag}: {first_line[:60]}"
    return f"{kind}: {value}"


def build_engine(api: ApiProtocol) -> SyncEngine:
    """Create an engine that echoes every event."""
    engine = SyncEngine(api)
    for kind in ("mode", "service", "item", "slide"):
        engine.on(kind, lambda value, kind=kind: typer.echo(describe_event(kind, value)))
    return engine


@app.command()
def watch(
    hosts: Annotated[
        list[str] | None,
        typer.Argument(help="OpenLP hosts, tried in order"),
    ] = None,
    api_port: int = typer.Option(API_PORT, "--api-port", help="HTTP API port"),
    ws_port: int = typer.Option(WS_PORT, "--ws-port", help="Websocket port"),
    retry_delay: float = typer.Option(
        RETRY_DELAY, "--retry-delay", help="Seconds to wait after all hosts failed"
    ),
    reconnect: bool = typer.Option(
        False, "--reconnect", "-r", help="Reconnect when the connection drops"
    ),
) -> None:
    """Connect to OpenLP and print every change to what is live."""
    api = OpenLPApi(port=api_port)
    engine = build_engine(api)
    connection = ConnectionManager(hosts or DEFAULT_HOSTS, port=ws_port, retry_delay=retry_delay)
    try:
        asyncio.run(engine.run(connection, reconnect=reconnect, strict=False))
    except KeyboardInterrupt:
        logger.info("Interrupted")


@app.command()
def reference(
    title: str = typer.Argument(..., help="Bible item title, as shown by OpenLP"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Parse a scripture reference from a bible item title."""
    try:
        parsed = parse_scripture_title(title)
    except CitationParseError as e:
        typer.echo(f"No citation: {e}")
        raise typer.Exit(1) from e

    if output_json:
        typer.echo(json.dumps(asdict(parsed), indent=2))
        return

    typer.echo(f"{parsed.reference} ({parsed.abbreviation})")
    typer.echo(f"  book: {parsed.book}")
    typer.echo(
        f"  from: {parsed.chapter_start}:{parsed.chapter_start_verse_start}"
        f"-{parsed.chapter_start_verse_end or ''}"
    )
    typer.echo(
        f"  to:   {parsed.chapter_end}:{parsed.chapter_end_verse_start}"
        f"-{parsed.chapter_end_verse_end or ''}"
    )
    typer.echo(f"  translation: {parsed.translation}")
    typer.echo(f"  copyright: {parsed.copyright}")
