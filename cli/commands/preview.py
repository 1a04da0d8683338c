"""Print the calendar file for an event without delivering it."""

import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from addtocal.extraction import extract_event
from cli.commands.options import EventOptions, event_attributes
from cli.context import get_context
from cli.display import EventRenderer, console, format_path

logger = logging.getLogger(__name__)


def preview_command(
    title: EventOptions.title = None,
    description: EventOptions.description = None,
    location: EventOptions.location = None,
    url: EventOptions.url = None,
    start: EventOptions.start = None,
    end: EventOptions.end = None,
    alarm_minutes: EventOptions.alarm_minutes = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the calendar file here instead of stdout"),
    ] = None,
    summary: Annotated[
        bool,
        typer.Option("--summary", help="Show the event fields instead of the file"),
    ] = False,
) -> None:
    """
    Preview the calendar file for an event.

    Prints the encoded ICS text to stdout, or writes it with --output.
    """
    ctx = get_context()
    attributes = event_attributes(
        title, description, location, url, start, end, alarm_minutes
    )
    event = extract_event(attributes, default_title=ctx.config.default_title)
    payload = ctx.encoder.encode(event)

    if summary:
        EventRenderer().render(event, payload)
        return

    if output is None:
        typer.echo(payload.body, nl=False)
        return

    if output.is_dir():
        output = output / payload.filename
    output.write_bytes(payload.content)
    logger.info(f"Wrote {output}")
    console.print(f"[green bold]✓[/green bold] Wrote {format_path(output)}")


# Alias for CLI registration
preview = preview_command
