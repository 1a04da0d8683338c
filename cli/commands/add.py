"""Add an event to the calendar on this machine."""

import asyncio
import logging
from enum import Enum

import typer
from typing_extensions import Annotated

from addtocal.button import create_button
from addtocal.delivery.base import DeliveryPath
from addtocal.delivery.capabilities import LocalCapabilities
from addtocal.exceptions import DeliveryError
from cli.commands.options import EventOptions, event_attributes
from cli.context import get_context
from cli.display import EventRenderer, console, format_path

logger = logging.getLogger(__name__)


class DeliveryMode(str, Enum):
    """Delivery style requested on the command line."""

    AUTO = "auto"
    OPEN = "open"
    DOWNLOAD = "download"

    @property
    def prefer_open(self) -> bool | None:
        if self is DeliveryMode.AUTO:
            return None
        return self is DeliveryMode.OPEN


def add_command(
    title: EventOptions.title = None,
    description: EventOptions.description = None,
    location: EventOptions.location = None,
    url: EventOptions.url = None,
    start: EventOptions.start = None,
    end: EventOptions.end = None,
    alarm_minutes: EventOptions.alarm_minutes = None,
    mode: Annotated[
        DeliveryMode,
        typer.Option(
            "--mode",
            "-m",
            help="open: hand the file to the calendar app; download: save it to the "
            "downloads directory; auto: open on macOS, download elsewhere",
        ),
    ] = DeliveryMode.AUTO,
    wait: Annotated[
        bool,
        typer.Option(
            "--wait/--no-wait",
            help="Wait for the calendar app to read the file before removing it",
        ),
    ] = True,
) -> None:
    """
    Add an event to your calendar.

    Builds a calendar file from the options and hands it to the platform:
    opened with the default calendar app, or saved to the downloads directory.
    """
    ctx = get_context()
    attributes = event_attributes(
        title, description, location, url, start, end, alarm_minutes
    )
    environment = ctx.environment(LocalCapabilities(prefer_open=mode.prefer_open))
    button = create_button(attributes, environment, config=ctx.config)
    event = button.build_event()

    async def run() -> DeliveryPath:
        path = await button.deliver(event)
        if not wait:
            # Leave the temporary file for the calendar app to pick up
            for release in button.selector.pending_releases:
                release.cancel()
        elif button.selector.pending_releases:
            with console.status("Waiting for the calendar app to read the file..."):
                await button.selector.wait_released()
        return path

    try:
        path = asyncio.run(run())
    except DeliveryError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    if not ctx.quiet:
        EventRenderer().render(event)

    if path is DeliveryPath.DOWNLOAD and environment.downloads:
        console.print(
            f"[green bold]✓[/green bold] Saved {format_path(environment.downloads[-1])}"
        )
    else:
        console.print("[green bold]✓[/green bold] Opened with the default calendar app")


# Alias for CLI registration
add = add_command
