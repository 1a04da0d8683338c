"""Event options shared by commands."""

import typer
from typing_extensions import Annotated


class EventOptions:
    """Typer option annotations for the event attributes."""

    title = Annotated[str | None, typer.Option("--title", "-t", help="Event title")]
    description = Annotated[
        str | None, typer.Option("--description", "-d", help="Event description")
    ]
    location = Annotated[str | None, typer.Option("--location", "-l", help="Event location")]
    url = Annotated[str | None, typer.Option("--url", help="Reference URL")]
    start = Annotated[
        str | None,
        typer.Option(
            "--start",
            "-s",
            help="Start date/time, e.g. 2026-06-01T10:00 (local time unless a zone is given)",
        ),
    ]
    end = Annotated[
        str | None,
        typer.Option("--end", "-e", help="End date/time (default: one hour after start)"),
    ]
    alarm_minutes = Annotated[
        str | None,
        typer.Option(
            "--alarm-minutes",
            "-a",
            help="Reminder lead time in minutes, 0 for none (default: 30)",
        ),
    ]


def event_attributes(
    title: str | None,
    description: str | None,
    location: str | None,
    url: str | None,
    start: str | None,
    end: str | None,
    alarm_minutes: str | None,
) -> dict[str, str]:
    """Collect the given options into an attribute map, skipping unset ones."""
    attributes = {
        "title": title,
        "description": description,
        "location": location,
        "url": url,
        "start": start,
        "end": end,
        "alarmMinutes": alarm_minutes,
    }
    return {key: value for key, value in attributes.items() if value is not None}
