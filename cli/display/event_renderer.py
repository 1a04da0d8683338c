"""Rich renderer for an event and its encoded payload."""

from rich.console import Console
from rich.table import Table

from addtocal.models.event import EncodedCalendarPayload, EventDescriptor
from cli.display.console import console as shared_console
from cli.display.formatters import format_file_size, format_instant


class EventRenderer:
    """Render an event summary for terminal display."""

    def __init__(self, console: Console | None = None):
        """Initialize the renderer.

        Args:
            console: Rich Console instance (uses shared console if not provided).
        """
        self.console = console or shared_console

    def render(
        self, event: EventDescriptor, payload: EncodedCalendarPayload | None = None
    ) -> None:
        """Render the event fields and, if given, the payload details."""
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Label", style="dim", width=12)
        table.add_column("Value")

        table.add_row("Title", f"[bold]{event.title}[/bold]")
        table.add_row("Starts", format_instant(event.start))
        table.add_row("Ends", format_instant(event.end))
        if event.location:
            table.add_row("Location", event.location)
        if event.description:
            table.add_row("Description", event.description)
        if event.url:
            table.add_row("URL", f"[cyan]{event.url}[/cyan]")
        if event.has_reminder:
            table.add_row("Reminder", f"{event.alarm_minutes} min before")
        else:
            table.add_row("Reminder", "[dim]None[/dim]")

        if payload is not None:
            table.add_row("File", f"{payload.filename} ({format_file_size(len(payload.content))})")

        self.console.print(table)
