"""CLI application and command routing."""

import logging

import typer
from typing_extensions import Annotated

from addtocal.exceptions import AddToCalendarError
from cli import setup_logging
from cli.commands import add_command, config_command, preview_command
from cli.context import CLIContext, set_context

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="addtocal",
    help="Add a described event to your calendar.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show informational messages")
    ] = False,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Only show errors")
    ] = False,
) -> None:
    """Add a described event to your calendar."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    set_context(ctx)
    try:
        setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)
    except AddToCalendarError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


app.command("add")(add_command)
app.command("preview")(preview_command)
app.command("config")(config_command)
