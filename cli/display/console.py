"""Rich console shared by the CLI commands."""

from rich.console import Console

# Tables and status spinners print through this console
console = Console()
