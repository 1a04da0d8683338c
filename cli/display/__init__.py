"""Display module for rendering CLI output.

It provides:
- console: Shared Rich console instance
- EventRenderer: Event and payload summary display
- Formatting functions for instants and file sizes
"""

from cli.display.console import console
from cli.display.event_renderer import EventRenderer
from cli.display.formatters import format_file_size, format_instant, format_path

__all__ = [
    "console",
    "EventRenderer",
    "format_file_size",
    "format_instant",
    "format_path",
]
