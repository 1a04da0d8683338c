"""Output layer for calendar payloads."""

from addtocal.output.base import CalendarEncoder
from addtocal.output.ics_encoder import (
    ICSEncoder,
    escape_text,
    fold_line,
    format_utc,
    sanitize_filename,
    unescape_text,
    unfold,
)

__all__ = [
    "CalendarEncoder",
    "ICSEncoder",
    "escape_text",
    "fold_line",
    "format_utc",
    "sanitize_filename",
    "unescape_text",
    "unfold",
]
