"""Pure formatting functions for display output."""

from datetime import datetime, timezone
from pathlib import Path


def format_instant(dt: datetime) -> str:
    """Format an instant in local time followed by UTC.

    Args:
        dt: Timezone-aware datetime.

    Returns:
        Formatted string (e.g., "2026-06-01 10:00 CEST (08:00 UTC)").
    """
    local = dt.astimezone()
    utc = dt.astimezone(timezone.utc)
    return f"{local.strftime('%Y-%m-%d %H:%M %Z')} ({utc.strftime('%H:%M')} UTC)"


def format_file_size(size_bytes: int) -> str:
    """Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes.

    Returns:
        Formatted size string (e.g., "1.5KB", "2.3MB").
    """
    size = float(size_bytes)
    for unit in ["B", "KB", "MB", "GB"]:
        if size < 1024.0:
            return f"{size:.1f}{unit}"
        size /= 1024.0
    return f"{size:.1f}TB"


def format_path(path: Path) -> str:
    """Format a path relative to the home directory when possible."""
    resolved = path.expanduser().resolve()
    try:
        return f"~/{resolved.relative_to(Path.home())}"
    except ValueError:
        return str(resolved)
