"""Display configuration file path and settings."""

import os
from pathlib import Path

from rich.table import Table

from addtocal.config import AddToCalendarConfig
from cli.display import console


def _find_env_file() -> Path | None:
    """Find .env file by searching current directory and parent directories."""
    current = Path.cwd()

    for path in [current] + list(current.parents):
        env_file = path / ".env"
        if env_file.exists():
            return env_file.resolve()

    return None


def _get_source(env_key: str, value, default_value) -> str:
    """Determine the source of a config value."""
    if env_key in os.environ or value != default_value:
        return "env"
    return "default"


def _create_table(setting_width: int, source_width: int) -> Table:
    """Create a styled table for config sections with fixed column widths."""
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("SETTING", style="cyan", min_width=setting_width, no_wrap=True)
    table.add_column("SOURCE", style="dim", min_width=source_width, no_wrap=True)
    table.add_column("VALUE")
    return table


def _row(
    cfg: AddToCalendarConfig, default: AddToCalendarConfig, field: str, env_key: str
) -> tuple[str, str, str]:
    value = getattr(cfg, field)
    display = "[dim]None[/dim]" if value is None else str(value)
    if isinstance(value, Path):
        display = str(value.expanduser().resolve())
    return (field, display, _get_source(env_key, value, getattr(default, field)))


def config_command() -> None:
    """Display configuration file path and settings."""
    env_file = _find_env_file()

    default_config = AddToCalendarConfig()
    cfg = AddToCalendarConfig.from_env()

    sections: list[tuple[str, list[tuple[str, str, str]]]] = [
        (
            "Event Defaults",
            [_row(cfg, default_config, "default_title", "ADDTOCAL_DEFAULT_TITLE")],
        ),
        (
            "Calendar File",
            [
                _row(cfg, default_config, "prodid", "ADDTOCAL_PRODID"),
                _row(cfg, default_config, "uid_host", "ADDTOCAL_UID_HOST"),
                _row(
                    cfg,
                    default_config,
                    "filename_max_length",
                    "ADDTOCAL_FILENAME_MAX_LENGTH",
                ),
            ],
        ),
        (
            "Delivery",
            [
                _row(cfg, default_config, "download_dir", "ADDTOCAL_DOWNLOAD_DIR"),
                _row(
                    cfg,
                    default_config,
                    "open_release_seconds",
                    "ADDTOCAL_OPEN_RELEASE_SECONDS",
                ),
                _row(
                    cfg,
                    default_config,
                    "download_release_seconds",
                    "ADDTOCAL_DOWNLOAD_RELEASE_SECONDS",
                ),
            ],
        ),
        (
            "Logging",
            [
                _row(cfg, default_config, "log_dir", "LOG_DIR"),
                _row(cfg, default_config, "log_filename", "LOG_FILENAME"),
            ],
        ),
    ]

    # Calculate max widths across all sections
    all_rows = [row for _, rows in sections for row in rows]
    setting_width = max(max(len(row[0]) for row in all_rows), len("SETTING"))
    source_width = max(max(len(row[2]) for row in all_rows), len("SOURCE"))

    console.print()
    console.print("━" * 50)
    console.print("[bold]  Configuration[/bold]")
    console.print("━" * 50)

    console.print("\n[bold]Config File:[/bold]")
    if env_file:
        console.print(f"  [cyan]{env_file}[/cyan]")
    else:
        console.print("  [dim]Not found (using defaults and environment variables)[/dim]")

    for section_name, rows in sections:
        console.print(f"\n[bold]{section_name}:[/bold]")
        table = _create_table(setting_width, source_width)
        for setting, value, source in rows:
            table.add_row(setting, source, value)
        console.print(table)

    console.print()


# Alias for CLI registration
config = config_command
