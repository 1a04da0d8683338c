"""CLI package for the add-to-calendar tool."""

import logging
import sys

from addtocal.config import AddToCalendarConfig


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: AddToCalendarConfig | None = None
) -> None:
    """Send everything to the log file and warnings or worse to stderr.

    ``--verbose`` lowers the stderr threshold to INFO, ``--quiet`` raises it
    to ERROR.
    """
    if config is None:
        config = AddToCalendarConfig.from_env()

    config.log_dir.mkdir(parents=True, exist_ok=True)
    log_path = config.log_dir / config.log_filename

    file_handler = logging.FileHandler(log_path)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s")
    )

    console_level = logging.WARNING
    if quiet:
        console_level = logging.ERROR
    elif verbose:
        console_level = logging.INFO
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)
    logging.getLogger(__name__).debug(f"Logging to {log_path}")


def main() -> None:
    """Main entry point for the CLI."""
    from cli.parser import app

    app()


__all__ = ["main", "setup_logging"]
