"""Tests for the command line interface."""

import logging

import pytest
from typer.testing import CliRunner

from addtocal.config import AddToCalendarConfig
from addtocal.output.ics_encoder import unfold
from cli import setup_logging
from cli.parser import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def cli_env(monkeypatch, tmp_path):
    """Keep logs and downloads inside the test directory."""
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("ADDTOCAL_DOWNLOAD_DIR", str(tmp_path / "downloads"))
    monkeypatch.setenv("ADDTOCAL_DOWNLOAD_RELEASE_SECONDS", "0.01")
    return tmp_path


def test_preview_prints_payload():
    """Test preview writes the calendar text to stdout."""
    result = runner.invoke(
        app,
        [
            "preview",
            "--title",
            "Launch",
            "--start",
            "2026-06-01T10:00:00Z",
            "--alarm-minutes",
            "15",
        ],
    )
    assert result.exit_code == 0, result.output
    lines = unfold(result.stdout.replace("\n", "\r\n").replace("\r\r\n", "\r\n"))
    assert "SUMMARY:Launch" in lines
    assert "DTSTART:20260601T100000Z" in lines
    assert "TRIGGER:-PT15M" in lines


def test_preview_writes_output_file(tmp_path):
    """Test preview --output writes the file into a directory."""
    result = runner.invoke(
        app, ["preview", "--title", "Launch", "--output", str(tmp_path)]
    )
    assert result.exit_code == 0, result.output
    written = tmp_path / "Launch.ics"
    assert written.read_bytes().startswith(b"BEGIN:VCALENDAR\r\n")


def test_preview_summary():
    """Test preview --summary shows the event fields."""
    result = runner.invoke(
        app, ["preview", "--title", "Launch", "--location", "Hall A", "--summary"]
    )
    assert result.exit_code == 0, result.output
    assert "Launch" in result.stdout
    assert "Hall A" in result.stdout
    assert "Launch.ics" in result.stdout


def test_add_downloads_file(cli_env):
    """Test add --mode download saves an .ics file."""
    result = runner.invoke(
        app,
        ["add", "--title", "Launch", "--start", "2026-06-01T10:00", "--mode", "download"],
    )
    assert result.exit_code == 0, result.output
    saved = cli_env / "downloads" / "Launch.ics"
    assert saved.exists()
    assert b"SUMMARY:Launch" in saved.read_bytes()


def test_config_command():
    """Test config shows the effective settings."""
    result = runner.invoke(app, ["config"])
    assert result.exit_code == 0, result.output
    assert "default_title" in result.stdout
    assert "download_release_seconds" in result.stdout


def test_invalid_config_exits(monkeypatch):
    """Test invalid configuration is reported with exit code 1."""
    monkeypatch.setenv("ADDTOCAL_OPEN_RELEASE_SECONDS", "-5")
    result = runner.invoke(app, ["config"])
    assert result.exit_code == 1


@pytest.mark.parametrize(
    "verbose, quiet, expected",
    [
        (False, False, logging.WARNING),
        (True, False, logging.INFO),
        (False, True, logging.ERROR),
        (True, True, logging.ERROR),
    ],
)
def test_setup_logging_levels(tmp_path, verbose, quiet, expected):
    """Test the log file gets everything and stderr follows the flags."""
    root_logger = logging.getLogger()
    saved = (root_logger.level, list(root_logger.handlers))
    config = AddToCalendarConfig(log_dir=tmp_path / "logs", log_filename="cli.log")
    try:
        setup_logging(verbose=verbose, quiet=quiet, config=config)
        file_handler, console_handler = root_logger.handlers

        assert isinstance(file_handler, logging.FileHandler)
        assert file_handler.level == logging.DEBUG
        assert console_handler.level == expected
        assert (tmp_path / "logs" / "cli.log").exists()
    finally:
        for handler in root_logger.handlers:
            handler.close()
        root_logger.handlers[:] = saved[1]
        root_logger.setLevel(saved[0])
