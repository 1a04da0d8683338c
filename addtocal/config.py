"""Configuration for add-to-calendar."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from addtocal.constants import (
    DEFAULT_PRODID,
    DEFAULT_TITLE,
    DOWNLOAD_RELEASE_SECONDS,
    OPEN_RELEASE_SECONDS,
)
from addtocal.exceptions import ConfigurationError


class AddToCalendarConfig(BaseModel):
    """Add-to-calendar configuration with Pydantic validation."""

    # Event defaults
    default_title: str = Field(default=DEFAULT_TITLE, min_length=1)

    # Calendar document
    prodid: str = Field(default=DEFAULT_PRODID)
    uid_host: str | None = None
    filename_max_length: int = Field(default=60, ge=1)

    # Delivery
    download_dir: Path = Field(default=Path.home() / "Downloads")
    open_release_seconds: float = Field(default=OPEN_RELEASE_SECONDS, ge=0)
    download_release_seconds: float = Field(default=DOWNLOAD_RELEASE_SECONDS, ge=0)

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="addtocal.log")

    @classmethod
    def from_env(cls) -> "AddToCalendarConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv()

        config_dict = {}

        # Event defaults
        if os.environ.get("ADDTOCAL_DEFAULT_TITLE", "").strip():
            config_dict["default_title"] = os.environ["ADDTOCAL_DEFAULT_TITLE"].strip()

        # Calendar document
        if "ADDTOCAL_PRODID" in os.environ:
            config_dict["prodid"] = os.environ["ADDTOCAL_PRODID"]
        if "ADDTOCAL_UID_HOST" in os.environ:
            config_dict["uid_host"] = os.environ["ADDTOCAL_UID_HOST"]
        if "ADDTOCAL_FILENAME_MAX_LENGTH" in os.environ:
            try:
                config_dict["filename_max_length"] = int(
                    os.environ["ADDTOCAL_FILENAME_MAX_LENGTH"]
                )
            except ValueError:
                pass  # Keep default if invalid

        # Delivery
        if "ADDTOCAL_DOWNLOAD_DIR" in os.environ:
            config_dict["download_dir"] = Path(os.environ["ADDTOCAL_DOWNLOAD_DIR"])
        for env_key, field in (
            ("ADDTOCAL_OPEN_RELEASE_SECONDS", "open_release_seconds"),
            ("ADDTOCAL_DOWNLOAD_RELEASE_SECONDS", "download_release_seconds"),
        ):
            if env_key in os.environ:
                try:
                    config_dict[field] = float(os.environ[env_key])
                except ValueError:
                    pass

        # Logging
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        try:
            return cls(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
