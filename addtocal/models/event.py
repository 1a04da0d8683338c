"""Event and payload models with Pydantic v2 validation."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator

from addtocal.constants import (
    DEFAULT_TITLE,
    ICS_MIME_TYPE,
    MAX_ALARM_MINUTES,
)


class EventDescriptor(BaseModel):
    """Normalized description of the event the user wants to add.

    Instants are always stored timezone-aware in UTC. The model does not
    require ``end`` to follow ``start``; an inverted range is encoded as-is.
    """

    model_config = ConfigDict(frozen=True)

    title: str = DEFAULT_TITLE
    description: str = ""
    location: str = ""
    url: str = ""
    start: datetime
    end: datetime
    alarm_minutes: int = Field(default=0, ge=0, le=MAX_ALARM_MINUTES)

    @field_validator("title", mode="before")
    @classmethod
    def default_blank_title(cls, v):
        """Substitute the placeholder for a missing or blank title."""
        if v is None or not str(v).strip():
            return DEFAULT_TITLE
        return str(v).strip()

    @field_validator("start", "end", mode="after")
    @classmethod
    def normalize_to_utc(cls, v: datetime) -> datetime:
        """Interpret naive datetimes as local time and convert to UTC."""
        if v.tzinfo is None:
            v = v.astimezone()
        return v.astimezone(timezone.utc)

    @property
    def has_reminder(self) -> bool:
        """True if a reminder should be attached."""
        return self.alarm_minutes > 0


class EncodedCalendarPayload(BaseModel):
    """Calendar document ready to be handed to the platform."""

    model_config = ConfigDict(frozen=True)

    body: str
    filename: str
    mime_type: str = ICS_MIME_TYPE
    title: str = ""
    description: str = ""

    @property
    def content(self) -> bytes:
        """Payload body as UTF-8 bytes."""
        return self.body.encode("utf-8")
