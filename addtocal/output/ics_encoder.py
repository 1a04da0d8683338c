"""ICS encoder for single-event calendar payloads."""

import logging
import re
import string
import time
import uuid
from datetime import datetime, timezone
from typing import Callable
from urllib.parse import urlsplit

from icalendar import vDatetime
from icalendar.parser import Contentlines, escape_char, foldline

from addtocal.config import AddToCalendarConfig
from addtocal.constants import (
    CRLF,
    DEFAULT_FILENAME,
    DEFAULT_PRODID,
    FOLD_SEPARATOR,
    ICS_EXTENSION,
    ICS_MIME_TYPE,
    MAX_LINE_LENGTH,
    REMINDER_LABEL,
)
from addtocal.models.event import EncodedCalendarPayload, EventDescriptor

logger = logging.getLogger(__name__)

_BASE36 = string.digits + string.ascii_lowercase
_UNSAFE_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')
_WHITESPACE_RUN = re.compile(r"\s+")
_ESCAPE_SEQUENCE = re.compile(r"\\([\\nN,;])")


def format_utc(dt: datetime) -> str:
    """Format an instant as an RFC 5545 UTC date-time (YYYYMMDDTHHMMSSZ)."""
    if dt.tzinfo is None:
        dt = dt.astimezone()
    return vDatetime(dt.astimezone(timezone.utc)).to_ical().decode("ascii")


def escape_text(text: str | None) -> str:
    """Escape a TEXT property value.

    Every newline form (CRLF, CR, LF) becomes ``\\n``.
    """
    if not text:
        return ""
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    # escape_char reads a literal "\N" as a newline, so backslashes are
    # split out and escaped here
    return "\\\\".join(escape_char(part) for part in normalized.split("\\"))


def unescape_text(text: str) -> str:
    """Reverse escape_text.

    Single pass, so an escaped backslash followed by ``n`` stays literal.
    """

    def _replace(match: re.Match) -> str:
        char = match.group(1)
        return "\n" if char in "nN" else char

    return _ESCAPE_SEQUENCE.sub(_replace, text)


def fold_line(line: str, limit: int = MAX_LINE_LENGTH) -> list[str]:
    """Split a content line into physical lines of at most ``limit`` octets.

    Continuation lines start with a single space, which counts towards the
    limit. Multibyte characters are never split.
    """
    return foldline(line, limit=limit, fold_sep=FOLD_SEPARATOR).split(CRLF)


def unfold(body: str) -> list[str]:
    """Join folded physical lines back into content lines."""
    return [str(line) for line in Contentlines.from_ical(body) if line]


def sanitize_filename(name: str | None, max_length: int = 60) -> str:
    """Turn an event title into a filesystem-safe base name."""
    cleaned = _UNSAFE_FILENAME_CHARS.sub(" ", name or DEFAULT_FILENAME)
    cleaned = _WHITESPACE_RUN.sub(" ", cleaned).strip()
    return cleaned[:max_length].rstrip() or DEFAULT_FILENAME


def _to_base36(number: int) -> str:
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits)) or "0"


def create_uid(host: str | None = None) -> str:
    """Create a best-effort unique identifier: millis-random@host.

    Not cryptographically reinforced; collisions are possible in principle.
    """
    millis = time.time_ns() // 1_000_000
    rand = _to_base36(uuid.uuid4().int)[:11]
    return f"{millis}-{rand}@{host or 'local'}"


class ICSEncoder:
    """Encoder producing a single-event calendar document."""

    def __init__(
        self,
        prodid: str = DEFAULT_PRODID,
        uid_host: str | None = None,
        filename_max_length: int = 60,
        clock: Callable[[], datetime] | None = None,
        uid_factory: Callable[[str | None], str] | None = None,
    ):
        """Initialize the encoder.

        Args:
            prodid: Product identifier written to the PRODID line
            uid_host: Host part of generated UIDs when the event has no URL
            filename_max_length: Maximum length of the filename stem
            clock: Returns the generation instant (defaults to now in UTC)
            uid_factory: Builds the UID from a host (defaults to create_uid)
        """
        self.prodid = prodid
        self.uid_host = uid_host
        self.filename_max_length = filename_max_length
        self.clock = clock or (lambda: datetime.now(timezone.utc))
        self.uid_factory = uid_factory or create_uid

    @classmethod
    def from_config(cls, config: AddToCalendarConfig) -> "ICSEncoder":
        """Create an encoder from configuration."""
        return cls(
            prodid=config.prodid,
            uid_host=config.uid_host,
            filename_max_length=config.filename_max_length,
        )

    def _uid_host(self, event: EventDescriptor) -> str | None:
        if event.url:
            host = urlsplit(event.url).netloc
            if host:
                return host
        return self.uid_host

    def build_lines(self, event: EventDescriptor) -> list[str]:
        """Build the unfolded content lines for an event."""
        lines = [
            "BEGIN:VCALENDAR",
            "VERSION:2.0",
            f"PRODID:{self.prodid}",
            "CALSCALE:GREGORIAN",
            "METHOD:PUBLISH",
            "BEGIN:VEVENT",
            f"UID:{self.uid_factory(self._uid_host(event))}",
            f"DTSTAMP:{format_utc(self.clock())}",
            f"DTSTART:{format_utc(event.start)}",
            f"DTEND:{format_utc(event.end)}",
            f"SUMMARY:{escape_text(event.title)}",
        ]

        # Optional fields are omitted rather than written empty
        if event.description:
            lines.append(f"DESCRIPTION:{escape_text(event.description)}")
        if event.location:
            lines.append(f"LOCATION:{escape_text(event.location)}")
        if event.url:
            lines.append(f"URL:{escape_text(event.url)}")

        if event.has_reminder:
            lines.extend(
                [
                    "BEGIN:VALARM",
                    f"TRIGGER:-PT{event.alarm_minutes}M",
                    "ACTION:DISPLAY",
                    f"DESCRIPTION:{REMINDER_LABEL}",
                    "END:VALARM",
                ]
            )

        lines.extend(["END:VEVENT", "END:VCALENDAR"])
        return lines

    def encode(self, event: EventDescriptor) -> EncodedCalendarPayload:
        """Encode an event into a calendar payload."""
        physical_lines = []
        for line in self.build_lines(event):
            physical_lines.extend(fold_line(line))
        body = CRLF.join(physical_lines) + CRLF

        filename = (
            f"{sanitize_filename(event.title, self.filename_max_length)}"
            f".{ICS_EXTENSION}"
        )
        logger.info(f"Encoded '{event.title}' as {filename} ({len(body)} chars)")

        return EncodedCalendarPayload(
            body=body,
            filename=filename,
            mime_type=ICS_MIME_TYPE,
            title=event.title,
            description=event.description,
        )

    def get_extension(self) -> str:
        """Returns file extension."""
        return ICS_EXTENSION
