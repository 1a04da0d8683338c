"""Build an EventDescriptor from a loose attribute map.

Every field is optional and may be blank or malformed. Nothing here raises:
bad values are replaced by defaults so that the button always produces an
event.
"""

import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Mapping

from dateutil import parser as date_parser

from addtocal.constants import (
    DEFAULT_ALARM_MINUTES,
    DEFAULT_DURATION_MINUTES,
    DEFAULT_TITLE,
    MAX_ALARM_MINUTES,
)
from addtocal.models.event import EventDescriptor

logger = logging.getLogger(__name__)

# Leading integer, as read by a browser's parseInt(value, 10)
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


def parse_datetime(value: str | None) -> datetime | None:
    """Parse a timestamp, returning None when it cannot be understood.

    ISO 8601 text is tried first, then free-form text. Text without a zone
    marker is read as local time. The result is always in UTC.
    """
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        try:
            parsed = date_parser.parse(text)
        except (ValueError, OverflowError):
            logger.debug(f"Could not parse date/time: {text!r}")
            return None

    try:
        # Naive values are local wall-clock time
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        logger.debug(f"Date/time out of range: {text!r}")
        return None


def clamp_int(value: str | None, minimum: int, maximum: int, fallback: int) -> int:
    """Parse a base-10 integer prefix and clamp it into [minimum, maximum]."""
    if value is None:
        return fallback
    match = _INT_PREFIX.match(str(value))
    if not match:
        return fallback
    # float keeps digit runs of any length, overflowing to infinity
    number = float(match.group(1))
    return int(min(max(number, minimum), maximum))


def _text(attributes: Mapping[str, str | None], key: str) -> str:
    value = attributes.get(key)
    return str(value).strip() if value is not None else ""


def extract_event(
    attributes: Mapping[str, str | None],
    page_url: str | None = None,
    now: datetime | None = None,
    default_title: str = DEFAULT_TITLE,
) -> EventDescriptor:
    """Normalize raw event attributes into an EventDescriptor.

    Args:
        attributes: Mapping with optional keys title, description, location,
            url, start, end and alarmMinutes (alarm_minutes is accepted too)
        page_url: Address used when no url attribute is given
        now: Current instant, used for the default start time
        default_title: Placeholder used when the title is missing or blank

    Returns:
        A fully populated EventDescriptor
    """
    title = _text(attributes, "title") or default_title
    description = _text(attributes, "description")
    location = _text(attributes, "location")
    url = _text(attributes, "url") or (page_url or "").strip()

    default_duration = timedelta(minutes=DEFAULT_DURATION_MINUTES)
    start = parse_datetime(attributes.get("start"))
    if start is None:
        start = (now or datetime.now(timezone.utc)) + default_duration
    end = parse_datetime(attributes.get("end"))
    if end is None:
        try:
            end = start + default_duration
        except OverflowError:
            end = start

    raw_alarm = attributes.get("alarmMinutes")
    if raw_alarm is None:
        raw_alarm = attributes.get("alarm_minutes")
    alarm_minutes = clamp_int(raw_alarm, 0, MAX_ALARM_MINUTES, DEFAULT_ALARM_MINUTES)

    event = EventDescriptor(
        title=title,
        description=description,
        location=location,
        url=url,
        start=start,
        end=end,
        alarm_minutes=alarm_minutes,
    )
    logger.debug(
        f"Extracted event '{event.title}' starting {event.start.isoformat()}"
    )
    return event
