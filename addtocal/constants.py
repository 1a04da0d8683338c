"""Shared constants for calendar payloads."""

# Calendar document
ICS_MIME_TYPE = "text/calendar"
ICS_EXTENSION = "ics"
DEFAULT_PRODID = "-//AddToCalendar Button//EN"

# Content line folding
MAX_LINE_LENGTH = 75
CRLF = "\r\n"
FOLD_SEPARATOR = CRLF + " "

# Event defaults
DEFAULT_TITLE = "New Event"
DEFAULT_FILENAME = "event"
DEFAULT_DURATION_MINUTES = 60
DEFAULT_ALARM_MINUTES = 30
MAX_ALARM_MINUTES = 1440
REMINDER_LABEL = "Reminder"

# Transient resource lifetimes (seconds)
OPEN_RELEASE_SECONDS = 30.0
DOWNLOAD_RELEASE_SECONDS = 10.0
