"""Base classes for calendar encoders."""

from typing import Protocol

from addtocal.models.event import EncodedCalendarPayload, EventDescriptor


class CalendarEncoder(Protocol):
    """Protocol for calendar encoders."""

    def encode(self, event: EventDescriptor) -> EncodedCalendarPayload:
        """Encode an event into a deliverable payload."""
        ...

    def get_extension(self) -> str:
        """Returns file extension (e.g., 'ics')."""
        ...
