"""Pydantic models for add-to-calendar."""

from addtocal.models.event import EncodedCalendarPayload, EventDescriptor

__all__ = [
    "EventDescriptor",
    "EncodedCalendarPayload",
]
