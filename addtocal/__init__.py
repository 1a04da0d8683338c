"""Add a described event to the user's calendar."""

from addtocal.button import AddToCalendarButton, create_button
from addtocal.config import AddToCalendarConfig
from addtocal.extraction import extract_event
from addtocal.models import EncodedCalendarPayload, EventDescriptor
from addtocal.output import ICSEncoder

__all__ = [
    "AddToCalendarButton",
    "AddToCalendarConfig",
    "EncodedCalendarPayload",
    "EventDescriptor",
    "ICSEncoder",
    "create_button",
    "extract_event",
]
