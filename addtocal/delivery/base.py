"""Protocols for platform delivery environments."""

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from addtocal.models.event import EncodedCalendarPayload


class DeliveryPath(str, Enum):
    """Mechanism used to hand a payload to the platform."""

    SHARE = "share"
    OPEN = "open"
    DOWNLOAD = "download"


@dataclass(frozen=True)
class ShareableFile:
    """In-memory named file handed to a native share sheet."""

    name: str
    mime_type: str
    content: bytes


class CapabilityProvider(Protocol):
    """Answers runtime questions about the current platform."""

    def can_share_file(self, file: ShareableFile) -> bool:
        """True if the platform can share this file through a native sheet."""
        ...

    def is_apple_like(self) -> bool:
        """True if opening the payload in a new tab prompts a calendar import."""
        ...


class DeliveryEnvironment(Protocol):
    """Platform operations used by the delivery selector.

    ``open_in_new_context`` and ``download`` may return a future that
    completes once the consumer has finished reading the resource.
    """

    capabilities: CapabilityProvider

    async def share(self, file: ShareableFile, title: str, text: str) -> None:
        """Show the native share sheet. Raises if cancelled or refused."""
        ...

    def create_object_url(self, payload: EncodedCalendarPayload) -> str:
        """Allocate a revocable reference to the payload bytes."""
        ...

    def revoke_object_url(self, url: str) -> None:
        """Release a reference created by create_object_url."""
        ...

    def open_in_new_context(self, url: str) -> "asyncio.Future | None":
        """Open the reference in a new, unrelated browsing context."""
        ...

    def download(self, url: str, filename: str) -> "asyncio.Future | None":
        """Save the referenced bytes under filename."""
        ...
