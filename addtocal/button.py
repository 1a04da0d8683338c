"""Add-to-calendar trigger: extraction, encoding and delivery in one action."""

import logging
from datetime import datetime
from typing import Mapping

from addtocal.config import AddToCalendarConfig
from addtocal.constants import DEFAULT_TITLE
from addtocal.delivery.base import DeliveryEnvironment, DeliveryPath
from addtocal.delivery.selector import DeliverySelector, create_selector
from addtocal.extraction import extract_event
from addtocal.models.event import EncodedCalendarPayload, EventDescriptor
from addtocal.output.base import CalendarEncoder
from addtocal.output.ics_encoder import ICSEncoder

logger = logging.getLogger(__name__)


class AddToCalendarButton:
    """A trigger bound to event attributes and a delivery environment.

    Each click builds a fresh event, payload and delivery attempt; nothing
    is shared between clicks except the selector's list of pending releases.

    Usage:
        button = create_button({"title": "Launch"}, LocalEnvironment(path))
        await button.click()
    """

    def __init__(
        self,
        attributes: Mapping[str, str | None],
        selector: DeliverySelector,
        encoder: CalendarEncoder,
        page_url: str | None = None,
        default_title: str = DEFAULT_TITLE,
    ):
        self.attributes = dict(attributes)
        self.selector = selector
        self.encoder = encoder
        self.page_url = page_url
        self.default_title = default_title

    def build_event(self, now: datetime | None = None) -> EventDescriptor:
        """Read the current attributes into an event."""
        return extract_event(
            self.attributes, self.page_url, now, default_title=self.default_title
        )

    def build_payload(self, now: datetime | None = None) -> EncodedCalendarPayload:
        """Build and encode the event."""
        return self.encoder.encode(self.build_event(now))

    async def click(self) -> DeliveryPath:
        """Handle one user activation."""
        return await self.deliver(self.build_event())

    async def deliver(self, event: EventDescriptor) -> DeliveryPath:
        """Encode an already built event and hand it to the platform."""
        payload = self.encoder.encode(event)
        path = await self.selector.deliver(payload)
        logger.info(f"Delivered '{payload.title}' via {path.value}")
        return path


def create_button(
    attributes: Mapping[str, str | None],
    environment: DeliveryEnvironment,
    page_url: str | None = None,
    config: AddToCalendarConfig | None = None,
) -> AddToCalendarButton:
    """Create a button for attributes and an environment using configuration."""
    if config is None:
        config = AddToCalendarConfig.from_env()
    return AddToCalendarButton(
        attributes,
        selector=create_selector(environment, config),
        encoder=ICSEncoder.from_config(config),
        page_url=page_url,
        default_title=config.default_title,
    )
