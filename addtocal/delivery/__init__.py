"""Delivery of calendar payloads to the user's platform."""

from addtocal.delivery.base import (
    CapabilityProvider,
    DeliveryEnvironment,
    DeliveryPath,
    ShareableFile,
)
from addtocal.delivery.capabilities import LocalCapabilities, UserAgentCapabilities
from addtocal.delivery.local import LocalEnvironment
from addtocal.delivery.release import ScheduledRelease
from addtocal.delivery.selector import DeliverySelector, create_selector

__all__ = [
    "CapabilityProvider",
    "DeliveryEnvironment",
    "DeliveryPath",
    "DeliverySelector",
    "LocalCapabilities",
    "LocalEnvironment",
    "ScheduledRelease",
    "ShareableFile",
    "UserAgentCapabilities",
    "create_selector",
]
