"""Capability providers for platform detection."""

import logging
import re
import sys
from typing import Callable

from addtocal.delivery.base import ShareableFile

logger = logging.getLogger(__name__)

_APPLE_MOBILE = re.compile(r"iPad|iPhone|iPod")
# Safari, excluding Chrome and Android browsers that mention it
_SAFARI = re.compile(r"^((?!chrome|android).)*safari", re.IGNORECASE)


class UserAgentCapabilities:
    """Browser capabilities derived from navigator-style identity strings.

    Platform detection is a heuristic over the user agent and platform
    strings. File sharing is decided by an optional probe, which mirrors the
    browser's ``navigator.canShare``; a missing or failing probe means no.
    """

    def __init__(
        self,
        user_agent: str = "",
        platform: str = "",
        max_touch_points: int = 0,
        share_probe: Callable[[ShareableFile], bool] | None = None,
    ):
        self.user_agent = user_agent or ""
        self.platform = platform or ""
        self.max_touch_points = max_touch_points
        self.share_probe = share_probe

    def can_share_file(self, file: ShareableFile) -> bool:
        if self.share_probe is None:
            return False
        try:
            return bool(self.share_probe(file))
        except Exception as e:
            logger.debug(f"Share probe failed for {file.name}: {e}")
            return False

    def is_apple_like(self) -> bool:
        ios = bool(_APPLE_MOBILE.search(self.user_agent))
        # iPadOS 13+ reports a desktop platform but has touch points
        ipados = self.platform == "MacIntel" and self.max_touch_points > 1
        mac = "Mac" in self.platform
        safari = bool(_SAFARI.search(self.user_agent))
        return (ios or ipados or mac) and safari


class LocalCapabilities:
    """Capabilities of the machine running the command line tool.

    Uses an explicit platform query instead of string heuristics, unless
    prefer_open forces the choice. There is no native share sheet outside a
    browser.
    """

    def __init__(self, platform_name: str | None = None, prefer_open: bool | None = None):
        self.platform_name = platform_name or sys.platform
        self.prefer_open = prefer_open

    def can_share_file(self, file: ShareableFile) -> bool:
        return False

    def is_apple_like(self) -> bool:
        if self.prefer_open is not None:
            return self.prefer_open
        return self.platform_name == "darwin"
