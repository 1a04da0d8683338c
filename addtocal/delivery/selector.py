"""Choose how a calendar payload reaches the user's calendar."""

import asyncio
import logging

from addtocal.config import AddToCalendarConfig
from addtocal.constants import DOWNLOAD_RELEASE_SECONDS, OPEN_RELEASE_SECONDS
from addtocal.delivery.base import DeliveryEnvironment, DeliveryPath, ShareableFile
from addtocal.delivery.release import ScheduledRelease
from addtocal.exceptions import DeliveryError
from addtocal.models.event import EncodedCalendarPayload

logger = logging.getLogger(__name__)


class DeliverySelector:
    """Deliver a payload through native share, an in-tab open, or a download.

    Paths are tried in that order. A cancelled or refused share falls
    through silently. The open and download paths allocate an object URL
    whose release is scheduled, never immediate, so that the new tab or
    download has time to read it.
    """

    def __init__(
        self,
        environment: DeliveryEnvironment,
        open_release_seconds: float = OPEN_RELEASE_SECONDS,
        download_release_seconds: float = DOWNLOAD_RELEASE_SECONDS,
    ):
        self.environment = environment
        self.open_release_seconds = open_release_seconds
        self.download_release_seconds = download_release_seconds
        self._pending: set[ScheduledRelease] = set()

    @property
    def pending_releases(self) -> list[ScheduledRelease]:
        """Releases scheduled but not yet performed."""
        return [release for release in self._pending if release.pending]

    async def deliver(self, payload: EncodedCalendarPayload) -> DeliveryPath:
        """Hand the payload to the platform.

        Returns:
            The delivery path that was taken

        Raises:
            DeliveryError: If the final download path itself fails
        """
        file = ShareableFile(
            name=payload.filename,
            mime_type=payload.mime_type,
            content=payload.content,
        )
        if self.environment.capabilities.can_share_file(file):
            try:
                await self.environment.share(
                    file, title=payload.title, text=payload.description
                )
                logger.info(f"Shared {payload.filename} via native share")
                return DeliveryPath.SHARE
            except Exception as e:
                # Cancelling the share sheet is ordinary user behaviour
                logger.debug(f"Share not completed, falling back: {e}")

        url = self.environment.create_object_url(payload)

        if self.environment.capabilities.is_apple_like():
            try:
                consumer = self.environment.open_in_new_context(url)
            except Exception as e:
                logger.warning(f"Could not open {payload.filename}, downloading: {e}")
            else:
                self._schedule_release(url, self.open_release_seconds, consumer)
                logger.info(f"Opened {payload.filename} in a new context")
                return DeliveryPath.OPEN

        try:
            consumer = self.environment.download(url, payload.filename)
        except Exception as e:
            self.environment.revoke_object_url(url)
            raise DeliveryError(f"Download of {payload.filename} failed: {e}") from e

        self._schedule_release(url, self.download_release_seconds, consumer)
        logger.info(f"Downloaded {payload.filename}")
        return DeliveryPath.DOWNLOAD

    def _schedule_release(
        self, url: str, delay: float, consumer: asyncio.Future | None
    ) -> ScheduledRelease:
        release = ScheduledRelease(
            lambda: self.environment.revoke_object_url(url),
            delay,
            name=url,
        )
        self._pending.add(release)
        release.on_done(self._pending.discard)
        if consumer is not None:
            release.watch(consumer)
        return release

    async def wait_released(self) -> None:
        """Wait for every scheduled release to complete."""
        releases = list(self._pending)
        if releases:
            await asyncio.gather(*(release.wait() for release in releases))
        self._pending.difference_update(releases)

    def release_all(self) -> None:
        """Release every pending resource immediately."""
        for release in list(self._pending):
            release.release_now()
        self._pending.clear()


def create_selector(
    environment: DeliveryEnvironment, config: AddToCalendarConfig | None = None
) -> DeliverySelector:
    """Create a selector for an environment using configured release delays."""
    if config is None:
        config = AddToCalendarConfig.from_env()
    return DeliverySelector(
        environment,
        open_release_seconds=config.open_release_seconds,
        download_release_seconds=config.download_release_seconds,
    )
