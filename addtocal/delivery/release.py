"""Delayed, cancellable release of transient delivery resources."""

import asyncio
import logging
from typing import Callable

logger = logging.getLogger(__name__)


class ScheduledRelease:
    """Release a resource after a delay, or earlier once its consumer is done.

    The delay is an overestimate of how long a freshly opened consumer needs
    to read the resource. When the consumer can signal completion through a
    future, that signal wins and the timer is only a fallback.
    """

    def __init__(
        self,
        release: Callable[[], None],
        delay: float,
        loop: asyncio.AbstractEventLoop | None = None,
        name: str = "resource",
    ):
        self.name = name
        self.released = False
        self.cancelled = False
        self._release = release
        self._loop = loop or asyncio.get_running_loop()
        self._done = self._loop.create_future()
        self._handle = self._loop.call_later(delay, self.release_now)
        logger.debug(f"Scheduled release of {name} in {delay:g}s")

    @property
    def pending(self) -> bool:
        """True until the resource is released or the release is cancelled."""
        return not (self.released or self.cancelled)

    def watch(self, consumer: asyncio.Future) -> None:
        """Release as soon as the consumer future completes."""
        if consumer.done():
            self._consumer_done(consumer)
        else:
            consumer.add_done_callback(self._consumer_done)

    def on_done(self, callback: Callable[["ScheduledRelease"], None]) -> None:
        """Call ``callback(self)`` once the release is performed or cancelled."""
        self._done.add_done_callback(lambda _: callback(self))

    def _consumer_done(self, consumer: asyncio.Future) -> None:
        if not consumer.cancelled() and consumer.exception() is not None:
            logger.debug(f"Consumer of {self.name} failed: {consumer.exception()}")
        self.release_now()

    def release_now(self) -> None:
        """Release immediately and cancel the timer. Idempotent."""
        if not self.pending:
            return
        self._handle.cancel()
        self.released = True
        try:
            self._release()
            logger.debug(f"Released {self.name}")
        finally:
            if not self._done.done():
                self._done.set_result(True)

    def cancel(self) -> None:
        """Cancel the pending release without releasing the resource."""
        if not self.pending:
            return
        self._handle.cancel()
        self.cancelled = True
        logger.debug(f"Cancelled release of {self.name}")
        if not self._done.done():
            self._done.set_result(False)

    async def wait(self) -> bool:
        """Wait until released or cancelled. Returns True if released."""
        return await asyncio.shield(self._done)
