import os
import time
from datetime import datetime, timezone

import pytest

from addtocal.delivery.base import ShareableFile
from addtocal.output.ics_encoder import ICSEncoder

FIXED_NOW = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def local_tz():
    """Run the test with local time fixed at UTC-5 (no daylight saving)."""
    original = os.environ.get("TZ")
    os.environ["TZ"] = "EST+5"
    time.tzset()
    yield
    if original is None:
        del os.environ["TZ"]
    else:
        os.environ["TZ"] = original
    time.tzset()


@pytest.fixture
def encoder():
    """Encoder with a fixed generation instant and UID."""
    return ICSEncoder(
        clock=lambda: FIXED_NOW,
        uid_factory=lambda host: f"test-uid@{host or 'local'}",
    )


class FakeCapabilities:
    """Capability provider with fixed answers."""

    def __init__(self, share: bool = False, apple: bool = False):
        self.share = share
        self.apple = apple
        self.probed: list[ShareableFile] = []

    def can_share_file(self, file: ShareableFile) -> bool:
        self.probed.append(file)
        return self.share

    def is_apple_like(self) -> bool:
        return self.apple


class FakeEnvironment:
    """Delivery environment that records every platform call."""

    def __init__(
        self,
        capabilities: FakeCapabilities,
        share_error: Exception | None = None,
        open_error: Exception | None = None,
        download_error: Exception | None = None,
        consumer=None,
    ):
        self.capabilities = capabilities
        self.share_error = share_error
        self.open_error = open_error
        self.download_error = download_error
        self.consumer = consumer
        self.calls: list[tuple] = []
        self.created: list[str] = []
        self.revoked: list[str] = []

    async def share(self, file, title, text):
        self.calls.append(("share", file.name, title, text))
        if self.share_error is not None:
            raise self.share_error

    def create_object_url(self, payload):
        url = f"blob:test/{len(self.created)}"
        self.created.append(url)
        return url

    def revoke_object_url(self, url):
        self.revoked.append(url)

    def open_in_new_context(self, url):
        self.calls.append(("open", url))
        if self.open_error is not None:
            raise self.open_error
        return self.consumer

    def download(self, url, filename):
        self.calls.append(("download", url, filename))
        if self.download_error is not None:
            raise self.download_error
        return self.consumer

    def paths(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def make_environment():
    """Factory for fake environments: make_environment(share=..., apple=..., ...)."""

    def _make(share: bool = False, apple: bool = False, **kwargs) -> FakeEnvironment:
        return FakeEnvironment(FakeCapabilities(share=share, apple=apple), **kwargs)

    return _make
