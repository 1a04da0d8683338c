"""Delivery environment for the local machine."""

import asyncio
import logging
import os
import shutil
import tempfile
import webbrowser
from pathlib import Path
from typing import Callable

from addtocal.delivery.base import CapabilityProvider, ShareableFile
from addtocal.delivery.capabilities import LocalCapabilities
from addtocal.exceptions import DeliveryError, ShareRejectedError
from addtocal.models.event import EncodedCalendarPayload

logger = logging.getLogger(__name__)


def _unique_path(path: Path) -> Path:
    """Return path, or 'name (n).ext' if it already exists."""
    if not path.exists():
        return path
    counter = 1
    while True:
        candidate = path.with_name(f"{path.stem} ({counter}){path.suffix}")
        if not candidate.exists():
            return candidate
        counter += 1


class LocalEnvironment:
    """Deliver payloads on the machine running the command line tool.

    Object URLs are temporary files addressed by ``file://`` URIs. Opening
    hands the URI to the default browser (on macOS this prompts Calendar);
    downloading copies the file into the downloads directory.
    """

    def __init__(
        self,
        download_dir: Path,
        capabilities: CapabilityProvider | None = None,
        opener: Callable[[str], bool] = webbrowser.open_new_tab,
        temp_dir: Path | None = None,
    ):
        self.download_dir = download_dir
        self.capabilities = capabilities or LocalCapabilities()
        self.opener = opener
        self.temp_dir = temp_dir
        self.downloads: list[Path] = []
        self._objects: dict[str, Path] = {}

    async def share(self, file: ShareableFile, title: str, text: str) -> None:
        raise ShareRejectedError("Native share is not available on this machine")

    def create_object_url(self, payload: EncodedCalendarPayload) -> str:
        suffix = Path(payload.filename).suffix
        fd, name = tempfile.mkstemp(prefix="addtocal-", suffix=suffix, dir=self.temp_dir)
        with os.fdopen(fd, "wb") as f:
            f.write(payload.content)
        path = Path(name)
        url = path.as_uri()
        self._objects[url] = path
        logger.debug(f"Created {url}")
        return url

    def revoke_object_url(self, url: str) -> None:
        path = self._objects.pop(url, None)
        if path is not None:
            path.unlink(missing_ok=True)
            logger.debug(f"Revoked {url}")

    def _resolve(self, url: str) -> Path:
        try:
            return self._objects[url]
        except KeyError:
            raise DeliveryError(f"Unknown or revoked object URL: {url}") from None

    def open_in_new_context(self, url: str) -> None:
        self._resolve(url)
        if not self.opener(url):
            raise DeliveryError(f"No browser available to open {url}")
        logger.info(f"Opened {url}")
        # The browser reads the file on its own schedule; rely on the delay
        return None

    def download(self, url: str, filename: str) -> asyncio.Future:
        source = self._resolve(url)
        self.download_dir.mkdir(parents=True, exist_ok=True)
        target = _unique_path(self.download_dir / filename)
        shutil.copyfile(source, target)
        self.downloads.append(target)
        logger.info(f"Saved {target}")

        # Copy is complete, so the temporary file can go right away
        finished = asyncio.get_running_loop().create_future()
        finished.set_result(target)
        return finished
