"""Tests for capability providers."""

from addtocal.delivery.base import ShareableFile
from addtocal.delivery.capabilities import LocalCapabilities, UserAgentCapabilities

IPHONE_SAFARI = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.0 Mobile/15E148 Safari/604.1"
)
MAC_SAFARI = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.0 Safari/605.1.15"
)
MAC_CHROME = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
ANDROID_CHROME = (
    "Mozilla/5.0 (Linux; Android 14; Pixel 8) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Mobile Safari/537.36"
)
WINDOWS_EDGE = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36 Edg/120.0.0.0"
)

FILE = ShareableFile(name="event.ics", mime_type="text/calendar", content=b"x")


def test_apple_like_browsers():
    """Test Safari on Apple platforms is detected."""
    assert UserAgentCapabilities(IPHONE_SAFARI, "iPhone").is_apple_like()
    assert UserAgentCapabilities(MAC_SAFARI, "MacIntel").is_apple_like()
    # iPadOS 13+ presents itself as a Mac with touch support
    assert UserAgentCapabilities(MAC_SAFARI, "MacIntel", max_touch_points=5).is_apple_like()


def test_non_apple_browsers():
    """Test other browsers, including ones mentioning Safari, are excluded."""
    assert not UserAgentCapabilities(MAC_CHROME, "MacIntel").is_apple_like()
    assert not UserAgentCapabilities(ANDROID_CHROME, "Linux armv8l").is_apple_like()
    assert not UserAgentCapabilities(WINDOWS_EDGE, "Win32").is_apple_like()
    assert not UserAgentCapabilities("", "").is_apple_like()


def test_share_probe():
    """Test file sharing follows the probe, and a failing probe means no."""
    assert not UserAgentCapabilities(IPHONE_SAFARI).can_share_file(FILE)
    assert UserAgentCapabilities(share_probe=lambda f: True).can_share_file(FILE)
    assert not UserAgentCapabilities(share_probe=lambda f: False).can_share_file(FILE)

    def broken_probe(file):
        raise TypeError("files not supported")

    assert not UserAgentCapabilities(share_probe=broken_probe).can_share_file(FILE)


def test_share_probe_receives_file():
    """Test the probe is asked about the specific file."""
    seen = []
    capabilities = UserAgentCapabilities(share_probe=lambda f: seen.append(f) or True)
    capabilities.can_share_file(FILE)
    assert seen == [FILE]


def test_local_capabilities():
    """Test local platform detection and overrides."""
    assert LocalCapabilities("darwin").is_apple_like()
    assert not LocalCapabilities("linux").is_apple_like()
    assert LocalCapabilities("linux", prefer_open=True).is_apple_like()
    assert not LocalCapabilities("darwin", prefer_open=False).is_apple_like()
    assert not LocalCapabilities("darwin").can_share_file(FILE)
