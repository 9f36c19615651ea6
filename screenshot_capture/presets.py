"""
Device profiles and production output sizes.

Both tables are read-only mappings built once at import time.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping

from .errors import UnknownDeviceError, UnknownSizeError


DESKTOP_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36"
)
IPAD_UA = (
    "Mozilla/5.0 (iPad; CPU OS 17_0 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.0 Mobile/15E148 Safari/604.1"
)
IPHONE_UA = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.0 Mobile/15E148 Safari/604.1"
)


@dataclass(frozen=True)
class DeviceProfile:
    width: int
    height: int
    user_agent: str

    @property
    def viewport(self) -> Dict[str, int]:
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True)
class SizePreset:
    width: int
    height: int

    @property
    def label(self) -> str:
        return f"{self.width}x{self.height}"


DEVICE_PRESETS: Mapping[str, DeviceProfile] = MappingProxyType({
    "desktop": DeviceProfile(1920, 1080, DESKTOP_UA),
    "laptop": DeviceProfile(1366, 768, DESKTOP_UA),
    "tablet": DeviceProfile(768, 1024, IPAD_UA),
    "mobile": DeviceProfile(375, 667, IPHONE_UA),
    "mobile-large": DeviceProfile(414, 896, IPHONE_UA),
})

PRODUCTION_SIZES: Mapping[str, SizePreset] = MappingProxyType({
    "thumbnail": SizePreset(300, 200),
    "card": SizePreset(400, 300),
    "social-media": SizePreset(1200, 630),
    "instagram-post": SizePreset(1080, 1080),
    "instagram-story": SizePreset(1080, 1920),
    "youtube-thumbnail": SizePreset(1280, 720),
    "blog-header": SizePreset(800, 400),
    "email-banner": SizePreset(600, 200),
    "preview-small": SizePreset(200, 150),
    "preview-medium": SizePreset(400, 300),
    "preview-large": SizePreset(800, 600),
})

DEFAULT_PRODUCTION_SET = ("thumbnail", "card", "social-media", "blog-header")


def get_device_profile(device: str) -> DeviceProfile:
    try:
        return DEVICE_PRESETS[device]
    except KeyError:
        raise UnknownDeviceError(
            f"Unknown device preset: {device}. Available: {', '.join(DEVICE_PRESETS)}"
        ) from None


def get_size_preset(name: str) -> SizePreset:
    try:
        return PRODUCTION_SIZES[name]
    except KeyError:
        raise UnknownSizeError(
            f"Unknown size preset: {name}. Available: {', '.join(PRODUCTION_SIZES)}"
        ) from None
