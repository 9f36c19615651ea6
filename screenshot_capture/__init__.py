"""Website screenshots through headless Chromium, resized for production use."""

from .capture import (
    CaptureOptions,
    CaptureResult,
    capture_production_screenshots,
    capture_screenshot,
)
from .errors import (
    CaptureError,
    NavigationError,
    PersistenceError,
    ResizeError,
    ScreenshotError,
    SelectorTimeoutError,
    UnknownDeviceError,
    UnknownSizeError,
)
from .filenames import generate_filename
from .filters import should_block_request
from .imaging import resize_image, save_screenshot
from .presets import (
    DEFAULT_PRODUCTION_SET,
    DEVICE_PRESETS,
    PRODUCTION_SIZES,
    DeviceProfile,
    SizePreset,
)

__version__ = "1.0.0"

__all__ = [
    "CaptureError",
    "CaptureOptions",
    "CaptureResult",
    "DEFAULT_PRODUCTION_SET",
    "DEVICE_PRESETS",
    "DeviceProfile",
    "NavigationError",
    "PRODUCTION_SIZES",
    "PersistenceError",
    "ResizeError",
    "ScreenshotError",
    "SelectorTimeoutError",
    "SizePreset",
    "UnknownDeviceError",
    "UnknownSizeError",
    "capture_production_screenshots",
    "capture_screenshot",
    "generate_filename",
    "resize_image",
    "save_screenshot",
    "should_block_request",
]
