"""
Screenshot capture with Playwright.

``capture_screenshot`` drives one Chromium session per call.
``capture_production_screenshots`` renders a page once and derives every
requested production size from that single full-page image.
"""

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page, async_playwright
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .errors import (
    CaptureError,
    NavigationError,
    ScreenshotError,
    SelectorTimeoutError,
)
from .filenames import generate_filename
from .filters import block_unwanted_resources
from .imaging import resize_image, save_screenshot
from .presets import PRODUCTION_SIZES, SizePreset, get_device_profile

logger = logging.getLogger(__name__)

NAVIGATION_TIMEOUT_MS = 30000
SELECTOR_TIMEOUT_MS = 10000

BROWSER_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-web-security",
    "--disable-features=VizDisplayCompositor",
]

IMAGE_FORMATS = ("png", "jpeg")


def format_file_size(num_bytes: int) -> str:
    return f"{num_bytes / 1024:.2f} KB"


@dataclass(frozen=True)
class CaptureOptions:
    output_path: Optional[Path] = None
    format: str = "png"
    quality: int = 90
    full_page: bool = True
    clip: Optional[Dict[str, float]] = None
    wait_for_selector: Optional[str] = None
    delay: int = 0
    block_resources: bool = True
    headless: bool = True
    fixed_size: Optional[SizePreset] = None

    def __post_init__(self):
        if self.format not in IMAGE_FORMATS:
            raise ValueError(f"Unsupported format: {self.format}. Use one of: {', '.join(IMAGE_FORMATS)}")
        if not 0 <= self.quality <= 100:
            raise ValueError(f"Quality must be between 0 and 100, got {self.quality}")
        if self.delay < 0:
            raise ValueError(f"Delay must not be negative, got {self.delay}")

    def screenshot_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {
            "type": self.format,
            # A clip region always wins over a full-page capture.
            "full_page": False if self.clip else self.full_page,
        }
        if self.format == "jpeg":
            kwargs["quality"] = self.quality
        if self.clip:
            kwargs["clip"] = self.clip
        return kwargs


@dataclass
class CaptureResult:
    size: str
    dimensions: SizePreset
    data: bytes
    path: Path

    @property
    def file_size(self) -> str:
        return format_file_size(len(self.data))


async def capture_screenshot(url: str, device: str = "desktop", options: Optional[CaptureOptions] = None) -> bytes:
    """
    Render ``url`` with the ``device`` profile and return the image bytes.

    The browser and page are always closed before this returns or raises.

    Raises:
        UnknownDeviceError: ``device`` is not a known preset; no browser is started.
        NavigationError: The page did not load within the navigation timeout.
        SelectorTimeoutError: ``wait_for_selector`` never appeared.
        CaptureError: Any other browser-side failure.
        ResizeError, PersistenceError: From the fixed-size and save steps.
    """
    options = options or CaptureOptions()
    profile = get_device_profile(device)

    async with async_playwright() as p:
        try:
            browser = await p.chromium.launch(headless=options.headless, args=BROWSER_ARGS)
        except PlaywrightError as exc:
            raise CaptureError(f"Failed to launch browser: {exc}") from exc

        page = None
        try:
            context = await browser.new_context(viewport=profile.viewport, user_agent=profile.user_agent)
            page = await context.new_page()
            screenshot = await _render(page, url, options)
        except PlaywrightError as exc:
            raise CaptureError(f"Screenshot capture failed: {exc}") from exc
        finally:
            if page is not None:
                try:
                    await page.close()
                except PlaywrightError as exc:
                    logger.warning("Failed to close page: %s", exc)
            await browser.close()

    if options.fixed_size:
        screenshot = resize_image(screenshot, options.fixed_size, options.format, options.quality)

    if options.output_path:
        save_screenshot(screenshot, options.output_path)
        logger.info("Screenshot saved to: %s", options.output_path)

    return screenshot


async def _render(page: Page, url: str, options: CaptureOptions) -> bytes:
    if options.block_resources:
        await page.route("**/*", block_unwanted_resources)

    try:
        await page.goto(url, wait_until="networkidle", timeout=NAVIGATION_TIMEOUT_MS)
    except PlaywrightError as exc:
        raise NavigationError(f"Failed to load {url}: {exc}") from exc

    if options.wait_for_selector:
        try:
            await page.wait_for_selector(options.wait_for_selector, timeout=SELECTOR_TIMEOUT_MS)
        except PlaywrightTimeoutError as exc:
            raise SelectorTimeoutError(
                f"Selector {options.wait_for_selector!r} did not appear within {SELECTOR_TIMEOUT_MS} ms"
            ) from exc

    if options.delay > 0:
        await page.wait_for_timeout(options.delay)

    return await page.screenshot(**options.screenshot_kwargs())


async def capture_production_screenshots(
    url: str,
    device: str = "desktop",
    sizes: Sequence[str] = ("thumbnail", "card", "social-media"),
    output_dir: Optional[Path] = None,
    options: Optional[CaptureOptions] = None,
) -> List[CaptureResult]:
    """
    Capture ``url`` once at full page and write one resized file per size key.

    Unknown size keys and sizes that fail to resize or save are logged and
    skipped. A failing base capture propagates and no size is attempted.
    Results keep the order of ``sizes``.
    """
    output_dir = Path(output_dir) if output_dir else Path.cwd() / "screenshots"
    options = options or CaptureOptions()

    logger.info("Capturing production screenshots for: %s", url)
    logger.info("Sizes: %s", ", ".join(sizes))

    base_screenshot = await capture_screenshot(
        url,
        device,
        replace(options, output_path=None, full_page=True, clip=None, fixed_size=None),
    )

    results: List[CaptureResult] = []
    for size_key in sizes:
        size = PRODUCTION_SIZES.get(size_key)
        if size is None:
            logger.warning("Unknown size preset: %s, skipping...", size_key)
            continue

        try:
            resized = resize_image(base_screenshot, size, options.format, options.quality)
            path = save_screenshot(
                resized,
                output_dir / generate_filename(url, device, options.format, size_key),
            )
        except ScreenshotError as exc:
            logger.error("Failed to create %s: %s", size_key, exc)
            continue

        result = CaptureResult(size=size_key, dimensions=size, data=resized, path=path)
        results.append(result)
        logger.info("%s (%s): %s", size_key, size.label, result.file_size)

    return results
