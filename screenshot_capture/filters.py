"""
Request filtering applied while a page loads.

Heavy media and tracker requests are aborted so the network settles sooner
and autoplaying video never ends up in the capture.
"""

import logging

from playwright.async_api import Request, Route

logger = logging.getLogger(__name__)

BLOCKED_RESOURCE_TYPES = {"media", "websocket"}
VIDEO_MARKERS = (".mp4", ".webm")
TRACKER_MARKERS = ("analytics", "tracking")


def should_block_request(request: Request) -> bool:
    try:
        resource_type = request.resource_type
        url = request.url

        if resource_type in BLOCKED_RESOURCE_TYPES:
            return True
        if resource_type == "image" and any(marker in url for marker in VIDEO_MARKERS):
            return True
        return any(marker in url for marker in TRACKER_MARKERS)
    except Exception as exc:
        # Fail open: a broken filter must never stall the capture.
        logger.debug("Request filter error, allowing request: %s", exc)
        return False


async def block_unwanted_resources(route: Route) -> None:
    if should_block_request(route.request):
        await route.abort()
    else:
        await route.continue_()
