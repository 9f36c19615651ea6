from datetime import date, datetime, timezone
from typing import Optional, Union
from urllib.parse import urlparse

from .presets import SizePreset


def domain_token(url: str) -> str:
    # file:, data: and about: URLs have no hostname and give an empty token.
    return (urlparse(url).hostname or "").replace(".", "-")


def today_utc() -> date:
    return datetime.now(timezone.utc).date()


def generate_filename(
    url: str,
    device: str,
    format: str = "png",
    size: Optional[Union[str, SizePreset]] = None,
    today: Optional[date] = None,
) -> str:
    """
    Build ``screenshot-<domain>-<device>[-<size>]-<YYYY-MM-DD>.<format>``.

    Only the calendar date is stamped, so runs on the same day reuse the name
    and the newest capture replaces the previous file.
    """
    stamp = (today or today_utc()).isoformat()

    size_str = ""
    if isinstance(size, SizePreset):
        size_str = f"-{size.label}"
    elif size:
        size_str = f"-{size}"

    return f"screenshot-{domain_token(url)}-{device}{size_str}-{stamp}.{format}"
