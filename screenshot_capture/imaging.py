"""
Image Resizer and Persistence
Cover-fit resizing with Pillow and writing screenshots to disk.
"""

import io
import logging
from pathlib import Path
from typing import Union

from PIL import Image, ImageOps

from .errors import PersistenceError, ResizeError
from .presets import SizePreset

logger = logging.getLogger(__name__)

# Horizontally centered, pinned to the top edge.
TOP_CENTERING = (0.5, 0.0)
PNG_COMPRESS_LEVEL = 9


def resize_image(data: bytes, size: SizePreset, format: str = "png", quality: int = 90) -> bytes:
    """
    Scale ``data`` to cover exactly ``size`` and re-encode it.

    Excess is cropped from the sides and the bottom, never from the top, so
    tall full-page captures keep their header visible at any aspect ratio.

    Raises:
        ResizeError: If the source cannot be decoded or the result encoded.
    """
    try:
        with Image.open(io.BytesIO(data)) as source:
            fitted = ImageOps.fit(
                source,
                (size.width, size.height),
                method=Image.LANCZOS,
                centering=TOP_CENTERING,
            )

        buffer = io.BytesIO()
        if format == "jpeg":
            fitted.convert("RGB").save(buffer, format="JPEG", quality=quality)
        else:
            fitted.save(buffer, format="PNG", compress_level=PNG_COMPRESS_LEVEL)
        return buffer.getvalue()
    except Exception as exc:
        raise ResizeError(f"Failed to resize image: {exc}") from exc


def save_screenshot(data: bytes, path: Union[str, Path]) -> Path:
    """Write ``data`` to ``path``, creating parent directories and overwriting."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as exc:
        raise PersistenceError(f"Failed to save screenshot: {exc}") from exc
    logger.debug("Wrote %d bytes to %s", len(data), path)
    return path
