import io

import pytest
from conftest import make_png
from PIL import Image

from screenshot_capture.errors import PersistenceError, ResizeError
from screenshot_capture.imaging import resize_image, save_screenshot
from screenshot_capture.presets import SizePreset


def is_red(pixel):
    r, g, b = pixel
    return r > 240 and g < 15 and b < 15


def open_image(data):
    image = Image.open(io.BytesIO(data))
    image.load()
    return image


@pytest.mark.parametrize("source", [(120, 360), (800, 200), (50, 50)])
def test_resize_yields_exact_dimensions(source):
    data = make_png(*source)
    resized = open_image(resize_image(data, SizePreset(300, 200)))
    assert resized.size == (300, 200)
    assert resized.format == "PNG"


def test_resize_keeps_top_of_tall_page():
    # Upper third red: a 1:1 crop of a 1:3 page must be entirely red.
    data = make_png(120, 360)
    resized = open_image(resize_image(data, SizePreset(60, 60))).convert("RGB")
    for y in (0, 20, 40):
        assert is_red(resized.getpixel((30, y)))


def test_resize_to_jpeg():
    resized = open_image(resize_image(make_png(), SizePreset(400, 300), "jpeg", 70))
    assert resized.format == "JPEG"
    assert resized.size == (400, 300)


def test_resize_rejects_garbage():
    with pytest.raises(ResizeError):
        resize_image(b"definitely not an image", SizePreset(10, 10))


def test_save_creates_missing_directories(tmp_path):
    target = tmp_path / "a" / "b" / "c" / "shot.png"
    assert save_screenshot(b"png-bytes", target) == target
    assert target.read_bytes() == b"png-bytes"


def test_save_overwrites(tmp_path):
    target = tmp_path / "shot.png"
    save_screenshot(b"old", target)
    save_screenshot(b"new", target)
    assert target.read_bytes() == b"new"


def test_save_failure_is_wrapped(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("not a directory")
    with pytest.raises(PersistenceError):
        save_screenshot(b"data", blocker / "shot.png")
