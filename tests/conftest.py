import io

import pytest
from PIL import Image

import screenshot_capture.capture as capture_module


def make_png(width=120, height=360, top=(255, 0, 0), bottom=(0, 0, 255)):
    """A PNG whose upper third is ``top`` and the rest ``bottom``."""
    image = Image.new("RGB", (width, height), bottom)
    image.paste(top, (0, 0, width, height // 3))
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


class FakeRequest:
    def __init__(self, url, resource_type):
        self.url = url
        self.resource_type = resource_type


class FakeRoute:
    def __init__(self, request):
        self.request = request
        self.outcome = None

    async def abort(self):
        self.outcome = "abort"

    async def continue_(self):
        self.outcome = "continue"


class FakePage:
    def __init__(self, session):
        self.session = session
        self.closed = False

    async def route(self, pattern, handler):
        self.session.routes.append((pattern, handler))

    async def goto(self, url, wait_until=None, timeout=None):
        self.session.calls.append(("goto", url, wait_until, timeout))
        if self.session.goto_error:
            raise self.session.goto_error

    async def wait_for_selector(self, selector, timeout=None):
        self.session.calls.append(("wait_for_selector", selector, timeout))
        if self.session.selector_error:
            raise self.session.selector_error

    async def wait_for_timeout(self, timeout):
        self.session.calls.append(("wait_for_timeout", timeout))

    async def screenshot(self, **kwargs):
        self.session.calls.append(("screenshot", kwargs))
        if self.session.screenshot_error:
            raise self.session.screenshot_error
        return self.session.image

    async def close(self):
        if self.session.page_close_error:
            raise self.session.page_close_error
        self.closed = True


class FakeContext:
    def __init__(self, session):
        self.session = session

    async def new_page(self):
        page = FakePage(self.session)
        self.session.pages.append(page)
        return page


class FakeBrowser:
    def __init__(self, session):
        self.session = session
        self.closed = False

    async def new_context(self, **kwargs):
        self.session.context_kwargs.append(kwargs)
        return FakeContext(self.session)

    async def close(self):
        self.closed = True


class FakeChromium:
    def __init__(self, session):
        self.session = session

    async def launch(self, **kwargs):
        self.session.launch_kwargs.append(kwargs)
        browser = FakeBrowser(self.session)
        self.session.browsers.append(browser)
        return browser


class FakePlaywrightManager:
    def __init__(self, session):
        self.session = session
        self.chromium = FakeChromium(session)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Records every browser interaction made during a test."""

    def __init__(self):
        self.image = make_png()
        self.goto_error = None
        self.selector_error = None
        self.screenshot_error = None
        self.page_close_error = None
        self.calls = []
        self.routes = []
        self.pages = []
        self.browsers = []
        self.launch_kwargs = []
        self.context_kwargs = []

    def calls_named(self, name):
        return [call for call in self.calls if call[0] == name]


@pytest.fixture
def browser_session(monkeypatch):
    session = FakeSession()
    monkeypatch.setattr(capture_module, "async_playwright", lambda: FakePlaywrightManager(session))
    return session
