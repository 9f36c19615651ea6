"""Exceptions raised while capturing, resizing and saving screenshots."""


class ScreenshotError(Exception):
    """Base class for every failure this package raises."""


class UnknownDeviceError(ScreenshotError):
    pass


class UnknownSizeError(ScreenshotError):
    pass


class CaptureError(ScreenshotError):
    """A browser-side stage (launch, page setup, screenshot) failed."""


class NavigationError(CaptureError):
    """The page did not reach network idle within the navigation timeout."""


class SelectorTimeoutError(CaptureError):
    pass


class ResizeError(ScreenshotError):
    pass


class PersistenceError(ScreenshotError):
    pass
