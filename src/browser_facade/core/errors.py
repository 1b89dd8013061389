"""
Exceptions raised by browser_facade.

Driver-reported conditions are not wrapped: a closed window surfaces as
Selenium's NoSuchWindowException and a missing dialog as
NoAlertPresentException. The aliases below name them for callers.
"""

from selenium.common.exceptions import NoAlertPresentException, NoSuchWindowException


class BrowserFacadeError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(BrowserFacadeError):
    """A required setting is missing or invalid."""


class UnsupportedVariantError(BrowserFacadeError):
    """The requested browser type has no driver implementation."""


class WindowNotFoundError(BrowserFacadeError, NoSuchWindowException):
    """No window answers to the requested index, title or URL."""


StaleHandleError = NoSuchWindowException
DialogAbsentError = NoAlertPresentException

__all__ = [
    "BrowserFacadeError",
    "ConfigurationError",
    "UnsupportedVariantError",
    "WindowNotFoundError",
    "StaleHandleError",
    "DialogAbsentError",
]
