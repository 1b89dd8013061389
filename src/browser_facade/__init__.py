"""
browser_facade: one Selenium session behind a small facade.

`BrowserInterface` owns the session and hands window focus to a
`WindowRegistry`, which keeps a stable index for every window it has seen.
"""

from .core import BrowserInterface, BrowserManager, ConfigLoader, WindowRegistry
from .core.errors import (
    BrowserFacadeError,
    ConfigurationError,
    DialogAbsentError,
    StaleHandleError,
    UnsupportedVariantError,
    WindowNotFoundError,
)
from .data_models import BrowserType, ByIndex, ByTitle, ByUrl, Hook, Strategy

__all__ = [
    "BrowserInterface",
    "BrowserManager",
    "ConfigLoader",
    "WindowRegistry",
    "BrowserFacadeError",
    "ConfigurationError",
    "DialogAbsentError",
    "StaleHandleError",
    "UnsupportedVariantError",
    "WindowNotFoundError",
    "BrowserType",
    "ByIndex",
    "ByTitle",
    "ByUrl",
    "Hook",
    "Strategy",
]
