"""Session facade, driver factory, settings and window bookkeeping."""

from .browser_interface import BrowserInterface
from .browser_manager import BrowserManager
from .config_loader import ConfigLoader
from .controls import Control, SelectControl
from .window_registry import WindowRegistry

__all__ = [
    "BrowserInterface",
    "BrowserManager",
    "ConfigLoader",
    "Control",
    "SelectControl",
    "WindowRegistry",
]
