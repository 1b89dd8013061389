"""
Browser manager package.

Public API:
- BrowserManager: driver bootstrap that turns a BrowserType into a configured Selenium WebDriver.
"""

from .service import BrowserManager

__all__ = ["BrowserManager"]
