import os
from typing import Callable, Dict, List, Optional

import pytest
from selenium.common.exceptions import NoAlertPresentException, NoSuchWindowException, WebDriverException

from browser_facade.core.browser_interface import BrowserInterface
from browser_facade.core.config_loader import ConfigLoader


class FakeAlert:
    def __init__(self, driver: "FakeDriver", text: str):
        self._driver = driver
        self.text = text
        self.accepted = False

    def accept(self):
        self.accepted = True
        self._driver.alert = None


class FakeSwitchTo:
    def __init__(self, driver: "FakeDriver"):
        self._driver = driver

    def window(self, handle):
        self._driver.switch_calls.append(handle)
        if handle not in self._driver.windows:
            raise NoSuchWindowException(f"no such window: {handle}")
        self._driver.current = handle

    @property
    def alert(self):
        if self._driver.alert is None:
            raise NoAlertPresentException("no such alert")
        return self._driver.alert


class FakeDriver:
    """In-memory stand-in for a Selenium WebDriver with several windows."""

    def __init__(self, screen=(1920, 1080)):
        self.windows: Dict[str, Dict[str, str]] = {}
        self.current: Optional[str] = None
        self.switch_calls: List[str] = []
        self.alert: Optional[FakeAlert] = None
        self.screen = screen
        self.window_size = None
        self.implicit_wait = None
        self.quit_calls = 0
        self.reverse_handles = False
        self.on_get: Optional[Callable[[str], None]] = None
        self.switch_to = FakeSwitchTo(self)
        self._counter = 0

    # helpers used by tests

    def open_window(self, title: str = "", url: str = "about:blank", focus: bool = False) -> str:
        handle = f"handle-{self._counter}"
        self._counter += 1
        self.windows[handle] = {"title": title, "url": url}
        if self.current is None or focus:
            self.current = handle
        return handle

    def close_handle(self, handle: str) -> None:
        del self.windows[handle]

    def _current_window(self) -> Dict[str, str]:
        if self.current not in self.windows:
            raise NoSuchWindowException("no such window: target window already closed")
        return self.windows[self.current]

    # WebDriver surface

    @property
    def window_handles(self) -> List[str]:
        handles = list(self.windows)
        if self.reverse_handles:
            handles.reverse()
        return handles

    @property
    def current_window_handle(self) -> str:
        self._current_window()
        return self.current

    @property
    def title(self) -> str:
        return self._current_window()["title"]

    @property
    def current_url(self) -> str:
        return self._current_window()["url"]

    def get(self, url: str) -> None:
        self._current_window()["url"] = url
        if self.on_get is not None:
            self.on_get(url)

    def close(self) -> None:
        self._current_window()
        del self.windows[self.current]

    def quit(self) -> None:
        if self.quit_calls:
            raise WebDriverException("invalid session id")
        self.quit_calls += 1

    def implicitly_wait(self, seconds) -> None:
        self.implicit_wait = seconds

    def execute_script(self, script, *args):
        return list(self.screen)

    def set_window_size(self, width, height, windowHandle="current") -> None:
        self.window_size = (width, height)


class StubBrowserManager:
    """Hands out a prepared driver instead of starting a browser."""

    def __init__(self, driver):
        self.driver = driver
        self.requested = []

    def create_driver(self, browser_type):
        self.requested.append(browser_type)
        return self.driver


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for key in list(os.environ):
        if key.startswith("BROWSER_FACADE_") or key == "HEADLESS":
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def fake_driver():
    return FakeDriver()


@pytest.fixture
def config_loader(tmp_path):
    return ConfigLoader(settings={
        "perf": {"implicit_wait": 5},
        "browser": {
            "chrome_driver_log_path": str(tmp_path / "log" / "chromedriver.log"),
            "webdriver_manager_cache_path": str(tmp_path / "wdm"),
        },
        "logging": {"console_handler": {"enabled": False}},
    })


@pytest.fixture
def browser(fake_driver, config_loader):
    fake_driver.open_window(title="Home", url="https://example.com/")
    return BrowserInterface("chrome", config_loader=config_loader,
                            browser_manager=StubBrowserManager(fake_driver))
