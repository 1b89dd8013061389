import logging
import time
from typing import List, Optional, Union

from selenium.webdriver.remote.webdriver import WebDriver

from .browser_manager import BrowserManager
from .browser_manager.drivers import resize_to_screen
from .config_loader import ConfigLoader
from .controls import Control, SelectControl, make_hook
from .errors import UnsupportedVariantError
from .window_registry import WindowRegistry
from ..data_models import BrowserType, ByIndex, ByTitle, ByUrl, FocusTarget, Hook, Strategy

logger = logging.getLogger(__name__)


class BrowserInterface:
    """
    Facade over a single WebDriver session.

    The session is created on construction and released by `stop()`, which
    must be called exactly once. Using the interface as a context manager
    takes care of that on every exit path. Window focus is delegated to a
    WindowRegistry owned by this instance; everything else goes straight to
    the driver and driver errors are not caught here.
    """

    def __init__(self, browser_type: Union[str, BrowserType],
                 config_loader: Optional[ConfigLoader] = None,
                 browser_manager: Optional[BrowserManager] = None):
        self.config_loader = config_loader if config_loader else ConfigLoader()
        self.browser_manager = browser_manager if browser_manager else BrowserManager(self.config_loader)
        try:
            self.browser_type = BrowserType.parse(browser_type)
        except ValueError as e:
            raise UnsupportedVariantError(str(e)) from e
        self.driver: WebDriver = self.browser_manager.create_driver(self.browser_type)
        self.windows = WindowRegistry(self.driver)
        self.start()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()

    # Lifecycle

    def start(self) -> None:
        logger.info("Starting browser.")

    def stop(self) -> None:
        logger.info("Stopping automation.")
        self.driver.quit()

    def close_window(self) -> None:
        logger.info("Closing window.")
        self.driver.close()

    def pause(self, ms: int) -> None:
        logger.info(f"Pausing for {ms}ms via sleep.")
        time.sleep(ms / 1000.0)

    def interact(self, message: str) -> str:
        """Blocks until the operator types a response on stdin."""
        logger.info(f"Interaction via console prompt with message: {message}")
        return input(f"{message} ")

    # Navigation and window state

    def go(self, url: str) -> None:
        logger.info(f"Going to URL and switching to window: {url}")
        self.driver.get(url)
        self.driver.switch_to.window(self.driver.current_window_handle)

    def accept_dialog(self) -> None:
        logger.info("Accepting dialog.")
        self.driver.switch_to.alert.accept()

    def maximize(self) -> None:
        logger.info("Maximizing window")
        resize_to_screen(self.driver)

    @property
    def window_handles(self) -> List[str]:
        return list(self.driver.window_handles)

    # Focus

    def focus_by_index(self, index: int) -> str:
        logger.info(f"Focusing window by index: {index}")
        return self.windows.focus_by_index(index)

    def focus_by_title(self, title: str) -> str:
        logger.info(f"Focusing window by title: {title}")
        return self.windows.focus_by_title(title)

    def focus_by_url(self, url: str) -> str:
        logger.info(f"Focusing window by url: {url}")
        return self.windows.focus_by_url(url)

    def focus(self, target: FocusTarget) -> str:
        if isinstance(target, ByIndex):
            return self.focus_by_index(target.index)
        if isinstance(target, ByTitle):
            return self.focus_by_title(target.title)
        if isinstance(target, ByUrl):
            return self.focus_by_url(target.url)
        raise TypeError(f"Unsupported focus target: {target!r}")

    # Control factories

    def get_control(self, strategy: Union[Hook, Strategy, str], hook_string: Optional[str] = None) -> Control:
        return Control(self, make_hook(strategy, hook_string))

    def get_select(self, strategy: Union[Hook, Strategy, str], hook_string: Optional[str] = None) -> SelectControl:
        return SelectControl(self, make_hook(strategy, hook_string))
