import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError
from selenium.webdriver.remote.webdriver import WebDriver

from ..config_loader import ConfigLoader
from ..errors import ConfigurationError, UnsupportedVariantError
from ...data_models import BrowserType, SessionSettings
from .constants import DEFAULT_WDM_CACHE_PATH, default_chrome_driver_log_path
from .options import configure_driver_options, apply_firefox_settings
from .drivers import init_chrome_driver, init_firefox_driver, resize_to_screen

logger = logging.getLogger(__name__)


class BrowserManager:
    """Builds one ready-to-use WebDriver per call from cascading configuration."""

    def __init__(self, config_loader: Optional[ConfigLoader] = None):
        self.config_loader = config_loader if config_loader else ConfigLoader()

        # webdriver_manager download cache
        wdm_cache = self.config_loader.get_browser_setting('webdriver_manager_cache_path', str(DEFAULT_WDM_CACHE_PATH))
        self.wdm_cache_path = Path(wdm_cache)

    def load_session_settings(self) -> SessionSettings:
        implicit_wait = self.config_loader.get_cascading_setting('perf.implicit_wait')
        if implicit_wait is None:
            raise ConfigurationError("Required setting 'perf.implicit_wait' is not configured.")
        try:
            return SessionSettings(
                implicit_wait=implicit_wait,
                headless=self.config_loader.is_headless(),
                firefox_profile=self.config_loader.get_browser_setting('firefox_profile'),
                firefox_binary=self.config_loader.get_browser_setting('firefox_binary'),
                gecko_driver_path=self.config_loader.get_browser_setting('gecko_driver_path'),
                chrome_driver_log_path=self.config_loader.get_browser_setting(
                    'chrome_driver_log_path', str(default_chrome_driver_log_path())),
                chrome_driver_path=self.config_loader.get_browser_setting('chrome_driver_path'),
                driver_options=self.config_loader.get_browser_setting('driver_options', []),
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid browser session settings: {e}") from e

    def create_driver(self, browser_type: Union[str, BrowserType]) -> WebDriver:
        try:
            browser_type = BrowserType.parse(browser_type)
        except ValueError as e:
            raise UnsupportedVariantError(str(e)) from e

        if browser_type in (BrowserType.IE, BrowserType.SAFARI):
            raise UnsupportedVariantError(f"Selenium: {browser_type.value} browser not yet supported.")

        settings = self.load_session_settings()
        self.wdm_cache_path.mkdir(parents=True, exist_ok=True)

        if browser_type == BrowserType.FIREFOX:
            driver = self._create_firefox(settings)
        else:
            driver = self._create_chrome(settings)

        try:
            if not settings.headless:
                resize_to_screen(driver)
            driver.implicitly_wait(settings.implicit_wait)
        except Exception:
            logger.error("Failed to prepare the new WebDriver session; quitting it.", exc_info=True)
            driver.quit()
            raise

        logger.info(f"{browser_type.value.capitalize()} WebDriver initialized successfully.")
        return driver

    def _create_firefox(self, settings: SessionSettings) -> WebDriver:
        from selenium.webdriver.firefox.options import Options as FirefoxOptions  # local import to avoid heavy deps at import time
        _require_existing(settings.firefox_profile, 'browser.firefox_profile', directory=True, required=True)
        _require_existing(settings.firefox_binary, 'browser.firefox_binary', required=True)
        _require_existing(settings.gecko_driver_path, 'browser.gecko_driver_path')

        options = configure_driver_options(
            FirefoxOptions(),
            'firefox',
            headless=settings.headless,
            additional_options=settings.driver_options,
        )
        apply_firefox_settings(options, profile_dir=settings.firefox_profile, binary_path=settings.firefox_binary)
        logger.info(f"Instantiating Firefox with profile: {settings.firefox_profile} "
                    f"and binary path: {settings.firefox_binary}")
        try:
            return init_firefox_driver(options, configured_path=settings.gecko_driver_path,
                                       cache_path=self.wdm_cache_path)
        except Exception as e:
            logger.error(f"Failed to initialize Firefox driver: {e}", exc_info=True)
            raise

    def _create_chrome(self, settings: SessionSettings) -> WebDriver:
        from selenium.webdriver.chrome.options import Options as ChromeOptions  # local import
        _require_existing(settings.chrome_driver_path, 'browser.chrome_driver_path')

        options = configure_driver_options(
            ChromeOptions(),
            'chrome',
            headless=settings.headless,
            additional_options=settings.driver_options,
        )
        log_path = Path(settings.chrome_driver_log_path or default_chrome_driver_log_path())
        logger.info(f"Instantiating Chrome with log path: {log_path} "
                    f"and driver path: {settings.chrome_driver_path or '<auto>'}")
        try:
            return init_chrome_driver(options, configured_path=settings.chrome_driver_path,
                                      log_path=log_path, cache_path=self.wdm_cache_path)
        except Exception as e:
            logger.error(f"Failed to initialize Chrome driver: {e}", exc_info=True)
            raise


def _require_existing(path_str: Optional[str], setting: str, directory: bool = False, required: bool = False) -> None:
    """Checks a configured path exists; unset is only allowed when not required."""
    if not path_str:
        if required:
            raise ConfigurationError(f"Required setting '{setting}' is not configured.")
        return
    path = Path(path_str).expanduser()
    if directory and not path.is_dir():
        raise ConfigurationError(f"'{setting}' points to a missing directory: {path}")
    if not directory and not path.is_file():
        raise ConfigurationError(f"'{setting}' points to a missing file: {path}")
