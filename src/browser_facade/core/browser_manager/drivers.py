import logging
import shutil
from pathlib import Path
from typing import Optional, Tuple

from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.firefox.options import Options as FirefoxOptions
from selenium.webdriver.firefox.service import Service as FirefoxService
from selenium.webdriver.remote.webdriver import WebDriver

from webdriver_manager.chrome import ChromeDriverManager
from webdriver_manager.firefox import GeckoDriverManager
from webdriver_manager.core.driver_cache import DriverCacheManager

logger = logging.getLogger(__name__)

SCREEN_SIZE_SCRIPT = "return [window.screen.width, window.screen.height];"


def init_chrome_driver(
    options: ChromeOptions,
    *,
    configured_path: Optional[str],
    log_path: Path,
    cache_path: Path,
) -> WebDriver:
    log_path.parent.mkdir(parents=True, exist_ok=True)
    local_driver = configured_path or shutil.which('chromedriver')
    if local_driver:
        logger.info(f"Using local chromedriver at: {local_driver}")
        service = ChromeService(executable_path=local_driver, log_output=str(log_path))
    else:
        logger.info("Local chromedriver not found. Falling back to webdriver_manager (requires internet).")
        driver_path = ChromeDriverManager(cache_manager=DriverCacheManager(root_dir=str(cache_path))).install()
        service = ChromeService(executable_path=driver_path, log_output=str(log_path))
    return webdriver.Chrome(service=service, options=options)


def init_firefox_driver(
    options: FirefoxOptions,
    *,
    configured_path: Optional[str],
    cache_path: Path,
) -> WebDriver:
    local_driver = configured_path or shutil.which('geckodriver')
    if local_driver:
        logger.info(f"Using local geckodriver at: {local_driver}")
        service = FirefoxService(executable_path=local_driver)
    else:
        logger.info("Local geckodriver not found. Falling back to webdriver_manager (requires internet).")
        driver_path = GeckoDriverManager(cache_manager=DriverCacheManager(root_dir=str(cache_path))).install()
        service = FirefoxService(executable_path=driver_path)
    return webdriver.Firefox(service=service, options=options)


def screen_size(driver: WebDriver) -> Tuple[int, int]:
    """Screen dimensions as reported by the browser itself."""
    width, height = driver.execute_script(SCREEN_SIZE_SCRIPT)
    return int(width), int(height)


def resize_to_screen(driver: WebDriver) -> Tuple[int, int]:
    width, height = screen_size(driver)
    driver.set_window_size(width, height)
    logger.debug(f"Resized window to screen size {width}x{height}")
    return width, height
