import logging
from typing import Union, Optional

from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.firefox.options import Options as FirefoxOptions
from selenium.webdriver.firefox.firefox_profile import FirefoxProfile

logger = logging.getLogger(__name__)


def configure_driver_options(
    options: Union[ChromeOptions, FirefoxOptions],
    browser_type: str,
    *,
    headless: bool,
    additional_options: Optional[list],
) -> Union[ChromeOptions, FirefoxOptions]:
    if headless:
        if browser_type == 'chrome':
            options.add_argument('--headless=new')
        else:
            options.add_argument('--headless')
        options.add_argument('--disable-gpu')

    if isinstance(additional_options, list):
        for opt in additional_options:
            if isinstance(opt, str):
                options.add_argument(opt)
            else:
                logger.warning(f"Ignoring non-string driver option: {opt}")
    elif additional_options is not None:
        logger.warning(f"'driver_options' in config is not a list: {additional_options}")

    return options


def apply_firefox_settings(
    options: FirefoxOptions,
    *,
    profile_dir: Optional[str],
    binary_path: Optional[str],
) -> FirefoxOptions:
    if profile_dir:
        options.profile = FirefoxProfile(profile_dir)
    if binary_path:
        options.binary_location = binary_path
    return options
